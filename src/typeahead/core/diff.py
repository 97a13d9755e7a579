"""Set-difference helpers over item sequences, keyed by id."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from typeahead.domain.types import Item


def diff(a: Iterable[Item], b: Iterable[Item]) -> list[Item]:
    """Return the items of ``a`` whose id does not appear in ``b``, in ``a``'s order."""
    excluded = {item.id for item in b}
    return [item for item in a if item.id not in excluded]


def default_box(available: Sequence[Item], selected: Sequence[Item], box_length: int) -> list[Item]:
    """First ``box_length`` unselected items in pool order, one per id."""
    box: list[Item] = []
    seen: set[str] = set()
    for item in diff(available, selected):
        if len(box) >= box_length:
            break
        if item.id in seen:
            continue
        seen.add(item.id)
        box.append(item)
    return box


def index_by_id(items: Iterable[Item]) -> dict[str, Item]:
    """Map ids to items, keeping the first occurrence of a repeated id."""
    index: dict[str, Item] = {}
    for item in items:
        index.setdefault(item.id, item)
    return index
