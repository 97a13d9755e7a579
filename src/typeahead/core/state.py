"""Immutable state of the selection state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from typeahead.domain.events.types import Effect
from typeahead.domain.types import Item, Mode

from .config import SelectConfig
from .diff import diff, index_by_id


@dataclass(frozen=True)
class SelectionState:
    """Snapshot of the widget state.

    ``available`` is the last pool the host supplied. Events that bring a
    different pool rebuild ``box_ids`` from it; reads still re-resolve the ids
    so a box never yields an already selected item.

    ``swallow_enter`` is set by a commit and cleared by the next event, so only
    an Enter arriving right after the commit is swallowed.
    """

    config: SelectConfig
    mode: Mode = Mode.BLURRED
    query: str = ""
    selected: tuple[Item, ...] = ()
    highlight: int = -1
    box_ids: tuple[str, ...] = ()
    available: tuple[Item, ...] = ()
    swallow_enter: bool = False

    @property
    def unselected(self) -> list[Item]:
        return diff(self.available, self.selected)

    @property
    def at_capacity(self) -> bool:
        return len(self.selected) >= self.config.max_items

    def boxed(self) -> list[Item]:
        """Current box rows, resolved against the unselected pool."""
        index = index_by_id(self.unselected)
        return [index[item_id] for item_id in self.box_ids if item_id in index]

    def is_selected(self, item_id: str) -> bool:
        return any(item.id == item_id for item in self.selected)


class Transition(NamedTuple):
    """Result of handling one event: the new state and its outward effects."""

    state: SelectionState
    effects: tuple[Effect, ...] = ()
