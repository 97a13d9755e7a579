"""
Selection state machine.

Every entry point is a pure function ``(state, event) -> Transition``: it
never mutates its input and signals outward effects only through the
returned tuple. Interaction errors (invalid highlight, duplicate commit,
commit at capacity) are absorbed as no-ops.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Any

from typeahead.domain.events.types import (
    BlurAcknowledged,
    FocusAcknowledged,
    ItemAdded,
    ItemRemoved,
)
from typeahead.domain.types import Item, KeyCode, Mode
from typeahead.logger import get_logger

from .config import BackspaceRemoval, BoxAfterCommit, SelectConfig
from .diff import default_box, index_by_id
from .state import SelectionState, Transition

logger = get_logger("machine")


def initialize(
    max_items: int | None = None,
    box_length: int | None = None,
    initial_selected_ids: Iterable[str] = (),
    available_items: Iterable[Item] = (),
    *,
    config: SelectConfig | None = None,
    **options: Any,
) -> SelectionState:
    """
    Create the state of a freshly constructed widget (mode BLURRED).

    Args:
        max_items: Maximum number of selected items (>= 1)
        box_length: Maximum number of box rows (>= 1)
        initial_selected_ids: Ids selected up front, in order
        available_items: The host's candidate pool
        config: Prebuilt configuration; replaces max_items, box_length and options
        options: Remaining ``SelectConfig`` fields (variant flags, threshold, rank_fn)

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    if config is None:
        config = SelectConfig.create(max_items=max_items, box_length=box_length, **options)

    available = tuple(available_items)
    index = index_by_id(available)
    selected: list[Item] = []
    for item_id in initial_selected_ids:
        if item_id not in index:
            logger.warning(f"Initial selection {item_id!r} is not in the pool, skipping")
            continue
        if any(item.id == item_id for item in selected):
            logger.warning(f"Initial selection {item_id!r} repeated, skipping")
            continue
        if len(selected) >= config.max_items:
            logger.warning(f"Initial selection truncated to max_items={config.max_items}")
            break
        selected.append(index[item_id])

    state = SelectionState(
        config=config,
        selected=tuple(selected),
        highlight=config.highlight_floor,
        available=available,
    )
    return replace(state, box_ids=_default_box_ids(state))


def on_text_changed(
    state: SelectionState,
    text: str,
    available_items: Iterable[Item] | None = None,
) -> Transition:
    """Handle a new raw input string reported by the host."""
    text = text or ""
    state = _arrive(state, available_items)
    floor = state.config.highlight_floor

    if not text:
        logger.debug("Text cleared, entering IDLE")
        return Transition(replace(state, mode=Mode.IDLE, query="", box_ids=(), highlight=floor))

    new_state = replace(state, mode=Mode.EDITING, query=text, highlight=floor)
    return Transition(replace(new_state, box_ids=_ranked_box_ids(new_state, text)))


def on_key_pressed(
    state: SelectionState,
    key: KeyCode | str,
    available_items: Iterable[Item] | None = None,
) -> Transition:
    """Handle a decoded key press (a ``KeyCode`` or a host key name)."""
    if not isinstance(key, KeyCode):
        key = KeyCode.from_name(key)
    swallow = state.swallow_enter
    state = _arrive(state, available_items)

    if state.mode is Mode.BLURRED:
        return Transition(state)

    if key is KeyCode.ENTER and swallow:
        logger.debug("Swallowing Enter right after a commit")
        return Transition(replace(state, mode=Mode.IDLE))

    if key is KeyCode.BACKSPACE:
        return _remove_last(state)

    if state.at_capacity:
        logger.debug(f"Ignoring {key.name}: selection is full")
        return Transition(state)

    floor = state.config.highlight_floor
    boxed = state.boxed()

    if key is KeyCode.ARROW_UP:
        return Transition(replace(state, highlight=max(floor, state.highlight - 1)))

    if key is KeyCode.ARROW_DOWN:
        return Transition(replace(state, highlight=max(floor, min(len(boxed) - 1, state.highlight + 1))))

    if key is KeyCode.ENTER:
        if 0 <= state.highlight < len(boxed):
            return _commit(state, boxed[state.highlight])
        logger.debug(f"Enter ignored: no box row at highlight {state.highlight}")
        return Transition(state)

    return Transition(state)


def on_item_picked(
    state: SelectionState,
    item_id: str,
    available_items: Iterable[Item] | None = None,
) -> Transition:
    """Commit an item chosen with the pointer, regardless of the highlight."""
    state = _arrive(state, available_items)
    item = index_by_id(state.unselected).get(item_id)
    if item is None:
        logger.debug(f"Pick of {item_id!r} ignored: unknown or already selected")
        return Transition(state)
    return _commit(state, item)


def on_focus(state: SelectionState, available_items: Iterable[Item] | None = None) -> Transition:
    """The input gained focus: show the default box."""
    state = _arrive(state, available_items)
    new_state = replace(state, mode=Mode.INITIAL, highlight=state.config.highlight_floor)
    return Transition(replace(new_state, box_ids=_default_box_ids(new_state)), (FocusAcknowledged(),))


def on_blur(state: SelectionState, available_items: Iterable[Item] | None = None) -> Transition:
    """The input lost focus. Applying it twice yields the same state."""
    state = _arrive(state, available_items)
    new_state = replace(state, mode=Mode.BLURRED, highlight=state.config.highlight_floor)
    return Transition(replace(new_state, box_ids=_default_box_ids(new_state)), (BlurAcknowledged(),))


def selected_ids(state: SelectionState) -> list[str]:
    return [item.id for item in state.selected]


def boxed_items(state: SelectionState, available_items: Iterable[Item] | None = None) -> list[Item]:
    return _with_pool(state, available_items).boxed()


def mode(state: SelectionState) -> Mode:
    return state.mode


def highlight_position(state: SelectionState) -> int | None:
    """Highlighted box index, or None when nothing is highlighted."""
    return state.highlight if state.highlight >= 0 else None


def _commit(state: SelectionState, item: Item) -> Transition:
    if state.is_selected(item.id):
        logger.debug(f"Commit of {item.id!r} ignored: already selected")
        return Transition(state)
    if state.at_capacity:
        logger.debug(f"Commit of {item.id!r} ignored: selection is full")
        return Transition(state)

    new_state = replace(
        state,
        selected=state.selected + (item,),
        mode=Mode.CLEARED,
        query="",
        highlight=state.config.highlight_floor,
        swallow_enter=state.config.swallow_enter_after_commit,
    )
    if state.config.box_after_commit is BoxAfterCommit.DEFAULTS:
        box_ids = _default_box_ids(new_state)
    else:
        box_ids = ()
    logger.debug(f"Committed {item.id!r} ({len(new_state.selected)}/{state.config.max_items})")
    return Transition(replace(new_state, box_ids=box_ids), (ItemAdded(item.id),))


def _remove_last(state: SelectionState) -> Transition:
    policy = state.config.backspace_removal
    if policy is BackspaceRemoval.DISABLED or state.query or not state.selected:
        return Transition(state)
    if policy is BackspaceRemoval.IDLE_ONLY and state.mode is not Mode.IDLE:
        return Transition(state)

    removed = state.selected[-1]
    new_state = replace(state, selected=state.selected[:-1], highlight=state.config.highlight_floor)
    logger.debug(f"Backspace removed {removed.id!r}")
    return Transition(replace(new_state, box_ids=_box_ids_for_mode(new_state)), (ItemRemoved(removed.id),))


def _box_ids_for_mode(state: SelectionState) -> tuple[str, ...]:
    if state.mode is Mode.EDITING:
        return _ranked_box_ids(state, state.query)
    if state.mode is Mode.IDLE:
        return ()
    if state.mode is Mode.CLEARED and state.config.box_after_commit is BoxAfterCommit.CLEARED:
        return ()
    return _default_box_ids(state)


def _default_box_ids(state: SelectionState) -> tuple[str, ...]:
    return tuple(item.id for item in default_box(state.available, state.selected, state.config.box_length))


def _ranked_box_ids(state: SelectionState, query: str) -> tuple[str, ...]:
    config = state.config
    unselected = state.unselected
    ranked: Sequence[Item] = config.rank_fn(query, unselected, config.box_length, config.threshold)

    # A custom rank_fn must not be able to put selected or foreign items in the box.
    allowed = {item.id for item in unselected}
    box_ids: list[str] = []
    for item in ranked:
        if len(box_ids) >= config.box_length:
            break
        if item.id in allowed and item.id not in box_ids:
            box_ids.append(item.id)
    return tuple(box_ids)


def _arrive(state: SelectionState, available_items: Iterable[Item] | None) -> SelectionState:
    # Every event ends the window in which an Enter is swallowed.
    state = _with_pool(state, available_items)
    if state.swallow_enter:
        state = replace(state, swallow_enter=False)
    return state


def _with_pool(state: SelectionState, available_items: Iterable[Item] | None) -> SelectionState:
    if available_items is None:
        return state
    available = tuple(available_items)
    if _same_pool(available, state.available):
        return state

    # A different pool invalidates the box: rebuild it for the current mode.
    logger.debug(f"Pool changed ({len(state.available)} -> {len(available)} items), rebuilding box")
    new_state = replace(state, available=available, highlight=state.config.highlight_floor)
    return replace(new_state, box_ids=_box_ids_for_mode(new_state))


def _same_pool(a: Sequence[Item], b: Sequence[Item]) -> bool:
    return len(a) == len(b) and all(x is y for x, y in zip(a, b))
