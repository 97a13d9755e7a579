"""
Typeahead core: the selection state machine and the fuzzy ranking engine.

Example:
    ```python
    from typeahead.core import initialize, on_focus, on_text_changed, on_key_pressed
    from typeahead.domain import Item, KeyCode

    pool = [Item("apple"), Item("banana"), Item("cherry")]
    state = initialize(3, 5, [], pool)
    state, _ = on_focus(state)
    state, _ = on_text_changed(state, "ap")
    state, _ = on_key_pressed(state, KeyCode.ARROW_DOWN)
    state, effects = on_key_pressed(state, KeyCode.ENTER)  # (ItemAdded("apple"),)
    ```
"""

from .catalog import load_catalog, parse_catalog
from .config import BackspaceRemoval, BoxAfterCommit, HighlightReset, SelectConfig, Variant
from .diff import default_box, diff
from .errors import CatalogError, ConfigurationError, TypeaheadError
from .machine import (
    boxed_items,
    highlight_position,
    initialize,
    mode,
    on_blur,
    on_focus,
    on_item_picked,
    on_key_pressed,
    on_text_changed,
    selected_ids,
)
from .ranking import DEFAULT_THRESHOLD, RankFn, rank, rank_with_scores, score_item
from .state import SelectionState, Transition

__all__ = [
    "BackspaceRemoval",
    "BoxAfterCommit",
    "CatalogError",
    "ConfigurationError",
    "DEFAULT_THRESHOLD",
    "HighlightReset",
    "RankFn",
    "SelectConfig",
    "SelectionState",
    "Transition",
    "TypeaheadError",
    "Variant",
    "boxed_items",
    "default_box",
    "diff",
    "highlight_position",
    "initialize",
    "load_catalog",
    "mode",
    "on_blur",
    "on_focus",
    "on_item_picked",
    "on_key_pressed",
    "on_text_changed",
    "parse_catalog",
    "rank",
    "rank_with_scores",
    "score_item",
    "selected_ids",
]
