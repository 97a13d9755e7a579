"""Configuration for the selection state machine.

The widget variants differ only in a handful of behaviors; each one is a
named flag here instead of a separate state machine.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from typeahead.logger import get_logger

from .errors import ConfigurationError
from .ranking import DEFAULT_THRESHOLD, RankFn, rank

logger = get_logger("config")


class HighlightReset(Enum):
    """Value the highlight position resets to whenever the box is rebuilt."""

    NONE = -1
    """Nothing is highlighted until the user presses an arrow key."""
    FIRST = 0
    """The first box row is highlighted right away."""


class BackspaceRemoval(str, Enum):
    """When backspace on an empty query removes the last selected item."""

    EMPTY_QUERY = "empty_query"
    """In every focused mode, as long as the query is empty."""
    IDLE_ONLY = "idle_only"
    """Only in IDLE mode (the query was cleared by the user)."""
    DISABLED = "disabled"
    """Never; backspace is always text editing."""


class BoxAfterCommit(str, Enum):
    """Box contents right after an item is committed."""

    DEFAULTS = "defaults"
    """The first unselected items in pool order."""
    CLEARED = "cleared"
    """Empty until the next text change."""


class Variant(str, Enum):
    """Named presets matching the widget flavors hosts usually build."""

    SINGLE = "single"
    """Single active query: first row highlighted, backspace removal only when idle."""
    INLINE = "inline"
    """Always-query input: box cleared after a commit, no Enter debouncing."""
    CALLBACK = "callback"
    """Callback-driven widget: the defaults of ``SelectConfig``."""


_VARIANT_PRESETS: dict[Variant, dict[str, Any]] = {
    Variant.SINGLE: {
        "highlight_reset": HighlightReset.FIRST,
        "backspace_removal": BackspaceRemoval.IDLE_ONLY,
        "swallow_enter_after_commit": True,
        "box_after_commit": BoxAfterCommit.DEFAULTS,
    },
    Variant.INLINE: {
        "highlight_reset": HighlightReset.NONE,
        "backspace_removal": BackspaceRemoval.EMPTY_QUERY,
        "swallow_enter_after_commit": False,
        "box_after_commit": BoxAfterCommit.CLEARED,
    },
    Variant.CALLBACK: {},
}


class SelectConfig(BaseModel):
    """Construction-time configuration, constant for the widget's life."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    max_items: int = Field(..., ge=1, description="Maximum number of selected items")
    box_length: int = Field(..., ge=1, description="Maximum number of box rows")
    threshold: float = Field(
        DEFAULT_THRESHOLD, ge=0.0, le=1.0, description="Ranking acceptance threshold (lower is stricter)"
    )
    highlight_reset: HighlightReset = Field(HighlightReset.NONE, description="Highlight value after a reset")
    backspace_removal: BackspaceRemoval = Field(
        BackspaceRemoval.EMPTY_QUERY, description="When backspace removes the last selection"
    )
    swallow_enter_after_commit: bool = Field(
        True, description="Swallow the first Enter after a commit (debounces the host's key repeat)"
    )
    box_after_commit: BoxAfterCommit = Field(BoxAfterCommit.DEFAULTS, description="Box contents after a commit")
    rank_fn: RankFn = Field(
        rank, exclude=True, description="Ranking function used on text changes"
    )

    @property
    def highlight_floor(self) -> int:
        return self.highlight_reset.value

    @classmethod
    def create(cls, **options: Any) -> "SelectConfig":
        """
        Build a configuration, surfacing validation problems as ConfigurationError.

        Raises:
            ConfigurationError: If any option is missing, unknown or out of range
        """
        try:
            return cls(**options)
        except ValidationError as e:
            error_msg = f"Invalid typeahead configuration: {e}"
            logger.error(error_msg)
            raise ConfigurationError(error_msg) from e

    @classmethod
    def for_variant(cls, variant: Variant | str, **overrides: Any) -> "SelectConfig":
        """
        Build a configuration from a variant preset.

        Args:
            variant: Preset name or member
            overrides: Options that take precedence over the preset

        Raises:
            ConfigurationError: If the variant is unknown or an option is invalid
        """
        try:
            preset = _VARIANT_PRESETS[Variant(variant)]
        except ValueError as e:
            raise ConfigurationError(f"Unknown typeahead variant: {variant!r}") from e
        return cls.create(**{**preset, **overrides})
