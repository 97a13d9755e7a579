"""Domain types shared by the selection state machine and the ranking engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = ["Item", "Mode", "KeyCode"]


@dataclass(frozen=True)
class Item:
    """A selectable candidate.

    Identity is the ``id`` alone: two items with the same id compare and hash
    equal even when their display fields differ.
    """

    id: str
    """Opaque unique key."""
    selected_display: str = field(default="", compare=False)
    """Text shown once the item has been chosen."""
    primary_text: str = field(default="", compare=False)
    """Text shown in the box, primary match field."""
    secondary_text: str | None = field(default=None, compare=False)
    """Optional secondary match field."""
    search_tokens: tuple[str, ...] = field(default=(), compare=False)
    """Additional fuzzy-match fields, in order."""

    def __post_init__(self) -> None:
        # Accept any iterable of tokens while keeping the item hashable.
        if not isinstance(self.search_tokens, tuple):
            object.__setattr__(self, "search_tokens", tuple(self.search_tokens))
        if not self.primary_text:
            object.__setattr__(self, "primary_text", self.id)
        if not self.selected_display:
            object.__setattr__(self, "selected_display", self.primary_text)


class Mode(Enum):
    """Interaction mode of the widget."""

    INITIAL = "initial"
    """Focused, nothing typed yet; the box shows the default items."""
    EDITING = "editing"
    """The user is typing; the box holds live ranked results."""
    CLEARED = "cleared"
    """An item was just committed via enter or click."""
    IDLE = "idle"
    """The input was cleared to the empty string while focused."""
    BLURRED = "blurred"
    """The input is not focused; the box is hidden."""

    @property
    def is_focused(self) -> bool:
        return self is not Mode.BLURRED


class KeyCode(Enum):
    """Decoded key codes the state machine reacts to."""

    ARROW_UP = "up"
    ARROW_DOWN = "down"
    ENTER = "enter"
    BACKSPACE = "backspace"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> "KeyCode":
        """
        Decode a host key name.

        Textual names (``up``, ``down``, ``enter``, ``backspace``) and DOM
        ``KeyboardEvent.key`` names (``ArrowUp``, ``Enter``...) are accepted.
        Anything else maps to ``OTHER``.
        """
        return _KEY_ALIASES.get(name.strip().lower(), cls.OTHER)


_KEY_ALIASES: dict[str, KeyCode] = {
    "up": KeyCode.ARROW_UP,
    "arrowup": KeyCode.ARROW_UP,
    "down": KeyCode.ARROW_DOWN,
    "arrowdown": KeyCode.ARROW_DOWN,
    "enter": KeyCode.ENTER,
    "return": KeyCode.ENTER,
    "backspace": KeyCode.BACKSPACE,
    "ctrl+h": KeyCode.BACKSPACE,
}
