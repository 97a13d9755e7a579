"""Domain layer: items, modes, key codes and effects."""

from .types import Item, KeyCode, Mode

__all__ = ["Item", "KeyCode", "Mode"]
