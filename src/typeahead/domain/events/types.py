"""Effect types emitted by the selection state machine.

Effects are returned alongside every new state; the host maps them to its
own callback or message system (see ``EffectBus``).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Effect:
    """Base class for all outward notifications."""


@dataclass(frozen=True)
class ItemAdded(Effect):
    """An item was committed to the selection.

    Attributes:
        item_id: Id of the committed item
    """

    item_id: str


@dataclass(frozen=True)
class ItemRemoved(Effect):
    """The last selected item was removed with backspace.

    Attributes:
        item_id: Id of the removed item
    """

    item_id: str


@dataclass(frozen=True)
class FocusAcknowledged(Effect):
    """The input gained focus."""


@dataclass(frozen=True)
class BlurAcknowledged(Effect):
    """The input lost focus."""
