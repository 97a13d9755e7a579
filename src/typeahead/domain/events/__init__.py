"""Effects emitted by the state machine and the bus hosts use to dispatch them.

Example:
    ```python
    from typeahead.domain.events import EffectBus, ItemAdded

    bus = EffectBus()
    bus.subscribe(ItemAdded, lambda effect: print(effect.item_id))
    bus.publish(ItemAdded(item_id="apple"))
    ```
"""

from .bus import EffectBus
from .types import (
    BlurAcknowledged,
    Effect,
    FocusAcknowledged,
    ItemAdded,
    ItemRemoved,
)

__all__ = [
    "EffectBus",
    "Effect",
    "ItemAdded",
    "ItemRemoved",
    "FocusAcknowledged",
    "BlurAcknowledged",
]
