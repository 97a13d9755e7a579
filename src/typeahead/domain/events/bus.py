"""Effect bus used by hosts to fan out state machine effects.

The state machine never calls back into the host; it returns effects with
each transition. A host that prefers callbacks hands those effects to an
``EffectBus`` and subscribes handlers per effect type.

Handler Contract:
    Handlers MUST be synchronous (non-async) functions. This is enforced at
    subscription time. A handler subscribed to a base class (``Effect``)
    receives every effect derived from it.
"""

import asyncio
from typing import Callable, Iterable, Type, TypeVar

from typeahead.logger import get_logger

from .types import Effect

logger = get_logger("events.bus")

T = TypeVar("T", bound=Effect)

EffectHandler = Callable[[Effect], None]


class EffectBus:
    """Publish/subscribe dispatcher for effects.

    Example:
        ```python
        bus = EffectBus()
        bus.subscribe(ItemAdded, lambda effect: print("added", effect.item_id))
        bus.publish_all(transition.effects)
        ```

    Thread safety:
        This implementation is NOT thread-safe. Hosts deliver events from a
        single event loop, as the state machine itself requires.
    """

    def __init__(self):
        self._handlers: dict[Type[Effect], list[Callable[[Effect], None]]] = {}

    def subscribe(self, effect_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to effects of a specific type.

        Args:
            effect_type: The effect class to subscribe to (e.g. ItemAdded)
            handler: Synchronous callback receiving the effect instance

        Raises:
            TypeError: If handler is an async function (coroutine function)
        """
        if asyncio.iscoroutinefunction(handler):
            raise TypeError(
                f"Effect handlers must be synchronous functions. "
                f"Handler {getattr(handler, '__name__', handler)!r} is a coroutine function. "
                f"Schedule async work with asyncio.create_task() instead."
            )

        handlers = self._handlers.setdefault(effect_type, [])
        if handler not in handlers:
            handlers.append(handler)  # type: ignore[arg-type]
            logger.debug(f"Subscribed handler for {effect_type.__name__}")
        else:
            logger.debug(f"Handler already subscribed for {effect_type.__name__}, skipping")

    def unsubscribe(self, effect_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Unsubscribe a handler. Unknown handlers are ignored.
        """
        if effect_type in self._handlers:
            try:
                self._handlers[effect_type].remove(handler)  # type: ignore[arg-type]
                logger.debug(f"Unsubscribed handler for {effect_type.__name__}")
            except ValueError:
                logger.debug(f"Handler not found in subscriptions for {effect_type.__name__}")

    def publish(self, effect: Effect) -> None:
        """
        Publish an effect to every handler subscribed to its type or a base type.

        Handlers run synchronously in subscription order, most specific type
        first. A handler that raises is logged and does not prevent the
        remaining handlers from running.
        """
        handlers = self._handlers_for(type(effect))
        effect_name = type(effect).__name__

        if not handlers:
            logger.debug(f"No handlers subscribed for {effect_name}")
            return

        logger.debug(f"Publishing {effect_name} to {len(handlers)} handler(s)")

        for handler in handlers:
            try:
                handler(effect)
            except Exception:
                logger.exception(f"Error in effect handler for {effect_name}")

    def publish_all(self, effects: Iterable[Effect]) -> None:
        """Publish a sequence of effects in order."""
        for effect in effects:
            self.publish(effect)

    def clear(self) -> None:
        """Clear all subscriptions."""
        self._handlers.clear()
        logger.debug("Effect bus cleared")

    def has_subscribers(self, effect_type: Type[Effect]) -> bool:
        """Check whether any handler would receive an effect of this type."""
        return bool(self._handlers_for(effect_type))

    def _handlers_for(self, effect_type: Type[Effect]) -> list[Callable[[Effect], None]]:
        handlers: list[Callable[[Effect], None]] = []
        for klass in effect_type.__mro__:
            for handler in self._handlers.get(klass, []):
                if handler not in handlers:
                    handlers.append(handler)
        return handlers
