"""Stateful host-side wrapper around the pure selection state machine.

The controller keeps the current ``SelectionState`` and the host's pool,
feeds events to the state machine and publishes the resulting effects on an
``EffectBus``. Rendering layers talk to the controller instead of threading
state through their own code.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from typeahead.core import machine
from typeahead.core.config import SelectConfig
from typeahead.core.state import SelectionState, Transition
from typeahead.domain.events import EffectBus
from typeahead.domain.events.types import Effect
from typeahead.domain.types import Item, KeyCode, Mode
from typeahead.logger import get_logger

logger = get_logger("controller")


class TypeaheadController:
    """Owns one widget's state and dispatches its effects.

    Not thread-safe: hosts deliver events from a single event loop.
    """

    def __init__(
        self,
        config: SelectConfig,
        available: Iterable[Item] = (),
        initial_selected_ids: Iterable[str] = (),
        bus: EffectBus | None = None,
    ) -> None:
        self._available: tuple[Item, ...] = tuple(available)
        self._state = machine.initialize(
            initial_selected_ids=initial_selected_ids,
            available_items=self._available,
            config=config,
        )
        self.bus = bus or EffectBus()
        logger.info(
            f"Controller ready (pool={len(self._available)}, selected={len(self._state.selected)}, "
            f"max_items={config.max_items}, box_length={config.box_length})"
        )

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def config(self) -> SelectConfig:
        return self._state.config

    @property
    def mode(self) -> Mode:
        return machine.mode(self._state)

    @property
    def query(self) -> str:
        return self._state.query

    @property
    def highlight(self) -> int | None:
        return machine.highlight_position(self._state)

    @property
    def selected(self) -> tuple[Item, ...]:
        return self._state.selected

    @property
    def selected_ids(self) -> list[str]:
        return machine.selected_ids(self._state)

    @property
    def boxed(self) -> list[Item]:
        return machine.boxed_items(self._state, self._available)

    def text_changed(self, text: str) -> tuple[Effect, ...]:
        return self._apply(machine.on_text_changed(self._state, text, self._available))

    def key_pressed(self, key: KeyCode | str) -> tuple[Effect, ...]:
        return self._apply(machine.on_key_pressed(self._state, key, self._available))

    def item_picked(self, item_id: str) -> tuple[Effect, ...]:
        return self._apply(machine.on_item_picked(self._state, item_id, self._available))

    def focus(self) -> tuple[Effect, ...]:
        return self._apply(machine.on_focus(self._state, self._available))

    def blur(self) -> tuple[Effect, ...]:
        return self._apply(machine.on_blur(self._state, self._available))

    def replace_available(self, available: Sequence[Item]) -> None:
        """
        Swap the candidate pool.

        The new pool is handed to the state machine with the next event, which
        rebuilds the box from it; ``boxed`` already shows the rebuilt box.
        """
        self._available = tuple(available)
        logger.debug(f"Pool replaced ({len(self._available)} items)")

    def _apply(self, transition: Transition) -> tuple[Effect, ...]:
        self._state = transition.state
        if transition.effects:
            self.bus.publish_all(transition.effects)
        return transition.effects
