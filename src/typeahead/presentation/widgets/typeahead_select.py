"""
TypeaheadSelect - multi-select input with a ranked dropdown box.

The widget owns no selection logic. It forwards Textual events to a
``TypeaheadController`` and redraws from the controller's accessors after
every transition.
"""

from __future__ import annotations

from typing import Any

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, OptionList, Static
from textual_autocomplete import DropdownItem

from typeahead.application import TypeaheadController
from typeahead.domain.events import types as effects
from typeahead.domain.types import Item, Mode
from typeahead.logger import get_logger
from typeahead.presentation.render_config import RenderConfig

from .query_input import QueryInput

logger = get_logger("typeahead_select")


class BoxList(OptionList, can_focus=False):
    """Dropdown rows. Never takes focus so clicks keep the query input focused."""


class TypeaheadSelect(Vertical):
    """Query input, box and selected-items line for one controller."""

    DEFAULT_CSS = """
    TypeaheadSelect {
        height: auto;
        border: round $accent;
        padding: 0 1;
    }

    TypeaheadSelect #typeahead-selected {
        height: auto;
        color: $text-muted;
    }

    TypeaheadSelect BoxList {
        height: auto;
        max-height: 12;
        border: none;
    }
    """

    class ItemAdded(Message):
        """Message emitted when an item is committed."""

        def __init__(self, item_id: str) -> None:
            super().__init__()
            self.item_id = item_id

    class ItemRemoved(Message):
        """Message emitted when backspace removes the last selected item."""

        def __init__(self, item_id: str) -> None:
            super().__init__()
            self.item_id = item_id

    def __init__(
        self,
        controller: TypeaheadController,
        render_config: RenderConfig | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self.render_config = render_config or RenderConfig()
        self.border_title = self.render_config.border_title

        self._selected_line = Static("", id="typeahead-selected")
        self._input = QueryInput(placeholder=self.render_config.placeholder, id="typeahead-query")
        self._box = BoxList(id="typeahead-box")

        controller.bus.subscribe(effects.ItemAdded, self._on_item_added_effect)
        controller.bus.subscribe(effects.ItemRemoved, self._on_item_removed_effect)

    def compose(self) -> ComposeResult:
        yield self._selected_line
        yield self._input
        yield self._box

    def on_mount(self) -> None:
        self._refresh_view()

    @property
    def selected_ids(self) -> list[str]:
        return self.controller.selected_ids

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        # Programmatic clears after a commit echo the controller's own query.
        if event.value == self.controller.query:
            return
        self.controller.text_changed(event.value)
        self._refresh_view()

    def on_query_input_key_command(self, event: QueryInput.KeyCommand) -> None:
        event.stop()
        self.controller.key_pressed(event.key)
        self._refresh_view()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        boxed = self.controller.boxed
        if not 0 <= event.option_index < len(boxed):
            return
        self.controller.item_picked(boxed[event.option_index].id)
        self._refresh_view()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        self.controller.focus()
        self._refresh_view()

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        self.controller.blur()
        self._refresh_view()

    def _on_item_added_effect(self, effect: effects.ItemAdded) -> None:
        logger.info(f"Item added: {effect.item_id}")
        if self._input.value:
            self._input.value = ""
        self.post_message(self.ItemAdded(effect.item_id))

    def _on_item_removed_effect(self, effect: effects.ItemRemoved) -> None:
        logger.info(f"Item removed: {effect.item_id}")
        self.post_message(self.ItemRemoved(effect.item_id))

    def _refresh_view(self) -> None:
        controller = self.controller
        boxed = controller.boxed

        self._box.clear_options()
        self._box.add_options([self._box_row(item) for item in boxed])
        self._box.highlighted = controller.highlight if controller.highlight is not None and boxed else None
        self._box.display = controller.mode is not Mode.BLURRED and bool(boxed)

        self._selected_line.update(self._selected_text())

    def _box_row(self, item: Item) -> DropdownItem:
        main = item.primary_text
        if self.render_config.show_secondary and item.secondary_text:
            main = f"{main}  {item.secondary_text}"
        return DropdownItem(main=main, prefix=self.render_config.box_prefix)

    def _selected_text(self) -> Text:
        config = self.render_config
        text = Text(config.selected_label, style="dim")
        selected = self.controller.selected
        if not selected:
            text.append(config.empty_selection, style="dim italic")
            return text

        text.append(config.selected_separator.join(item.selected_display for item in selected), style="bold")
        if len(selected) >= self.controller.config.max_items:
            text.append(f" {config.full_selection}", style="yellow")
        return text
