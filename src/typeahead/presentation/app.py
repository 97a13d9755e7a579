"""
Demo Textual application hosting a single TypeaheadSelect.
"""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, RichLog

from typeahead.application import TypeaheadController
from typeahead.logger import get_logger
from typeahead.presentation.render_config import RenderConfig
from typeahead.presentation.widgets import QueryInput, TypeaheadSelect

logger = get_logger("app")


class TypeaheadApp(App[list[str]]):
    """Runs one typeahead widget and logs its messages; exits with the selected ids."""

    CSS = """
    Screen {
        align: center top;
        padding: 1 2;
    }

    #typeahead-log {
        height: 1fr;
        border: round $panel;
    }
    """

    BINDINGS = [
        Binding("escape", "finish", "Done"),
        Binding("ctrl+q", "finish", "Done", show=False),
    ]

    def __init__(self, controller: TypeaheadController, render_config: RenderConfig | None = None) -> None:
        super().__init__()
        self.controller = controller
        self.render_config = render_config or RenderConfig()

    def compose(self) -> ComposeResult:
        yield TypeaheadSelect(self.controller, self.render_config, id="typeahead")
        yield RichLog(markup=True, id="typeahead-log")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(QueryInput).focus()

    def on_typeahead_select_item_added(self, event: TypeaheadSelect.ItemAdded) -> None:
        self.query_one("#typeahead-log", RichLog).write(f"[green]+[/] {event.item_id}")

    def on_typeahead_select_item_removed(self, event: TypeaheadSelect.ItemRemoved) -> None:
        self.query_one("#typeahead-log", RichLog).write(f"[red]-[/] {event.item_id}")

    def action_finish(self) -> None:
        logger.info(f"Demo finished with selection {self.controller.selected_ids}")
        self.exit(self.controller.selected_ids)
