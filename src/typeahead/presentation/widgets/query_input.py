"""
QueryInput - Input field that reports navigation keys instead of handling them.
"""

from textual.binding import Binding
from textual.message import Message
from textual.widgets import Input

from typeahead.domain.types import KeyCode
from typeahead.logger import get_logger

logger = get_logger("query_input")


class QueryInput(Input):
    """
    Text input for the typeahead query.

    Up/Down, Enter and Backspace on an empty value are decoded into
    ``KeyCode`` values and posted as ``KeyCommand`` messages; everything else
    is ordinary text editing reported through ``Input.Changed``.
    """

    BINDINGS = [
        Binding("up", "box_up", "Previous", show=False),
        Binding("down", "box_down", "Next", show=False),
    ]

    class KeyCommand(Message):
        """A decoded key the selection state machine should handle."""

        def __init__(self, key: KeyCode) -> None:
            super().__init__()
            self.key = key

    def action_box_up(self) -> None:
        self.post_message(self.KeyCommand(KeyCode.ARROW_UP))

    def action_box_down(self) -> None:
        self.post_message(self.KeyCommand(KeyCode.ARROW_DOWN))

    def action_submit(self) -> None:
        self.post_message(self.KeyCommand(KeyCode.ENTER))

    def action_delete_left(self) -> None:
        # With nothing left to delete, backspace may remove the last selection.
        if not self.value:
            logger.debug("Backspace on empty query")
            self.post_message(self.KeyCommand(KeyCode.BACKSPACE))
            return
        super().action_delete_left()
