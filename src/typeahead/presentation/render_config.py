"""Display strings for the Textual rendering layer.

Passed explicitly to ``TypeaheadSelect``; the state machine never sees it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    """Labels and glyphs used when drawing the widget."""

    placeholder: str = "Type to search, Enter to add, Backspace to remove"
    border_title: str = "Select"
    selected_label: str = "Selected: "
    selected_separator: str = ", "
    empty_selection: str = "nothing yet"
    full_selection: str = "(full)"
    box_prefix: str = "› "
    show_secondary: bool = True
