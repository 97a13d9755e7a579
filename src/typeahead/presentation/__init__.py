"""Textual presentation layer for the typeahead widget."""

from .app import TypeaheadApp
from .render_config import RenderConfig
from .widgets import TypeaheadSelect

__all__ = ["RenderConfig", "TypeaheadApp", "TypeaheadSelect"]
