"""Textual widgets for the typeahead host layer."""

from .query_input import QueryInput
from .typeahead_select import BoxList, TypeaheadSelect

__all__ = ["BoxList", "QueryInput", "TypeaheadSelect"]
