"""Fuzzy typeahead multi-select: selection state machine, ranking engine and a Textual host."""

__version__ = "0.1.0"
