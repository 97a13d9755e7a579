"""Exceptions raised by the typeahead core.

Interaction errors (bad highlight, duplicate commit, commit at capacity) are
absorbed as no-ops by the state machine and never raised. Only host bugs
surface as exceptions.
"""


class TypeaheadError(Exception):
    """Base class for typeahead errors."""


class ConfigurationError(TypeaheadError, ValueError):
    """Invalid widget configuration supplied at construction time."""


class CatalogError(TypeaheadError, ValueError):
    """A candidate catalog file has an invalid structure."""
