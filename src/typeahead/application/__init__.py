"""Host-facing application layer."""

from .controller import TypeaheadController

__all__ = ["TypeaheadController"]
