"""
Utility functions for the typeahead package.
"""

import os


def get_project_root() -> str:
    """
    Get the project root directory (parent of src/typeahead).

    Returns:
        Absolute path to the project root directory
    """
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def normalize_text(text: str | None) -> str:
    """
    Normalize a query or field value for fuzzy matching.

    Surrounding whitespace is stripped and the text is case-folded so that
    matching is case insensitive for non-ASCII scripts too.

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        The normalized text
    """
    if not text:
        return ""
    return text.strip().casefold()
