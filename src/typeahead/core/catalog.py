"""Candidate catalog loader.

Parses JSON files holding the candidate pool, either as a bare list of item
objects or as ``{"items": [...]}``.
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from typeahead.domain.types import Item
from typeahead.logger import get_logger

from .errors import CatalogError

logger = get_logger("catalog")


class ItemRecord(BaseModel):
    """One catalog entry as stored on disk."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Unique item key")
    selected_display: Optional[str] = Field(None, alias="selectedDisplay")
    primary_text: Optional[str] = Field(None, alias="primaryText")
    secondary_text: Optional[str] = Field(None, alias="secondaryText")
    search_tokens: list[str] = Field(default_factory=list, alias="searchTokens")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Numeric ids are common in exported data.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def to_item(self) -> Item:
        return Item(
            id=self.id,
            selected_display=self.selected_display or "",
            primary_text=self.primary_text or "",
            secondary_text=self.secondary_text,
            search_tokens=tuple(self.search_tokens),
        )


class Catalog(BaseModel):
    """A list of catalog entries with unique ids."""

    model_config = ConfigDict(frozen=True)

    items: list[ItemRecord] = Field(default_factory=list)

    @field_validator("items")
    @classmethod
    def _unique_ids(cls, items: list[ItemRecord]) -> list[ItemRecord]:
        seen: set[str] = set()
        for record in items:
            if record.id in seen:
                raise ValueError(f"duplicate item id {record.id!r}")
            seen.add(record.id)
        return items

    def to_items(self) -> list[Item]:
        return [record.to_item() for record in self.items]


def parse_catalog(data: Any) -> list[Item]:
    """
    Build items from already decoded JSON data.

    Raises:
        CatalogError: If the structure is invalid or ids repeat
    """
    if isinstance(data, list):
        data = {"items": data}
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog must be a list or an object with 'items', got {type(data).__name__}")

    try:
        return Catalog(**data).to_items()
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog structure: {e}") from e


def load_catalog(catalog_path: str | Path) -> list[Item]:
    """
    Load the candidate pool from a JSON file.

    Args:
        catalog_path: Path to the JSON catalog

    Returns:
        Items in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        CatalogError: If the structure is invalid
    """
    catalog_path = Path(catalog_path)

    if not catalog_path.exists():
        error_msg = f"Catalog file not found: {catalog_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    logger.info(f"Loading catalog from: {catalog_path}")

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in catalog file {catalog_path}: {e}")
        raise

    try:
        items = parse_catalog(data)
    except CatalogError as e:
        logger.error(f"{e} ({catalog_path})")
        raise

    logger.info(f"Loaded {len(items)} catalog item(s)")
    return items
