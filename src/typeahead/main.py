import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from typeahead.logger import get_logger, setup_logger
from typeahead.core import (
    CatalogError,
    ConfigurationError,
    DEFAULT_THRESHOLD,
    SelectConfig,
    Variant,
    load_catalog,
    rank_with_scores,
)

load_dotenv()

logger = get_logger("main")
console = Console()

cli = typer.Typer(
    name="typeahead",
    help="Fuzzy typeahead multi-select: rank a catalog or try the interactive widget",
    epilog="""
    Examples:
    $ typeahead rank "aple" fruits.json --limit 3
    $ typeahead demo fruits.json --max-items 2 --variant inline
    """,
    add_completion=False,
)


def _load(catalog: Path):
    try:
        return load_catalog(catalog)
    except (FileNotFoundError, json.JSONDecodeError, CatalogError) as e:
        console.print(f"[red]Cannot load catalog:[/] {e}")
        raise typer.Exit(code=1)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise typer.BadParameter(f"{name} must be an integer, got {value!r}")


def _env_variant(name: str, default: Variant) -> Variant:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return Variant(value)
    except ValueError:
        choices = ", ".join(v.value for v in Variant)
        raise typer.BadParameter(f"{name} must be one of {choices}, got {value!r}")


@cli.callback()
def configure(
    debug: bool = typer.Option(os.getenv("DEBUG", "false").lower() == "true", "--debug", help="Enable debug logging"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Log file path (default: typeahead.log)"),
):
    """Configure logging for every command."""
    log_level = "DEBUG" if debug else os.getenv("TYPEAHEAD_LOG_LEVEL", "INFO")
    setup_logger(log_file=log_file, log_level=log_level)


@cli.command()
def rank(
    query: str = typer.Argument(..., help="Text to match"),
    catalog: Path = typer.Argument(..., help="JSON catalog of candidate items"),
    limit: int = typer.Option(10, "--limit", "-n", min=1, help="Maximum number of results"),
    threshold: float = typer.Option(
        DEFAULT_THRESHOLD, "--threshold", "-t", min=0.0, max=1.0, help="Drop results scoring above this"
    ),
):
    """Print the ranked matches of QUERY in CATALOG."""
    items = _load(catalog)
    results = rank_with_scores(query, items, limit, threshold)
    logger.info(f"rank {query!r}: {len(results)} result(s) from {len(items)} item(s)")

    if not results:
        console.print(f"[yellow]No matches for[/] {query!r}")
        return

    table = Table(title=f"Matches for {query!r}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("id", style="cyan")
    table.add_column("text")
    table.add_column("score", justify="right", style="green")
    for position, (item, score) in enumerate(results, start=1):
        table.add_row(str(position), item.id, item.primary_text, f"{score:.3f}")
    console.print(table)


@cli.command()
def demo(
    catalog: Path = typer.Argument(..., help="JSON catalog of candidate items"),
    max_items: Optional[int] = typer.Option(
        None, "--max-items", help="Selection size limit (default: $TYPEAHEAD_MAX_ITEMS or 5)"
    ),
    box_length: Optional[int] = typer.Option(
        None, "--box-length", help="Dropdown rows (default: $TYPEAHEAD_BOX_LENGTH or 8)"
    ),
    variant: Optional[Variant] = typer.Option(
        None, "--variant", help="Behavior preset (default: $TYPEAHEAD_VARIANT or callback)"
    ),
    select: Optional[list[str]] = typer.Option(None, "--select", "-s", help="Initially selected id (repeatable)"),
):
    """Run the interactive widget over CATALOG and print the final selection."""
    # Textual is only needed for the interactive demo.
    from typeahead.application import TypeaheadController
    from typeahead.presentation import TypeaheadApp

    # Environment defaults are read here so a bad value only affects this command.
    if max_items is None:
        max_items = _env_int("TYPEAHEAD_MAX_ITEMS", 5)
    if box_length is None:
        box_length = _env_int("TYPEAHEAD_BOX_LENGTH", 8)
    if variant is None:
        variant = _env_variant("TYPEAHEAD_VARIANT", Variant.CALLBACK)

    items = _load(catalog)
    try:
        config = SelectConfig.for_variant(variant, max_items=max_items, box_length=box_length)
    except ConfigurationError as e:
        console.print(f"[red]Invalid configuration:[/] {e}")
        raise typer.Exit(code=1)

    controller = TypeaheadController(config, items, select or [])
    selection = TypeaheadApp(controller).run()
    if selection is None:
        selection = controller.selected_ids

    console.print(f"Selected: {', '.join(selection) if selection else '(nothing)'}")


if __name__ == "__main__":
    cli()
