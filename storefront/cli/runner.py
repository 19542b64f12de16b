# storefront/cli/runner.py

"""Headless CLI runner that reuses the TUI's view state."""

import json
import logging
import sys
from dataclasses import asdict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from storefront.config.settings import Settings
from storefront.models.product import Product
from storefront.services.catalog_client import CatalogClient
from storefront.services.catalog_state import CatalogState

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def resolve_category(category: str) -> str:
    """Return *category* if it is one of the fixed categories.

    Raises ``SystemExit`` on an unknown category.
    """
    known = [c["id"] for c in Settings.CATEGORIES]
    if category in known:
        return category
    _err.print(f"[red]Unknown category: {escape(category)}[/red]")
    _err.print(f"[dim]Available: {escape(', '.join(known))}[/dim]")
    raise SystemExit(1)


def list_categories() -> int:
    """Print the category keys, one per line."""
    for cat in Settings.CATEGORIES:
        sys.stdout.write(f"{cat['id']}\n")
    return 0


def _print_table(category: str, products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    label = next(
        c["label"] for c in Settings.CATEGORIES if c["id"] == category
    )
    table = Table(
        title=f"{label} ({len(products)})",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("ID", style="dim", width=4)
    table.add_column("Title", max_width=60)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Image", overflow="fold", style="dim")

    for p in products:
        table.add_row(
            str(p.id),
            escape(p.title),
            f"${p.price:,.2f}",
            p.image,
        )

    Console().print(table)


async def cli_fetch(
    category: str,
    output_format: str,
    client: CatalogClient | None = None,
) -> int:
    """Fetch one category and print it; return an exit code (0=ok, 1=fail)."""
    category = resolve_category(category)
    state = CatalogState(client)

    _err.print(f"[bold]Fetching:[/bold] {escape(category)}")
    await state.select_category(category)

    if state.error_message is not None:
        logger.error("CLI fetch for '%s' failed", category)
        _err.print(f"[red]Error: {escape(state.error_message)}[/red]")
        return 1

    _err.print(f"[green]✓ {len(state.products)} products[/green]")

    if output_format == "table":
        _print_table(category, state.products)
    else:
        json.dump(
            [asdict(p) for p in state.products],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0
