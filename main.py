# main.py

"""Entry point for the storefront application (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from storefront.config.logging_config import setup_logging
from storefront.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    valid_ids = ", ".join(repr(c["id"]) for c in Settings.CATEGORIES)

    parser = argparse.ArgumentParser(
        prog="storefront",
        description="Browse the Fake Store catalog by category.",
        epilog=f"Available categories: {valid_ids}",
    )
    parser.add_argument(
        "category",
        nargs="?",
        default=None,
        help="Category to fetch. Omit to launch the interactive TUI.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format (default: json).",
    )
    parser.add_argument(
        "--list-categories",
        action="store_true",
        default=False,
        dest="list_categories",
        help="Print the available categories and exit.",
    )
    return parser


def _run_tui() -> None:
    """Launch the interactive Textual TUI."""
    from storefront.ui.app import StorefrontApp

    try:
        app = StorefrontApp()
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("storefront TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """Fetch one category headlessly and exit."""
    from storefront.cli.runner import cli_fetch

    exit_code = asyncio.run(
        cli_fetch(
            category=args.category,
            output_format=args.output_format,
        )
    )
    sys.exit(exit_code)


def _run_list_categories() -> None:
    from storefront.cli.runner import list_categories

    sys.exit(list_categories())


def main() -> None:
    """Route to TUI (no args) or headless CLI (category provided)."""
    parser = _build_parser()
    args = parser.parse_args()

    # The TUI draws on the terminal, so keep log output off stderr there
    tui = args.category is None and not args.list_categories
    log_file = setup_logging(console=not tui)
    logger.info("storefront starting, log file: %s", log_file)

    if args.list_categories:
        _run_list_categories()
    elif args.category is None:
        _run_tui()
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
