# main.py

"""Entry point for the Bina Ragam storefront (TUI or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from storefront.config.logging_config import setup_logging
from storefront.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront",
        description=f"{Settings.STORE_NAME} storefront display client.",
        epilog=f"Backend: {Settings.API_BASE_URL}",
    )
    parser.add_argument(
        "query",
        nargs="?",
        default=None,
        help="Product search text. Omit to launch the interactive TUI.",
    )
    parser.add_argument(
        "--min-price",
        default=None,
        dest="min_price",
        help="Lower price bound for the listing.",
    )
    parser.add_argument(
        "--max-price",
        default=None,
        dest="max_price",
        help="Upper price bound for the listing.",
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
        "--route",
        default="/",
        help="Route the TUI opens on, e.g. /shop or /product/42.",
    )
    parser.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Check connectivity to the backend.",
    )
    parser.add_argument(
        "--logout",
        action="store_true",
        default=False,
        help="Forget the stored login token.",
    )
    return parser


def _run_tui(route: str) -> None:
    """Launch the interactive Textual TUI."""
    from storefront.ui.app import StorefrontApp

    try:
        app = StorefrontApp(initial_route=route)
        app.run()
    except Exception:
        logger.critical("Fatal error during TUI run", exc_info=True)
        raise
    finally:
        logger.info("Storefront TUI shutting down")


def _run_cli(args: argparse.Namespace) -> None:
    """List products headlessly and exit."""
    from storefront.cli.runner import cli_list_products

    exit_code = asyncio.run(
        cli_list_products(
            query=args.query,
            min_price=args.min_price,
            max_price=args.max_price,
            output_format=args.output_format,
        )
    )
    sys.exit(exit_code)


def _run_health_check() -> None:
    from storefront.cli.runner import run_health_check

    exit_code = asyncio.run(run_health_check())
    sys.exit(exit_code)


def _run_logout() -> None:
    from storefront.cli.runner import run_logout

    sys.exit(run_logout())


def main() -> None:
    """Route to TUI (no query) or headless CLI (query provided)."""
    log_file = setup_logging()
    logger.info("Storefront starting, log file: %s", log_file)

    parser = _build_parser()
    args = parser.parse_args()

    if args.logout:
        _run_logout()
    elif args.health:
        _run_health_check()
    elif args.query is None:
        _run_tui(args.route)
    else:
        _run_cli(args)


if __name__ == "__main__":
    main()
