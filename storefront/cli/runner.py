# storefront/cli/runner.py

"""Headless catalog commands that reuse the async storefront API."""

import json
import logging
import sys
import time
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from storefront.api.errors import ApiError, RequestError
from storefront.config.settings import Settings
from storefront.models.product import Product, format_price
from storefront.services.catalog import ShopFilters
from storefront.services.storefront_api import StorefrontApi
from storefront.storage.token_store import TokenStore

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _products_to_dicts(products: list[Product]) -> list[dict[str, object]]:
    """Serialise a product list to plain dicts for JSON output."""
    return [
        {
            "id": p.id,
            "name": p.name,
            "price": p.price,
            "effective_price": p.effective_price,
            "discount_percentage": (
                p.discount.percentage if p.has_discount and p.discount else 0
            ),
            "description": p.description,
            "marketplace_link": p.marketplace_link,
        }
        for p in products
    ]


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of products to stdout."""
    table = Table(
        title=f"{Settings.STORE_NAME} Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", max_width=50)
    table.add_column("Price", justify="right", style="green")
    table.add_column("Discount", justify="center")
    table.add_column("Marketplace", overflow="fold", style="dim")

    prefix = Settings.CURRENCY_PREFIX
    for idx, p in enumerate(products, 1):
        discount = (
            f"-{p.discount.percentage:g}%"
            if p.has_discount and p.discount
            else "—"
        )
        table.add_row(
            str(idx),
            p.name[:50],
            format_price(p.effective_price, prefix),
            discount,
            p.marketplace_link or "—",
        )

    Console().print(table)


async def cli_list_products(
    query: str,
    min_price: str | None,
    max_price: str | None,
    output_format: str,
    api: StorefrontApi | None = None,
) -> int:
    """List products headlessly and return an exit code (0=ok, 1=fail)."""
    api = api or StorefrontApi()
    filters = ShopFilters(
        query=query,
        min_price=min_price or "",
        max_price=max_price or "",
    )
    params = filters.to_params()
    _err.print(
        f"[bold]Listing:[/bold] {query or '(all)'}  "
        f"[dim]params={params}[/dim]"
    )

    try:
        products = await api.list_products(params)
    except ApiError as exc:
        logger.error("Listing failed: %s", exc, exc_info=True)
        _err.print(f"[red]Listing failed: {exc}[/red]")
        return 1

    if not products:
        _err.print("[yellow]No products found.[/yellow]")
        return 1

    _err.print(f"[green]✓ {len(products)} products[/green]")

    if output_format == "table":
        _print_table(products)
    else:
        json.dump(
            _products_to_dicts(products),
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")

    return 0


@dataclass
class HealthResult:
    """Outcome of a single backend probe."""

    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


async def probe_backend(api: StorefrontApi | None = None) -> HealthResult:
    """Time one listing request against the backend."""
    api = api or StorefrontApi()
    start = time.monotonic()
    try:
        await api.list_products({"q": ""})
    except RequestError as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult("down", elapsed_ms, f"HTTP {exc.status_code}")
    except ApiError as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult("down", elapsed_ms, str(exc)[:80])

    elapsed_ms = (time.monotonic() - start) * 1000
    if elapsed_ms > Settings.HEALTH_SLOW_MS:
        return HealthResult("slow", elapsed_ms, "High latency")
    return HealthResult("ok", elapsed_ms, "")


async def run_health_check(api: StorefrontApi | None = None) -> int:
    """Probe the backend and print a one-row Rich table."""
    _err.print("[bold]Checking backend health...[/bold]")
    result = await probe_backend(api)
    logger.info(
        "Health check: %s (%.0fms) %s",
        result.status,
        result.latency_ms,
        result.message,
    )

    table = Table(
        title="Backend Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Backend", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    if result.status == "ok":
        status = "[green]✅ OK[/green]"
    elif result.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = (
        f"{result.latency_ms:.0f}ms" if result.latency_ms > 0 else "—"
    )
    table.add_row(Settings.API_BASE_URL, status, latency, result.message)
    Console().print(table)
    return 1 if result.status == "down" else 0


def run_logout(store: TokenStore | None = None) -> int:
    """Forget the stored auth token."""
    (store or TokenStore()).clear()
    _err.print("[green]✓ Logged out[/green]")
    return 0
