# storefront/ui/views/shop.py

"""Shop view: search box, price bounds and the product listing."""

from typing import cast

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import DataTable, Input, Static

from storefront.config.settings import Settings
from storefront.services.catalog import ShopFilters, ShopSearch
from storefront.ui.views.base import (
    StorefrontView,
    ViewContext,
    discount_label,
    open_marketplace,
    price_text,
)

_FILTER_INPUTS = ("shop_query", "shop_min", "shop_max")


class ShopView(StorefrontView):
    """Product listing that re-fetches on every filter change."""

    BINDINGS = [
        Binding("m", "open_marketplace", "Marketplace"),
    ]

    def __init__(self, context: ViewContext) -> None:
        super().__init__(context)
        self.search = ShopSearch(context.api)

    def compose(self) -> ComposeResult:
        yield Horizontal(
            Input(placeholder="Cari produk...", id="shop_query"),
            Input(placeholder="Min", id="shop_min", classes="bound"),
            Input(placeholder="Max", id="shop_max", classes="bound"),
            id="shop_filters",
        )
        yield Static(Settings.MESSAGES["loading"], id="shop_status")
        yield cast(
            DataTable[str | Text],
            DataTable(
                id="shop_results",
                zebra_stripes=True,
                cursor_type="row",
            ),
        )

    def on_mount(self) -> None:
        table = self._table()
        table.add_columns("Nama", "Harga", "Diskon", "Deskripsi")
        self.refresh_listing()

    def on_unmount(self) -> None:
        self.search.cancel()

    def _table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#shop_results", DataTable),
        )

    def current_filters(self) -> ShopFilters:
        return ShopFilters(
            query=self.query_one("#shop_query", Input).value,
            min_price=self.query_one("#shop_min", Input).value,
            max_price=self.query_one("#shop_max", Input).value,
        )

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id in _FILTER_INPUTS:
            event.stop()
            self.refresh_listing()

    def refresh_listing(self) -> None:
        """Start a fetch for the current filters; older ones lose."""
        self.run_worker(
            self._load(self.current_filters()), group="shop_listing",
        )

    async def _load(self, filters: ShopFilters) -> None:
        if await self.search.search(filters):
            self.populate_table()

    def populate_table(self) -> None:
        """Fill the DataTable with the applied listing."""
        table = self._table()
        table.clear()
        status = self.query_one("#shop_status", Static)
        products = self.search.products
        if not products:
            status.update(Settings.MESSAGES["empty_listing"])
            return
        status.update(f"{len(products)} produk")
        for p in products:
            table.add_row(
                p.name[:60],
                price_text(p),
                discount_label(p),
                p.description[:80],
            )

    def on_data_table_row_selected(
        self, event: DataTable.RowSelected
    ) -> None:
        """Open the detail page of the selected product."""
        event.stop()
        products = self.search.products
        if 0 <= event.cursor_row < len(products):
            product = products[event.cursor_row]
            self.context.router.navigate(f"/product/{product.id}")

    def action_open_marketplace(self) -> None:
        products = self.search.products
        row = self._table().cursor_row
        if 0 <= row < len(products):
            open_marketplace(self, products[row])
