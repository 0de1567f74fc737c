# storefront/ui/views/product_detail.py

"""Product detail page keyed by the ``/product/<id>`` route."""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Button, Static

from storefront.config.settings import Settings
from storefront.services.catalog import DetailState, ProductDetailLoader
from storefront.ui.views.base import (
    StorefrontView,
    ViewContext,
    discount_label,
    open_marketplace,
    price_text,
)


class ProductDetailView(StorefrontView):
    """Shows a loading placeholder, then the product or a not-found note."""

    def __init__(self, context: ViewContext, product_id: str = "") -> None:
        super().__init__(context)
        self.product_id = product_id
        self.loader = ProductDetailLoader(context.api)

    def compose(self) -> ComposeResult:
        yield Static(Settings.MESSAGES["loading"], id="detail_status")
        yield Vertical(
            Static("", id="detail_name", classes="page-title"),
            Static("", id="detail_description", classes="muted"),
            Static("", id="detail_price", classes="price"),
            Static("", id="detail_image", classes="muted"),
            Button(
                "Lihat di Marketplace",
                variant="primary",
                id="detail_marketplace",
            ),
            id="detail_body",
        )

    def on_mount(self) -> None:
        self.query_one("#detail_body").display = False
        self.run_worker(self._load(), group="product_detail")

    def on_unmount(self) -> None:
        self.loader.cancel()

    async def _load(self) -> None:
        if await self.loader.load(self.product_id):
            self.render_state()

    def render_state(self) -> None:
        status = self.query_one("#detail_status", Static)
        body = self.query_one("#detail_body")
        product = self.loader.product
        if self.loader.state is DetailState.LOADING:
            status.update(Settings.MESSAGES["loading"])
            body.display = False
            return
        if self.loader.state is DetailState.NOT_FOUND or product is None:
            status.update(Settings.MESSAGES["not_found"])
            body.display = False
            return

        status.display = False
        body.display = True
        self.query_one("#detail_name", Static).update(product.name)
        self.query_one("#detail_description", Static).update(
            product.description
        )
        price = price_text(product)
        label = discount_label(product)
        if label:
            price.append(f"  {label}", style="italic")
        self.query_one("#detail_price", Static).update(price)
        self.query_one("#detail_image", Static).update(
            f"Gambar: {product.image_url}" if product.image_url else ""
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "detail_marketplace":
            event.stop()
            if self.loader.product is not None:
                open_marketplace(self, self.loader.product)
