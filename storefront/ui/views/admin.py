# storefront/ui/views/admin.py

"""Admin panel: product creation and listing, user listing."""

from typing import cast

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import (
    Button,
    DataTable,
    Input,
    Static,
    TabbedContent,
    TabPane,
    TextArea,
)

from storefront.models.product import ProductDraft
from storefront.services.admin_panel import AdminPanel
from storefront.ui.views.base import StorefrontView, ViewContext, price_text

_DRAFT_INPUTS = {
    "name": "#product_name",
    "price": "#product_price",
    "image_url": "#product_image",
    "marketplace_link": "#product_link",
}


class AdminView(StorefrontView):
    """Only mounted by the shell for admin sessions."""

    def __init__(self, context: ViewContext) -> None:
        super().__init__(context)
        self.panel = AdminPanel(context.api, context.session.token)

    def compose(self) -> ComposeResult:
        with TabbedContent(id="admin_tabs", initial="products_tab"):
            with TabPane("Produk", id="products_tab"):
                with Horizontal(id="admin_products"):
                    with Vertical(id="product_form", classes="card"):
                        yield Static("Tambah Produk", classes="section-title")
                        yield Input(placeholder="Nama", id="product_name")
                        yield Input(placeholder="Harga", id="product_price")
                        yield Input(placeholder="URL Gambar", id="product_image")
                        yield Input(
                            placeholder="Link Marketplace", id="product_link",
                        )
                        yield Static("Deskripsi", classes="muted")
                        yield TextArea(id="product_description")
                        yield Static("", id="product_error", classes="error")
                        yield Button(
                            "Simpan", variant="primary", id="product_save",
                        )
                    with Vertical(id="product_list"):
                        yield Static("Daftar Produk", classes="section-title")
                        yield DataTable(
                            id="admin_products_table", cursor_type="row",
                        )
            with TabPane("Users", id="users_tab"):
                yield DataTable(
                    id="admin_users_table",
                    zebra_stripes=True,
                    cursor_type="row",
                )

    def on_mount(self) -> None:
        self._products_table().add_columns("Nama", "Harga")
        self._users_table().add_columns("Nama", "Email", "Role", "Dibuat")
        self.run_worker(self._load(), group="admin_load")

    def on_unmount(self) -> None:
        self.panel.cancel()

    def _products_table(self) -> DataTable[str | Text]:
        return cast(
            DataTable[str | Text],
            self.query_one("#admin_products_table", DataTable),
        )

    def _users_table(self) -> DataTable[str]:
        return cast(
            DataTable[str],
            self.query_one("#admin_users_table", DataTable),
        )

    async def _load(self) -> None:
        await self.panel.load()
        self.populate_products()
        self.populate_users()

    def populate_products(self) -> None:
        table = self._products_table()
        table.clear()
        for p in self.panel.products:
            table.add_row(p.name, price_text(p))

    def populate_users(self) -> None:
        table = self._users_table()
        table.clear()
        for u in self.panel.users:
            created = (
                u.created_at.strftime("%Y-%m-%d %H:%M")
                if u.created_at
                else ""
            )
            table.add_row(u.name, u.email, u.role, created)

    def read_draft(self) -> ProductDraft:
        values = {
            field: self.query_one(selector, Input).value
            for field, selector in _DRAFT_INPUTS.items()
        }
        return ProductDraft(
            description=self.query_one("#product_description", TextArea).text,
            **values,
        )

    def clear_form(self) -> None:
        for selector in _DRAFT_INPUTS.values():
            self.query_one(selector, Input).value = ""
        self.query_one("#product_description", TextArea).load_text("")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "product_save":
            event.stop()
            self.run_worker(self._save(self.read_draft()), group="admin_save")

    async def _save(self, draft: ProductDraft) -> None:
        error = self.query_one("#product_error", Static)
        error.update("")
        if not await self.panel.create_product(draft):
            error.update(self.panel.error)
            return
        self.clear_form()
        self.populate_products()
        self.notify(f"Produk '{draft.name}' tersimpan")
