# storefront/ui/views/pages.py

"""Home, About, Contact and Unauthorized pages."""

import logging
import webbrowser
from urllib.parse import quote

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Static, TextArea

from storefront.config.settings import Settings
from storefront.ui.views.base import StorefrontView
from storefront.ui.views.shop import ShopView

logger = logging.getLogger("storefront.ui")


class HomeView(StorefrontView):
    """Hero banner followed by the popular products listing."""

    def compose(self) -> ComposeResult:
        yield Static(
            "Tampilkan Produk Anda Dengan Gaya Modern",
            classes="hero-title",
        )
        yield Static(
            f"{Settings.STORE_NAME} adalah platform display semi-ecommerce "
            "yang elegan, minimalis, dan profesional. Pembelian dialihkan "
            "ke marketplace pilihan Anda.",
            classes="muted",
        )
        yield Horizontal(
            Button("Lihat Produk", variant="primary", id="hero_shop"),
            *[
                Button(m["label"], id=f"hero_{m['id']}")
                for m in Settings.MARKETPLACES
            ],
            id="hero_actions",
        )
        yield Static("Produk Populer", classes="section-title")
        yield ShopView(self.context)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "hero_shop":
            event.stop()
            self.context.router.navigate("/shop")
            return
        for market in Settings.MARKETPLACES:
            if button_id == f"hero_{market['id']}":
                event.stop()
                logger.info("Opening marketplace %s", market["url"])
                webbrowser.open(market["url"])
                return


class AboutView(StorefrontView):
    def compose(self) -> ComposeResult:
        yield Static(f"Tentang {Settings.STORE_NAME}", classes="page-title")
        yield Static(
            f"{Settings.STORE_NAME} adalah platform display produk "
            "semi-ecommerce yang membantu brand menampilkan katalog mereka "
            "dengan desain modern dan pengalaman pengguna yang rapi. "
            "Pembelian dilakukan melalui marketplace seperti Shopee atau "
            "Tokopedia.",
            classes="muted",
        )


def build_mailto(name: str, email: str, message: str) -> str:
    """Compose a ``mailto:`` link addressed to the store."""
    subject = quote(f"Pesan dari {name}" if name else "Pesan")
    body = quote(f"{message}\n\n{name} <{email}>".strip())
    return f"mailto:{Settings.CONTACT_EMAIL}?subject={subject}&body={body}"


class ContactView(StorefrontView):
    """Store contact details and a message form handed to the mail client."""

    def compose(self) -> ComposeResult:
        yield Static("Kontak", classes="page-title")
        yield Horizontal(
            Vertical(
                Static("Email", classes="muted"),
                Static(Settings.CONTACT_EMAIL),
                Static("Instagram", classes="muted"),
                Static(Settings.CONTACT_INSTAGRAM),
                classes="card",
            ),
            Vertical(
                Input(placeholder="Nama", id="contact_name"),
                Input(placeholder="Email", id="contact_email"),
                Static("Pesan", classes="muted"),
                TextArea(id="contact_message"),
                Button("Kirim", variant="primary", id="contact_send"),
                classes="card",
            ),
            id="contact_body",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != "contact_send":
            return
        event.stop()
        link = build_mailto(
            self.query_one("#contact_name", Input).value,
            self.query_one("#contact_email", Input).value,
            self.query_one("#contact_message", TextArea).text,
        )
        webbrowser.open(link)


class UnauthorizedView(StorefrontView):
    def compose(self) -> ComposeResult:
        yield Static(Settings.MESSAGES["unauthorized"], classes="page-title")
