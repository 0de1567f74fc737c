# storefront/ui/views/base.py

"""Shared plumbing for routed views."""

import logging
import webbrowser
from dataclasses import dataclass

from rich.text import Text
from textual.containers import VerticalScroll

from storefront.config.settings import Settings
from storefront.models.product import Product, format_price
from storefront.services.router import Router
from storefront.services.session import Session
from storefront.services.storefront_api import StorefrontApi

logger = logging.getLogger("storefront.ui")


@dataclass
class ViewContext:
    """Everything a view may depend on, handed over explicitly."""

    api: StorefrontApi
    session: Session
    router: Router


class StorefrontView(VerticalScroll):
    """Base class for every view mounted in the shell's outlet."""

    DEFAULT_CLASSES = "view"

    def __init__(self, context: ViewContext) -> None:
        super().__init__()
        self.context = context


def price_text(product: Product) -> Text:
    """Effective price, with the original struck through when discounted."""
    prefix = Settings.CURRENCY_PREFIX
    effective = format_price(product.effective_price, prefix)
    if product.has_discount:
        return Text.assemble(
            (format_price(product.price, prefix), "strike dim"),
            " ",
            (effective, "bold"),
        )
    return Text(effective, style="bold")


def discount_label(product: Product) -> str:
    if product.discount is not None and product.discount.active:
        return f"-{product.discount.percentage:g}%"
    return ""


def open_marketplace(view: StorefrontView, product: Product) -> None:
    """Send the visitor to the product's marketplace listing."""
    if not product.marketplace_link:
        view.notify(Settings.MESSAGES["no_marketplace"], severity="warning")
        return
    logger.info(
        "Redirecting to marketplace for %s: %s",
        product.id,
        product.marketplace_link,
    )
    webbrowser.open(product.marketplace_link)
