# storefront/models/product.py

"""Product data model for inter-module data flow."""

import math
from dataclasses import dataclass
from typing import Any


def _to_float(value: Any) -> float:
    """Coerce a backend numeric field, falling back to 0.0."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


@dataclass
class Discount:
    """Optional percentage discount attached to a product."""

    active: bool = False
    percentage: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> "Discount | None":
        """Build a discount from backend JSON, or ``None`` if absent."""
        if not isinstance(data, dict):
            return None
        return cls(
            active=bool(data.get("active", False)),
            percentage=_to_float(data.get("percentage")),
        )


@dataclass
class Product:
    """A catalog entry as served by the backend."""

    id: str
    name: str
    price: float = 0.0
    description: str = ""
    image_url: str = ""
    marketplace_link: str = ""
    discount: Discount | None = None

    @property
    def has_discount(self) -> bool:
        """True when an active discount applies."""
        return self.discount is not None and self.discount.active

    @property
    def effective_price(self) -> float:
        """Price after the active discount, never below zero."""
        if self.discount is None or not self.discount.active:
            return max(self.price, 0.0)
        discounted = self.price * (1 - self.discount.percentage / 100)
        return max(discounted, 0.0)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Parse a single backend product record."""
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            price=_to_float(data.get("price")),
            description=str(data.get("description") or ""),
            image_url=str(data.get("image_url") or ""),
            marketplace_link=str(data.get("marketplace_link") or ""),
            discount=Discount.from_dict(data.get("discount")),
        )


@dataclass
class ProductDraft:
    """Raw admin form input for a new product.

    Every field holds the text exactly as typed; :meth:`to_payload`
    turns it into the record the backend expects.
    """

    name: str = ""
    price: str = ""
    image_url: str = ""
    description: str = ""
    marketplace_link: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Normalise the draft into a create-product request body.

        Raises:
            ValueError: if ``price`` is not empty and not a number.
        """
        price_text = self.price.strip()
        price = float(price_text) if price_text else 0.0
        if not math.isfinite(price):
            raise ValueError(f"Invalid price: {self.price!r}")
        return {
            "name": self.name.strip(),
            "price": price,
            "image_url": self.image_url.strip(),
            "description": self.description,
            "marketplace_link": self.marketplace_link.strip(),
        }


def format_price(value: float, prefix: str = "Rp") -> str:
    """Render a price the way the storefront displays it, e.g. ``Rp 19,990``."""
    text = f"{value:,.2f}".rstrip("0").rstrip(".")
    return f"{prefix} {text}"
