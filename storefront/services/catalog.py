# storefront/services/catalog.py

"""Catalog fetch state for the Shop listing and Product Detail views."""

import enum
import logging
import math
from dataclasses import dataclass
from typing import Protocol

from storefront.api.errors import ApiError
from storefront.models.product import Product
from storefront.services.request_generation import RequestGeneration

logger = logging.getLogger("storefront.catalog")


class CatalogSource(Protocol):
    """The slice of :class:`StorefrontApi` the catalog needs."""

    async def list_products(
        self, params: dict[str, str] | None = None,
    ) -> list[Product]: ...

    async def get_product(self, product_id: str) -> Product: ...


def _parse_bound(text: str) -> str | None:
    """Normalise a price bound; ``None`` when empty or not numeric."""
    cleaned = text.strip()
    if not cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug("Ignoring non-numeric price bound %r", text)
        return None
    if not math.isfinite(value):
        return None
    return str(int(value)) if value.is_integer() else str(value)


@dataclass(frozen=True)
class ShopFilters:
    """Search box and price bounds exactly as the visitor typed them."""

    query: str = ""
    min_price: str = ""
    max_price: str = ""

    def to_params(self) -> dict[str, str]:
        """Query parameters for ``GET /products``.

        ``q`` is always sent; unset or non-numeric bounds are left out
        rather than sent as zero.
        """
        params: dict[str, str] = {"q": self.query}
        low = _parse_bound(self.min_price)
        if low is not None:
            params["min_price"] = low
        high = _parse_bound(self.max_price)
        if high is not None:
            params["max_price"] = high
        return params


class ShopSearch:
    """Product listing driven by :class:`ShopFilters`, last request wins."""

    def __init__(self, api: CatalogSource) -> None:
        self._api = api
        self._generation = RequestGeneration()
        self.filters = ShopFilters()
        self.products: list[Product] = []

    async def search(self, filters: ShopFilters) -> bool:
        """Fetch the listing for ``filters``.

        Returns ``True`` if the result was applied, ``False`` if a newer
        search (or :meth:`cancel`) superseded it while in flight.
        """
        tag = self._generation.begin()
        self.filters = filters
        try:
            products = await self._api.list_products(filters.to_params())
        except ApiError as exc:
            logger.warning("Product listing failed for %r: %s", filters, exc)
            products = []

        if not self._generation.is_current(tag):
            logger.debug("Discarding superseded listing for %r", filters)
            return False
        self.products = products
        logger.info("Listing for %r: %d products", filters, len(products))
        return True

    def cancel(self) -> None:
        """Ignore whatever is still in flight."""
        self._generation.invalidate()


class DetailState(enum.Enum):
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"


class ProductDetailLoader:
    """Single product fetch keyed by the route parameter."""

    def __init__(self, api: CatalogSource) -> None:
        self._api = api
        self._generation = RequestGeneration()
        self.state = DetailState.LOADING
        self.product: Product | None = None

    async def load(self, product_id: str) -> bool:
        """Load ``product_id``; a failure or empty id ends in NOT_FOUND."""
        tag = self._generation.begin()
        self.state = DetailState.LOADING
        self.product = None
        if not product_id:
            self.state = DetailState.NOT_FOUND
            return True

        try:
            product: Product | None = await self._api.get_product(product_id)
        except ApiError as exc:
            logger.warning("Product %s could not be loaded: %s", product_id, exc)
            product = None

        if not self._generation.is_current(tag):
            logger.debug("Discarding superseded detail for %s", product_id)
            return False
        self.product = product
        self.state = (
            DetailState.LOADED if product is not None else DetailState.NOT_FOUND
        )
        return True

    def cancel(self) -> None:
        self._generation.invalidate()
