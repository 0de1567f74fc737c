# storefront/services/admin_panel.py

"""Admin panel state: product and user listings plus product creation."""

import asyncio
import logging
from typing import Any, Protocol

from storefront.api.errors import ApiError
from storefront.config.settings import Settings
from storefront.models.product import Product, ProductDraft
from storefront.models.user import User
from storefront.services.request_generation import RequestGeneration

logger = logging.getLogger("storefront.admin")


class AdminBackend(Protocol):
    async def list_products(
        self, params: dict[str, str] | None = None,
    ) -> list[Product]: ...

    async def list_users(self, token: str) -> list[User]: ...

    async def create_product(
        self, token: str, payload: dict[str, Any],
    ) -> Any: ...


class AdminPanel:
    """Loads both listings independently; a failed load keeps prior data."""

    def __init__(self, api: AdminBackend, token: str) -> None:
        self._api = api
        self._token = token
        self._products_generation = RequestGeneration()
        self._users_generation = RequestGeneration()
        self.products: list[Product] = []
        self.users: list[User] = []
        self.error: str = ""

    async def load(self) -> None:
        """Refresh products and users concurrently."""
        await asyncio.gather(self.load_products(), self.load_users())

    async def load_products(self) -> bool:
        tag = self._products_generation.begin()
        try:
            products = await self._api.list_products()
        except ApiError as exc:
            logger.warning("Admin product listing failed: %s", exc)
            return False
        if not self._products_generation.is_current(tag):
            return False
        self.products = products
        return True

    async def load_users(self) -> bool:
        tag = self._users_generation.begin()
        try:
            users = await self._api.list_users(self._token)
        except ApiError as exc:
            logger.warning("Admin user listing failed: %s", exc)
            return False
        if not self._users_generation.is_current(tag):
            return False
        self.users = users
        return True

    async def create_product(self, draft: ProductDraft) -> bool:
        """Submit ``draft`` and reload the product listing on success."""
        self.error = ""
        try:
            payload = draft.to_payload()
        except ValueError:
            logger.info("Rejected draft with price %r", draft.price)
            self.error = Settings.MESSAGES["invalid_price"]
            return False

        try:
            await self._api.create_product(self._token, payload)
        except ApiError as exc:
            logger.warning("Product creation failed: %s", exc)
            self.error = Settings.MESSAGES["create_failed"]
            return False

        await self.load_products()
        return True

    def cancel(self) -> None:
        self._products_generation.invalidate()
        self._users_generation.invalidate()
