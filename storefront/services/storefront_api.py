# storefront/services/storefront_api.py

"""Async facade over the backend endpoints used by the storefront."""

import asyncio
import logging
from typing import Any

from storefront.api.client import ApiClient
from storefront.api.errors import ResponseFormatError
from storefront.models.product import Product
from storefront.models.user import User

logger = logging.getLogger("storefront.services.api")


def _expect_list(data: Any, path: str) -> list[dict[str, Any]]:
    """Reject listing responses that are not a JSON array of objects."""
    if not isinstance(data, list):
        raise ResponseFormatError(f"Expected a list from {path}")
    return [item for item in data if isinstance(item, dict)]


def _expect_dict(data: Any, path: str) -> dict[str, Any]:
    """Reject record responses that are not a JSON object."""
    if not isinstance(data, dict):
        raise ResponseFormatError(f"Expected an object from {path}")
    return data


class StorefrontApi:
    """One coroutine per backend endpoint.

    Each call runs the blocking :class:`ApiClient` in a worker thread
    and converts the payload into model objects. Errors propagate as
    :class:`~storefront.api.errors.ApiError` subclasses.
    """

    def __init__(self, client: ApiClient | None = None) -> None:
        self.client = client or ApiClient()

    async def _call(self, path: str, **kwargs: Any) -> Any:
        return await asyncio.to_thread(self.client.request, path, **kwargs)

    # ── Auth ─────────────────────────────────────────────

    async def login(self, email: str, password: str) -> str:
        """Exchange credentials for a bearer token."""
        data = _expect_dict(
            await self._call(
                "/auth/login",
                method="POST",
                form={"username": email, "password": password},
            ),
            "/auth/login",
        )
        token = data.get("access_token")
        if not token:
            raise ResponseFormatError("Login response has no access_token")
        return str(token)

    async def register(self, name: str, email: str, password: str) -> None:
        """Create a new visitor account."""
        await self._call(
            "/auth/register",
            method="POST",
            body={"name": name, "email": email, "password": password},
        )
        logger.info("Registered account for %s", email)

    async def me(self, token: str) -> User:
        """Resolve a token to the profile it belongs to."""
        data = _expect_dict(
            await self._call("/auth/me", token=token), "/auth/me"
        )
        return User.from_dict(data)

    # ── Catalog ──────────────────────────────────────────

    async def list_products(
        self, params: dict[str, str] | None = None,
    ) -> list[Product]:
        """List products, filtered by ``q``/``min_price``/``max_price``."""
        data = await self._call("/products", params=params or {})
        return [
            Product.from_dict(item)
            for item in _expect_list(data, "/products")
        ]

    async def get_product(self, product_id: str) -> Product:
        """Fetch a single product by identifier."""
        path = f"/products/{product_id}"
        return Product.from_dict(
            _expect_dict(await self._call(path), path)
        )

    async def create_product(
        self, token: str, payload: dict[str, Any],
    ) -> Any:
        """Create a product; requires an admin token."""
        result = await self._call(
            "/products", method="POST", body=payload, token=token,
        )
        logger.info("Created product %r", payload.get("name"))
        return result

    # ── Users ────────────────────────────────────────────

    async def list_users(self, token: str) -> list[User]:
        """List every account; requires an admin token."""
        data = await self._call("/users", token=token)
        return [
            User.from_dict(item)
            for item in _expect_list(data, "/users")
        ]
