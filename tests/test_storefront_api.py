# tests/test_storefront_api.py

"""Tests for the async endpoint facade with a mocked ApiClient."""

import unittest
from unittest.mock import MagicMock

from storefront.api.client import ApiClient
from storefront.api.errors import RequestError, ResponseFormatError
from storefront.services.storefront_api import StorefrontApi


class TestStorefrontApi(unittest.IsolatedAsyncioTestCase):
    """Endpoint paths, methods and payload conversion."""

    def setUp(self) -> None:
        self.client = MagicMock(spec=ApiClient)
        self.api = StorefrontApi(client=self.client)

    async def test_login_posts_form_and_returns_token(self) -> None:
        """Credentials go form-encoded as username/password."""
        self.client.request.return_value = {"access_token": "tok"}
        token = await self.api.login("a@b.c", "pw")
        self.assertEqual(token, "tok")
        self.client.request.assert_called_once_with(
            "/auth/login",
            method="POST",
            form={"username": "a@b.c", "password": "pw"},
        )

    async def test_login_without_token_is_format_error(self) -> None:
        self.client.request.return_value = {"token_type": "bearer"}
        with self.assertRaises(ResponseFormatError):
            await self.api.login("a@b.c", "pw")

    async def test_register_posts_json(self) -> None:
        self.client.request.return_value = {"id": 1}
        await self.api.register("Sari", "s@b.c", "pw")
        self.client.request.assert_called_once_with(
            "/auth/register",
            method="POST",
            body={"name": "Sari", "email": "s@b.c", "password": "pw"},
        )

    async def test_me_uses_bearer_token(self) -> None:
        self.client.request.return_value = {"id": 1, "name": "A", "role": "admin"}
        user = await self.api.me("tok")
        self.assertTrue(user.is_admin)
        self.client.request.assert_called_once_with("/auth/me", token="tok")

    async def test_list_products_passes_params(self) -> None:
        """Filter params are forwarded verbatim."""
        self.client.request.return_value = [
            {"id": 1, "name": "A", "price": 10},
            {"id": 2, "name": "B", "price": 20},
        ]
        products = await self.api.list_products({"q": "shoe"})
        self.assertEqual([p.name for p in products], ["A", "B"])
        self.client.request.assert_called_once_with(
            "/products", params={"q": "shoe"},
        )

    async def test_list_products_rejects_non_list(self) -> None:
        self.client.request.return_value = "oops"
        with self.assertRaises(ResponseFormatError):
            await self.api.list_products()

    async def test_get_product_path(self) -> None:
        self.client.request.return_value = {"id": 9, "name": "Z"}
        product = await self.api.get_product("9")
        self.assertEqual(product.id, "9")
        self.client.request.assert_called_once_with("/products/9")

    async def test_create_product_requires_token(self) -> None:
        self.client.request.return_value = {"id": 3}
        payload = {"name": "A", "price": 1.0}
        await self.api.create_product("tok", payload)
        self.client.request.assert_called_once_with(
            "/products", method="POST", body=payload, token="tok",
        )

    async def test_list_users(self) -> None:
        self.client.request.return_value = [
            {"id": 1, "name": "A", "email": "a@b.c", "role": "admin"},
        ]
        users = await self.api.list_users("tok")
        self.assertEqual(users[0].email, "a@b.c")
        self.client.request.assert_called_once_with("/users", token="tok")

    async def test_errors_propagate(self) -> None:
        self.client.request.side_effect = RequestError(403, "forbidden")
        with self.assertRaises(RequestError):
            await self.api.list_users("tok")


if __name__ == "__main__":
    unittest.main()
