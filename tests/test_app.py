# tests/test_app.py

"""Smoke tests for the storefront shell using Textual's Pilot."""

import tempfile
import unittest
from pathlib import Path
from typing import Any, cast
from unittest.mock import MagicMock, patch

from textual.pilot import Pilot
from textual.widgets import Button, DataTable, Input, TextArea

from storefront.api.errors import RequestError
from storefront.config.settings import Settings
from storefront.models.product import Discount, Product
from storefront.models.user import User
from storefront.services.session import SessionState
from storefront.services.storefront_api import StorefrontApi
from storefront.storage.token_store import TokenStore
from storefront.ui.app import StorefrontApp
from storefront.ui.views.admin import AdminView
from storefront.ui.views.auth import LoginView, RegisterView
from storefront.ui.views.pages import (
    AboutView,
    ContactView,
    HomeView,
    UnauthorizedView,
    build_mailto,
)
from storefront.ui.views.product_detail import ProductDetailView
from storefront.ui.views.shop import ShopView


async def _settle(app: StorefrontApp, pilot: Pilot[Any], rounds: int = 3) -> None:
    """Let messages, call_later callbacks and workers run to completion."""
    for _ in range(rounds):
        await pilot.pause()
        await app.workers.wait_for_complete()
    await pilot.pause()


class TestStorefrontApp(unittest.IsolatedAsyncioTestCase):
    """Routing, admin gate and session wiring in the running TUI."""

    def setUp(self) -> None:
        self.store = TokenStore(Path(tempfile.mkdtemp()) / "storage.json")
        self.api = MagicMock(spec=StorefrontApi)
        self.products = [
            Product(id="1", name="Tas Rotan", price=150000.0),
            Product(
                id="2",
                name="Kain Batik",
                price=200000.0,
                marketplace_link="https://shopee.co.id/2",
                discount=Discount(active=True, percentage=10),
            ),
        ]
        self.api.list_products.return_value = self.products
        self.api.get_product.return_value = self.products[1]
        self.api.list_users.return_value = [
            User(id="1", name="Ayu", email="ayu@b.c", role="admin"),
            User(id="2", name="Budi", email="budi@b.c", role="user"),
        ]
        self.admin = User(id="1", name="Ayu", email="ayu@b.c", role="admin")

    def _app(self, route: str = "/") -> StorefrontApp:
        return StorefrontApp(
            api=cast(StorefrontApi, self.api),
            token_store=self.store,
            initial_route=route,
        )

    async def test_app_composes_home(self) -> None:
        """The shell starts on Home with the popular listing loaded."""
        app = self._app()
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            app.query_one("#navbar")
            app.query_one("#location", Input)
            home = app.query_one(HomeView)
            shop = home.query_one(ShopView)
            self.assertEqual(len(shop.search.products), 2)
            self.assertIs(app.session.state, SessionState.ANONYMOUS)

    async def test_title_from_store_settings(self) -> None:
        app = self._app()
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            self.assertEqual(app.title, Settings.STORE_NAME)
            self.assertEqual(app.sub_title, "#/")

    async def test_shop_populates_table(self) -> None:
        app = self._app("/shop")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            shop = app.query_one(ShopView)
            table = cast(
                DataTable[Any], shop.query_one("#shop_results", DataTable),
            )
            self.assertEqual(table.row_count, 2)

    async def test_shop_input_refetches_with_filters(self) -> None:
        """Typing in the filters issues a listing with those params."""
        app = self._app("/shop")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            shop = app.query_one(ShopView)
            shop.query_one("#shop_min", Input).value = "100"
            shop.query_one("#shop_query", Input).value = "shoe"
            await _settle(app, pilot)
            self.assertEqual(
                self.api.list_products.await_args.args[0],
                {"q": "shoe", "min_price": "100"},
            )

    async def test_nav_button_navigates(self) -> None:
        app = self._app()
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            app.query_one("#nav_about", Button).press()
            await _settle(app, pilot)
            self.assertEqual(app.router.route, "/about")
            app.query_one(AboutView)
            self.assertEqual(
                app.query_one("#location", Input).value, "#/about",
            )

    async def test_location_edit_navigates(self) -> None:
        """Submitting the address bar behaves like a fragment edit."""
        app = self._app()
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            location = app.query_one("#location", Input)
            location.focus()
            location.value = "contact"
            await pilot.press("enter")
            await _settle(app, pilot)
            self.assertEqual(app.router.route, "/contact")
            app.query_one(ContactView)

    async def test_back_action(self) -> None:
        app = self._app()
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            app.router.navigate("/about")
            await _settle(app, pilot)
            app.action_back()
            await _settle(app, pilot)
            app.query_one(HomeView)

    async def test_product_route_loads_detail(self) -> None:
        app = self._app("/product/2")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            detail = app.query_one(ProductDetailView)
            self.assertEqual(detail.product_id, "2")
            self.assertEqual(detail.loader.product, self.products[1])
            self.api.get_product.assert_awaited_with("2")

    async def test_admin_route_anonymous_is_unauthorized(self) -> None:
        app = self._app("/admin")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            app.query_one(UnauthorizedView)
            self.assertEqual(len(app.query(AdminView)), 0)

    async def test_admin_route_non_admin_is_unauthorized(self) -> None:
        self.store.save("tok")
        self.api.me.return_value = User(id="2", name="Budi", role="user")
        app = self._app("/admin")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            self.assertIs(app.session.state, SessionState.AUTHENTICATED)
            app.query_one(UnauthorizedView)

    async def test_admin_route_admin_session(self) -> None:
        """A stored admin token resolves and unlocks the Admin view."""
        self.store.save("tok")
        self.api.me.return_value = self.admin
        app = self._app("/admin")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            admin = app.query_one(AdminView)
            self.assertEqual(len(admin.panel.users), 2)
            self.assertEqual(len(admin.panel.products), 2)
            self.api.me.assert_awaited_once_with("tok")
            self.assertTrue(app.query_one("#nav_admin").display)

    async def test_admin_creates_product(self) -> None:
        self.store.save("tok")
        self.api.me.return_value = self.admin
        self.api.create_product.return_value = {"id": "3"}
        app = self._app("/admin")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            admin = app.query_one(AdminView)
            admin.query_one("#product_name", Input).value = "Syal"
            admin.query_one("#product_price", Input).value = "19.99"
            admin.query_one("#product_save", Button).press()
            await _settle(app, pilot)
            self.api.create_product.assert_awaited_once_with(
                "tok",
                {
                    "name": "Syal",
                    "price": 19.99,
                    "image_url": "",
                    "description": "",
                    "marketplace_link": "",
                },
            )
            self.assertEqual(
                admin.query_one("#product_name", Input).value, "",
            )

    async def test_logout_reverts_admin_gate(self) -> None:
        self.store.save("tok")
        self.api.me.return_value = self.admin
        app = self._app("/admin")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            app.query_one(AdminView)
            app.query_one("#nav_logout", Button).press()
            await _settle(app, pilot)
            app.query_one(UnauthorizedView)
            self.assertIs(app.session.state, SessionState.ANONYMOUS)
            self.assertEqual(self.store.load(), "")

    async def test_login_success_authenticates_and_goes_home(self) -> None:
        self.api.login.return_value = "fresh"
        self.api.me.return_value = self.admin
        app = self._app("/login")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            view = app.query_one(LoginView)
            view.query_one("#login_email", Input).value = "ayu@b.c"
            view.query_one("#login_password", Input).value = "pw"
            view.query_one("#login_submit", Button).press()
            await _settle(app, pilot, rounds=5)
            self.api.login.assert_awaited_once_with("ayu@b.c", "pw")
            self.assertIs(app.session.state, SessionState.AUTHENTICATED)
            self.assertEqual(app.router.route, "/")
            self.assertEqual(self.store.load(), "fresh")

    async def test_login_failure_shows_generic_error(self) -> None:
        self.api.login.side_effect = RequestError(401, "Incorrect password")
        app = self._app("/login")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            view = app.query_one(LoginView)
            view.query_one("#login_email", Input).value = "ayu@b.c"
            view.query_one("#login_password", Input).value = "bad"
            view.query_one("#login_submit", Button).press()
            await _settle(app, pilot)
            self.assertEqual(view.form.error, "Login gagal")
            self.assertIs(app.session.state, SessionState.ANONYMOUS)
            self.assertEqual(app.router.route, "/login")
            self.api.me.assert_not_awaited()


class TestOutboundLinks(unittest.IsolatedAsyncioTestCase):
    """Marketplace redirects, contact mail and the register hand-off."""

    def setUp(self) -> None:
        self.store = TokenStore(Path(tempfile.mkdtemp()) / "storage.json")
        self.api = MagicMock(spec=StorefrontApi)
        self.plain = Product(id="1", name="Tas Rotan", price=150000.0)
        self.linked = Product(
            id="7",
            name="Kain Batik",
            price=200000.0,
            marketplace_link="https://shopee.co.id/7",
        )
        self.api.list_products.return_value = [self.plain, self.linked]
        self.api.get_product.return_value = self.linked

    def _app(self, route: str) -> StorefrontApp:
        return StorefrontApp(
            api=cast(StorefrontApi, self.api),
            token_store=self.store,
            initial_route=route,
        )

    async def test_detail_button_opens_marketplace_link(self) -> None:
        app = self._app("/product/7")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            with patch("webbrowser.open") as browser:
                app.query_one("#detail_marketplace", Button).press()
                await _settle(app, pilot)
            browser.assert_called_once_with("https://shopee.co.id/7")

    async def test_detail_without_link_warns(self) -> None:
        self.api.get_product.return_value = self.plain
        app = self._app("/product/1")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            detail = app.query_one(ProductDetailView)
            with (
                patch("webbrowser.open") as browser,
                patch.object(detail, "notify") as notify,
            ):
                detail.query_one("#detail_marketplace", Button).press()
                await _settle(app, pilot)
            browser.assert_not_called()
            notify.assert_called_once_with(
                Settings.MESSAGES["no_marketplace"], severity="warning",
            )

    async def test_shop_m_key_opens_selected_row(self) -> None:
        app = self._app("/shop")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            table = cast(
                DataTable[Any], app.query_one("#shop_results", DataTable),
            )
            table.focus()
            table.move_cursor(row=1)
            await pilot.pause()
            with patch("webbrowser.open") as browser:
                await pilot.press("m")
                await _settle(app, pilot)
            browser.assert_called_once_with("https://shopee.co.id/7")

    async def test_home_marketplace_buttons(self) -> None:
        app = self._app("/")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            for market in Settings.MARKETPLACES:
                with self.subTest(market=market["id"]):
                    with patch("webbrowser.open") as browser:
                        app.query_one(f"#hero_{market['id']}", Button).press()
                        await _settle(app, pilot)
                    browser.assert_called_once_with(market["url"])
            self.assertEqual(app.router.route, "/")

    async def test_home_shop_button_navigates(self) -> None:
        app = self._app("/")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            app.query_one("#hero_shop", Button).press()
            await _settle(app, pilot)
            self.assertEqual(app.router.route, "/shop")

    async def test_contact_send_opens_mailto(self) -> None:
        app = self._app("/contact")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            view = app.query_one(ContactView)
            view.query_one("#contact_name", Input).value = "Ayu"
            view.query_one("#contact_email", Input).value = "a@b.c"
            view.query_one("#contact_message", TextArea).load_text("halo & bye")
            with patch("webbrowser.open") as browser:
                view.query_one("#contact_send", Button).press()
                await _settle(app, pilot)
            browser.assert_called_once_with(
                build_mailto("Ayu", "a@b.c", "halo & bye"),
            )

    async def test_register_success_goes_to_login(self) -> None:
        self.api.register.return_value = None
        app = self._app("/register")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            view = app.query_one(RegisterView)
            view.query_one("#register_name", Input).value = "Sari"
            view.query_one("#register_email", Input).value = "s@b.c"
            view.query_one("#register_password", Input).value = "pw"
            view.query_one("#register_submit", Button).press()
            await _settle(app, pilot)
            self.api.register.assert_awaited_once_with("Sari", "s@b.c", "pw")
            self.assertEqual(app.router.route, "/login")
            app.query_one(LoginView)

    async def test_register_failure_stays(self) -> None:
        self.api.register.side_effect = RequestError(400, "Email taken")
        app = self._app("/register")
        async with app.run_test() as pilot:
            await _settle(app, pilot)
            view = app.query_one(RegisterView)
            view.query_one("#register_submit", Button).press()
            await _settle(app, pilot)
            self.assertEqual(view.form.error, "Registrasi gagal")
            self.assertEqual(app.router.route, "/register")


if __name__ == "__main__":
    unittest.main()
