# storefront/ui/app.py

"""Terminal shell for the Bina Ragam storefront."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Button, Footer, Header, Input

from storefront.config.settings import Settings
from storefront.services.router import RouteMatch, Router, resolve_view
from storefront.services.session import Session
from storefront.services.storefront_api import StorefrontApi
from storefront.storage.token_store import TokenStore
from storefront.ui.chrome import NAV_ROUTES, NavBar, StoreFooter
from storefront.ui.views.admin import AdminView
from storefront.ui.views.auth import LoginView, RegisterView
from storefront.ui.views.base import StorefrontView, ViewContext
from storefront.ui.views.pages import (
    AboutView,
    ContactView,
    HomeView,
    UnauthorizedView,
)
from storefront.ui.views.product_detail import ProductDetailView
from storefront.ui.views.shop import ShopView

logger = logging.getLogger("storefront.ui")

VIEWS: dict[str, type[StorefrontView]] = {
    "home": HomeView,
    "shop": ShopView,
    "about": AboutView,
    "contact": ContactView,
    "login": LoginView,
    "register": RegisterView,
    "admin": AdminView,
    "product": ProductDetailView,
    "unauthorized": UnauthorizedView,
}


class StorefrontApp(App[None]):
    """Navigation bar, address bar, routed view and footer."""

    CSS_PATH = "styles.tcss"
    TITLE = Settings.STORE_NAME

    BINDINGS = [
        Binding("alt+left", "back", "Back"),
        Binding("alt+right", "forward", "Forward"),
        Binding("ctrl+l", "focus_location", "Address"),
    ]

    def __init__(
        self,
        api: StorefrontApi | None = None,
        token_store: TokenStore | None = None,
        initial_route: str = "/",
    ) -> None:
        super().__init__()
        self.api = api or StorefrontApi()
        self.session = Session(self.api, token_store or TokenStore())
        self.router = Router(initial_route)
        self.context = ViewContext(
            api=self.api, session=self.session, router=self.router,
        )
        self.current_match: RouteMatch | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield NavBar(id="navbar")
        yield Input(value=self.router.fragment, id="location")
        yield Container(id="outlet")
        yield StoreFooter(id="store_footer")
        yield Footer()

    async def on_mount(self) -> None:
        self.sub_title = self.router.fragment
        self.router.subscribe(self._on_route_changed)
        self.session.subscribe(self._on_session_changed)
        pending = self.session.pending_generation
        if pending is not None:
            self.start_resolution(pending)
        await self.render_route()

    # ── Reactions ────────────────────────────────────────

    def _on_route_changed(self, route: str) -> None:
        fragment = self.router.fragment
        self.sub_title = fragment
        self.query_one("#location", Input).value = fragment
        self.call_later(self.render_route)

    def _on_session_changed(self, session: Session) -> None:
        self.call_later(self.render_route)

    async def render_route(self) -> None:
        """Mount the view for the current route and session, if it changed."""
        route = self.router.route
        user = self.session.user
        self.query_one(NavBar).update_state(route, user)

        match = resolve_view(route, user)
        if match == self.current_match:
            return
        self.current_match = match
        logger.info("Rendering %s for %s", match.view, route)

        outlet = self.query_one("#outlet", Container)
        await outlet.remove_children()
        view = VIEWS[match.view](self.context, **match.params)
        await outlet.mount(view)

    def start_resolution(self, generation: int) -> None:
        self.run_worker(
            self.session.resolve(generation), group="session_resolve",
        )

    # ── Events ───────────────────────────────────────────

    def on_login_view_logged_in(self, message: LoginView.LoggedIn) -> None:
        generation = self.session.set_token(message.token)
        if generation is not None:
            self.start_resolution(generation)
        self.router.navigate("/")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "nav_logout":
            self.session.logout()
            self.notify("Anda telah keluar")
        elif button_id in NAV_ROUTES:
            self.router.navigate(NAV_ROUTES[button_id])

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "location":
            self.router.handle_external(event.value)

    # ── Actions ──────────────────────────────────────────

    def action_back(self) -> None:
        self.router.back()

    def action_forward(self) -> None:
        self.router.forward()

    def action_focus_location(self) -> None:
        self.query_one("#location", Input).focus()
