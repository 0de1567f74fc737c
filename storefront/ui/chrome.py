# storefront/ui/chrome.py

"""Navigation bar and store footer around the routed outlet."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Static

from storefront.config.settings import Settings
from storefront.models.user import User

# (button id, label, route)
NAV_LINKS: list[tuple[str, str, str]] = [
    ("nav_home", "Home", "/"),
    ("nav_shop", "Shop", "/shop"),
    ("nav_about", "About", "/about"),
    ("nav_contact", "Contact", "/contact"),
    ("nav_admin", "Admin", "/admin"),
    ("nav_login", "Login", "/login"),
    ("nav_register", "Register", "/register"),
]

NAV_ROUTES: dict[str, str] = {button_id: route for button_id, _, route in NAV_LINKS}


class NavBar(Horizontal):
    """Brand, page links, and the session-dependent auth controls."""

    def compose(self) -> ComposeResult:
        yield Static(
            f"{Settings.STORE_INITIALS}  {Settings.STORE_NAME}", id="brand"
        )
        for button_id, label, _ in NAV_LINKS:
            yield Button(label, id=button_id, classes="nav-link")
        yield Static("", id="nav_greeting")
        yield Button("Logout", id="nav_logout", variant="warning")

    def update_state(self, route: str, user: User | None) -> None:
        """Highlight the active link and show the right auth controls."""
        for button_id, _, target in NAV_LINKS:
            self.query_one(f"#{button_id}", Button).set_class(
                route == target, "-active"
            )
        signed_in = user is not None
        self.query_one("#nav_admin").display = user is not None and user.is_admin
        self.query_one("#nav_login").display = not signed_in
        self.query_one("#nav_register").display = not signed_in
        self.query_one("#nav_logout").display = signed_in
        greeting = self.query_one("#nav_greeting", Static)
        greeting.display = signed_in
        greeting.update(f"Hi, {user.name}" if user is not None else "")


class StoreFooter(Static):
    """Brand blurb, social links and copyright line."""

    def on_mount(self) -> None:
        socials = "  ".join(link["label"] for link in Settings.SOCIAL_LINKS)
        year = datetime.now().year
        self.update(
            f"{Settings.STORE_NAME}: {Settings.STORE_TAGLINE}\n"
            f"Follow kami: {socials}\n"
            f"© {year} {Settings.STORE_NAME}. All rights reserved."
        )
