# storefront/services/router.py

"""Fragment-style routing: route table, admin gate, and history."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from storefront.models.user import User

logger = logging.getLogger("storefront.router")

# Ordered prefix table; the first matching prefix wins.
ROUTE_TABLE: list[tuple[str, str]] = [
    ("/shop", "shop"),
    ("/about", "about"),
    ("/contact", "contact"),
    ("/login", "login"),
    ("/register", "register"),
    ("/admin", "admin"),
    ("/product/", "product"),
]

DEFAULT_VIEW = "home"
UNAUTHORIZED_VIEW = "unauthorized"


@dataclass(frozen=True)
class RouteMatch:
    """The view a route renders, plus any path parameters."""

    view: str
    params: dict[str, str] = field(default_factory=lambda: dict[str, str]())


def normalize(fragment: str) -> str:
    """Turn a raw location fragment into a route path.

    ``""`` and ``"#"`` become ``"/"``; a missing leading slash is added
    so ``"#product/5"`` and ``"#/product/5"`` are the same route.
    """
    path = fragment.strip()
    if path.startswith("#"):
        path = path[1:]
    if not path:
        return "/"
    if not path.startswith("/"):
        path = "/" + path
    return path


def match_route(route: str) -> RouteMatch:
    """Resolve ``route`` against :data:`ROUTE_TABLE`, ignoring auth."""
    for prefix, view in ROUTE_TABLE:
        if route.startswith(prefix):
            if view == "product":
                rest = route[len(prefix):]
                product_id = rest.split("/", 1)[0].split("?", 1)[0]
                return RouteMatch(view, {"product_id": product_id})
            return RouteMatch(view)
    return RouteMatch(DEFAULT_VIEW)


def resolve_view(route: str, user: User | None) -> RouteMatch:
    """Resolve ``route`` and apply the admin gate for ``user``."""
    matched = match_route(route)
    if matched.view == "admin" and (user is None or not user.is_admin):
        return RouteMatch(UNAUTHORIZED_VIEW)
    return matched


RouteListener = Callable[[str], None]


class Router:
    """Holds the current route and a back/forward history.

    ``route`` and ``fragment`` always change together, before any
    listener runs, so observers never see one without the other.
    """

    def __init__(self, initial: str = "/") -> None:
        start = normalize(initial)
        self._history: list[str] = [start]
        self._index: int = 0
        self._listeners: list[RouteListener] = []

    @property
    def route(self) -> str:
        return self._history[self._index]

    @property
    def fragment(self) -> str:
        """Location fragment shown in the address bar, e.g. ``#/shop``."""
        return f"#{self.route}"

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._history) - 1

    def subscribe(self, listener: RouteListener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        route = self.route
        for listener in list(self._listeners):
            listener(route)

    def navigate(self, path: str) -> None:
        """Go to ``path``, dropping any forward history."""
        route = normalize(path)
        if route == self.route:
            return
        del self._history[self._index + 1:]
        self._history.append(route)
        self._index += 1
        logger.debug("Navigate -> %s", route)
        self._notify()

    def handle_external(self, fragment: str) -> None:
        """React to a manual edit of the location fragment."""
        logger.debug("External navigation to %r", fragment)
        self.navigate(fragment)

    def back(self) -> None:
        if not self.can_go_back:
            return
        self._index -= 1
        logger.debug("Back -> %s", self.route)
        self._notify()

    def forward(self) -> None:
        if not self.can_go_forward:
            return
        self._index += 1
        logger.debug("Forward -> %s", self.route)
        self._notify()
