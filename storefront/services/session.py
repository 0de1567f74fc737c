# storefront/services/session.py

"""Auth session: token persistence and identity resolution."""

import enum
import logging
from collections.abc import Callable
from typing import Protocol

from storefront.api.errors import ApiError
from storefront.models.user import User
from storefront.storage.token_store import TokenStore

logger = logging.getLogger("storefront.session")


class SessionState(enum.Enum):
    """Lifecycle of the visitor's session."""

    ANONYMOUS = "anonymous"
    RESOLVING = "resolving"
    AUTHENTICATED = "authenticated"


class IdentityResolver(Protocol):
    """Anything that can turn a token into a :class:`User`."""

    async def me(self, token: str) -> User: ...


SessionListener = Callable[["Session"], None]


class Session:
    """Token + resolved user, shared explicitly with the views that need it.

    Every token change bumps a generation counter. A resolution is
    applied only if its generation is still current when the backend
    answers, so a late ``/auth/me`` response can never revive a session
    that was logged out or replaced in the meantime.
    """

    def __init__(self, resolver: IdentityResolver, store: TokenStore) -> None:
        self._resolver = resolver
        self._store = store
        self._listeners: list[SessionListener] = []
        self._token: str = store.load()
        self._user: User | None = None
        self._generation: int = 0
        self._attempted: int = 0
        if self._token:
            self._generation = 1
            self._state = SessionState.RESOLVING
            logger.info("Restored stored token, resolution pending")
        else:
            self._state = SessionState.ANONYMOUS

    # ── Read-only view ───────────────────────────────────

    @property
    def token(self) -> str:
        return self._token

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_admin(self) -> bool:
        return self._user is not None and self._user.is_admin

    @property
    def pending_generation(self) -> int | None:
        """Generation still waiting for its single resolution attempt."""
        if (
            self._state is SessionState.RESOLVING
            and self._attempted != self._generation
        ):
            return self._generation
        return None

    # ── Listeners ────────────────────────────────────────

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ── Transitions ──────────────────────────────────────

    def set_token(self, token: str) -> int | None:
        """Adopt a freshly issued token and enter RESOLVING.

        Returns the generation to pass to :meth:`resolve`, or ``None``
        when nothing needs resolving (empty token or unchanged token).
        """
        if not token:
            self.logout()
            return None
        if token == self._token and self._state is not SessionState.ANONYMOUS:
            logger.debug("Token unchanged, skipping re-resolution")
            return None

        self._generation += 1
        self._token = token
        self._user = None
        self._state = SessionState.RESOLVING
        self._store.save(token)
        logger.info("Token set, resolving identity (generation %d)", self._generation)
        self._notify()
        return self._generation

    async def resolve(self, generation: int) -> None:
        """Resolve the token of ``generation`` to a user, at most once."""
        if generation != self._generation or generation == self._attempted:
            logger.debug("Resolution for generation %d not needed", generation)
            return
        self._attempted = generation
        token = self._token

        user: User | None
        try:
            user = await self._resolver.me(token)
        except ApiError as exc:
            logger.info("Token resolution failed: %s", exc)
            user = None

        if generation != self._generation:
            logger.info(
                "Discarding superseded resolution (generation %d, now %d)",
                generation,
                self._generation,
            )
            return

        if user is None:
            self._clear()
        else:
            self._user = user
            self._state = SessionState.AUTHENTICATED
            logger.info("Authenticated as %s (role=%s)", user.email, user.role)
        self._notify()

    def logout(self) -> None:
        """Drop the session immediately; in-flight resolutions become stale."""
        self._generation += 1
        self._clear()
        logger.info("Logged out")
        self._notify()

    def _clear(self) -> None:
        self._token = ""
        self._user = None
        self._state = SessionState.ANONYMOUS
        self._store.clear()
