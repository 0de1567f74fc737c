# storefront/services/auth_forms.py

"""Login and registration form submission."""

import logging
from typing import Protocol

from storefront.api.errors import ApiError
from storefront.config.settings import Settings

logger = logging.getLogger("storefront.auth")


class AuthBackend(Protocol):
    async def login(self, email: str, password: str) -> str: ...

    async def register(self, name: str, email: str, password: str) -> None: ...


class LoginForm:
    """Submits credentials; backend error detail never reaches ``error``."""

    def __init__(self, api: AuthBackend) -> None:
        self._api = api
        self.error: str = ""

    async def submit(self, email: str, password: str) -> str | None:
        """Return the issued token, or ``None`` with ``error`` set."""
        self.error = ""
        try:
            token = await self._api.login(email, password)
        except ApiError as exc:
            logger.info("Login failed for %s: %s", email, exc)
            self.error = Settings.MESSAGES["login_failed"]
            return None
        logger.info("Login succeeded for %s", email)
        return token


class RegisterForm:
    """Creates an account; the caller redirects to Login on success."""

    def __init__(self, api: AuthBackend) -> None:
        self._api = api
        self.error: str = ""

    async def submit(self, name: str, email: str, password: str) -> bool:
        self.error = ""
        try:
            await self._api.register(name, email, password)
        except ApiError as exc:
            logger.info("Registration failed for %s: %s", email, exc)
            self.error = Settings.MESSAGES["register_failed"]
            return False
        return True
