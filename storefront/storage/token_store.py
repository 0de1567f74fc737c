# storefront/storage/token_store.py

"""Durable key/value storage for the auth token."""

import json
import logging
from pathlib import Path
from typing import Any

from storefront.config.settings import Settings

logger = logging.getLogger("storefront.storage")


class TokenStore:
    """Keeps the bearer token in a small JSON file across restarts.

    The file behaves like browser local storage: a flat object of
    string values, of which this store owns a single key.
    """

    def __init__(
        self, path: Path | None = None, key: str | None = None,
    ) -> None:
        self.path: Path = path or Settings.STATE_DIR / Settings.STORAGE_FILE
        self.key: str = key or Settings.TOKEN_STORAGE_KEY
        logger.debug("TokenStore initialised, path=%s", self.path)

    def _read(self) -> dict[str, Any]:
        """Load the whole storage object, tolerating a missing file."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            logger.warning(
                "Unreadable storage file %s, ignoring it", self.path,
                exc_info=True,
            )
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    def load(self) -> str:
        """Return the stored token, or an empty string."""
        value = self._read().get(self.key)
        return value if isinstance(value, str) else ""

    def save(self, token: str) -> None:
        """Persist ``token`` under the storage key."""
        data = self._read()
        data[self.key] = token
        self._write(data)
        logger.info("Stored auth token in %s", self.path)

    def clear(self) -> None:
        """Remove the token, keeping any other stored keys."""
        data = self._read()
        if self.key not in data:
            return
        del data[self.key]
        self._write(data)
        logger.info("Cleared auth token from %s", self.path)
