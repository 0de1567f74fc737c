# storefront/models/user.py

"""User account model resolved from the backend."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from storefront.config.settings import Settings


def _parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning ``None`` when unusable."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        return None


@dataclass
class User:
    """A registered account; ``role`` is the only authorization signal."""

    id: str
    name: str
    email: str = ""
    role: str = ""
    created_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        """True for the privileged role."""
        return self.role == Settings.ADMIN_ROLE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "User":
        """Parse a backend user record."""
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name") or ""),
            email=str(data.get("email") or ""),
            role=str(data.get("role") or ""),
            created_at=_parse_timestamp(data.get("created_at")),
        )
