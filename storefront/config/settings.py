# storefront/config/settings.py

"""Central configuration for the Bina Ragam storefront."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _backend_url() -> str:
    """Resolve the backend base URL from the environment."""
    raw = os.getenv("STOREFRONT_BACKEND_URL") or "http://localhost:8000"
    return raw.strip().rstrip("/")


class Settings:
    """Central configuration for the Bina Ragam storefront."""

    # --- Backend ---
    API_BASE_URL: str = _backend_url()
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    HEALTH_SLOW_MS: float = 2000.0      # Latency above this is "slow"

    # --- Auth ---
    ADMIN_ROLE: str = "admin"
    TOKEN_STORAGE_KEY: str = "br_token"

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    STATE_DIR: Path = Path(
        os.getenv("STOREFRONT_STATE_DIR") or BASE_DIR / ".storefront"
    )
    STORAGE_FILE: str = "storage.json"
    LOGS_DIR: Path = BASE_DIR / "logs"

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = (
        os.getenv("STOREFRONT_LOG_LEVEL") or "WARNING"
    ).upper()
    QUIET_LOGGERS: tuple[str, ...] = ("asyncio",)

    # --- Store identity ---
    STORE_NAME: str = "Bina Ragam"
    STORE_INITIALS: str = "BR"
    STORE_TAGLINE: str = (
        "Platform display produk elegan untuk menampilkan ragam "
        "pilihan dan redirect ke marketplace."
    )
    CONTACT_EMAIL: str = "hello@binaragam.com"
    CONTACT_INSTAGRAM: str = "@binaragam"
    CURRENCY_PREFIX: str = "Rp"

    # --- Marketplaces (purchase redirects) ---
    MARKETPLACES: list[dict[str, str]] = [
        {
            "id": "tokopedia",
            "label": "Tokopedia",
            "url": "https://www.tokopedia.com",
        },
        {
            "id": "shopee",
            "label": "Shopee",
            "url": "https://shopee.co.id",
        },
    ]

    SOCIAL_LINKS: list[dict[str, str]] = [
        {"label": "Instagram", "url": "https://www.instagram.com/binaragam"},
        {"label": "TikTok", "url": "https://www.tiktok.com/@binaragam"},
        {"label": "Shopee", "url": "https://shopee.co.id"},
        {"label": "Tokopedia", "url": "https://www.tokopedia.com"},
    ]

    # --- Localized UI copy ---
    MESSAGES: dict[str, str] = {
        "loading": "Memuat...",
        "not_found": "Produk tidak ditemukan",
        "unauthorized": "Tidak berizin",
        "login_failed": "Login gagal",
        "register_failed": "Registrasi gagal",
        "invalid_price": "Harga tidak valid",
        "create_failed": "Gagal menyimpan produk",
        "no_marketplace": "Link marketplace belum tersedia",
        "empty_listing": "Belum ada produk",
    }
