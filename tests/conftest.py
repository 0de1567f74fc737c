# tests/conftest.py

"""Shared pytest fixtures for all storefront tests."""

from collections.abc import Generator
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def mock_browser() -> Generator[None, None, None]:
    """Patch webbrowser.open globally so redirects never leave the test."""
    with patch("webbrowser.open"):
        yield
