# storefront/api/client.py

"""Thin HTTP client for the storefront REST backend."""

import json
import logging
from typing import Any

from curl_cffi import CurlError
from curl_cffi import requests as curl_requests

from storefront.api.errors import RequestError, ResponseFormatError, TransportError
from storefront.config.settings import Settings


class ApiClient:
    """Issues JSON requests against the configured backend.

    Blocking by design: async callers hand :meth:`request` to
    ``asyncio.to_thread`` so the UI loop never waits on the network.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.logger = logging.getLogger("storefront.api")
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")
        self.session = curl_requests.Session()
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def _build_headers(
        self, token: str | None, form: bool,
    ) -> dict[str, str]:
        """Content negotiation plus the optional bearer credential."""
        headers: dict[str, str] = {
            "Accept": "application/json",
            "Content-Type": (
                "application/x-www-form-urlencoded"
                if form
                else "application/json"
            ),
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        form: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        token: str | None = None,
    ) -> Any:
        """Send a request and return parsed JSON or raw text.

        Raises:
            TransportError: no response was obtained.
            RequestError: the backend returned a non-2xx status.
            ResponseFormatError: a JSON response could not be parsed.
        """
        url = f"{self.base_url}{path}"
        headers = self._build_headers(token, form is not None)
        kwargs: dict[str, Any] = {
            "headers": headers,
            "timeout": self._request_timeout,
        }
        if params:
            kwargs["params"] = params
        if form is not None:
            kwargs["data"] = form
        elif body is not None:
            kwargs["data"] = json.dumps(body)

        self.logger.debug("%s %s params=%s", method, url, params or {})
        try:
            resp = self.session.request(method, url, **kwargs)
        except CurlError as exc:
            self.logger.warning(
                "Transport error on %s %s: %s", method, url, exc,
            )
            raise TransportError(str(exc)) from exc

        if not 200 <= resp.status_code < 300:
            text = resp.text or ""
            self.logger.warning(
                "HTTP %d on %s %s: %s",
                resp.status_code,
                method,
                path,
                text[:200],
            )
            raise RequestError(resp.status_code, text)

        content_type = resp.headers.get("content-type") or ""
        if "application/json" in content_type:
            try:
                return json.loads(resp.text)
            except ValueError as exc:
                self.logger.warning(
                    "Malformed JSON from %s %s", method, path,
                    exc_info=True,
                )
                raise ResponseFormatError(
                    f"Malformed JSON from {path}"
                ) from exc
        return resp.text
