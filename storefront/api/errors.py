# storefront/api/errors.py

"""Error taxonomy for backend calls."""


class ApiError(Exception):
    """Base class for every failure raised by the API client."""


class TransportError(ApiError):
    """No response was obtained (DNS, connection refused, timeout)."""


class RequestError(ApiError):
    """The backend answered with a non-success status.

    ``body`` carries the response text so callers can log the detail
    without ever showing it to the visitor.
    """

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(body or f"Request failed: {status_code}")


class ResponseFormatError(ApiError):
    """A success response whose body could not be used."""
