# storefront/services/request_generation.py

"""Last-request-wins bookkeeping for reactive fetch sites."""


class RequestGeneration:
    """Monotonic tag handed out to each fetch at one call site.

    A response may only be applied while its tag is still the latest;
    newer input, navigation away or logout make older tags stale.
    """

    def __init__(self) -> None:
        self._current: int = 0

    @property
    def current(self) -> int:
        return self._current

    def begin(self) -> int:
        """Start a new request and return its tag."""
        self._current += 1
        return self._current

    def is_current(self, tag: int) -> bool:
        """True when no newer request (or invalidation) happened since ``tag``."""
        return tag == self._current

    def invalidate(self) -> None:
        """Make every in-flight tag stale without starting a request."""
        self._current += 1
