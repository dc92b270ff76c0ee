"""Durable client preference storage (the language cookie)."""

import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

SECONDS_PER_DAY = 24 * 60 * 60


def _wall_clock() -> float:
    return time.time()


class PreferenceStore(ABC):
    """Abstract base class for durable name/value preferences."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Return the stored value, or None."""

    @abstractmethod
    def set(self, name: str, value: str, max_age_days: int = 365) -> None:
        """Persist ``value`` for ``max_age_days``."""

    @abstractmethod
    def delete(self, name: str) -> None:
        """Forget the stored value."""


class InMemoryPreferenceStore(PreferenceStore):
    """Process-local preference store honouring expiry.

    Args:
        initial: Optional values present at startup (as if read from a cookie jar)
        clock: Time source in seconds
    """

    def __init__(
        self,
        initial: Optional[Mapping[str, str]] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._clock = clock or _wall_clock
        self._values: Dict[str, Tuple[str, Optional[float]]] = {
            name: (value, None) for name, value in (initial or {}).items()
        }

    def get(self, name: str) -> Optional[str]:
        entry = self._values.get(name)
        if entry is None:
            return None
        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._values[name]
            return None
        return value

    def set(self, name: str, value: str, max_age_days: int = 365) -> None:
        self._values[name] = (value, self._clock() + max_age_days * SECONDS_PER_DAY)

    def delete(self, name: str) -> None:
        self._values.pop(name, None)


class CookiePreferenceStore(PreferenceStore):
    """Preference store backed by HTTP request/response cookies.

    Reads come from the incoming request cookies; writes are applied to the
    outgoing response (anything with Starlette's ``set_cookie`` and
    ``delete_cookie``) and are visible to later reads in the same request.
    """

    def __init__(self, request_cookies: Mapping[str, str], response: Any = None):
        self._cookies = dict(request_cookies)
        self._response = response

    def get(self, name: str) -> Optional[str]:
        return self._cookies.get(name)

    def set(self, name: str, value: str, max_age_days: int = 365) -> None:
        self._cookies[name] = value
        if self._response is not None:
            self._response.set_cookie(
                key=name,
                value=value,
                max_age=max_age_days * SECONDS_PER_DAY,
                samesite="lax",
            )

    def delete(self, name: str) -> None:
        self._cookies.pop(name, None)
        if self._response is not None:
            self._response.delete_cookie(key=name)
