"""Session-scoped snapshot cache with TTL."""

import json
import time
from typing import Any, Callable, Dict, List, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

Clock = Callable[[], float]


def _wall_clock() -> float:
    return time.time()


class SessionCache:
    """Key/value cache that outlives a single consumer but not the session.

    Values are stored as JSON snapshots ``{"data": ..., "timestamp": ...}``
    under ``<prefix><key>``. Staleness is decided from the stored timestamp
    and the injected clock; nothing is validated against the server.

    Attributes:
        ttl_seconds: Default lifetime of an entry
        prefix: Prefix applied to every key, used for bulk invalidation
    """

    def __init__(
        self,
        ttl_seconds: float = 60,
        prefix: str = "kudosim_",
        clock: Optional[Clock] = None,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.prefix = prefix
        self._clock = clock or _wall_clock
        self._items: Dict[str, str] = {}
        self._hits = 0
        self._misses = 0
        self._expired = 0

    def _full_key(self, key: str) -> str:
        return f"{self.prefix}{key}"

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when absent, expired or unreadable."""
        full_key = self._full_key(key)
        raw = self._items.get(full_key)
        if raw is None:
            self._misses += 1
            return None

        try:
            item = json.loads(raw)
            data, timestamp, ttl = item["data"], item["timestamp"], item["ttl"]
        except (ValueError, KeyError, TypeError):
            logger.warning("session_cache_entry_unreadable", key=full_key)
            self._items.pop(full_key, None)
            self._misses += 1
            return None

        if ttl is not None and self._clock() - timestamp >= ttl:
            self._items.pop(full_key, None)
            self._expired += 1
            self._misses += 1
            logger.debug("session_cache_entry_expired", key=full_key)
            return None

        self._hits += 1
        return data

    def set(self, key: str, data: Any, ttl_seconds: Optional[float] = -1) -> None:
        """Store a JSON-serializable snapshot.

        Args:
            key: Cache key (without prefix)
            data: JSON-serializable value
            ttl_seconds: Entry lifetime. -1 uses the default TTL, None never
                expires within the session.
        """
        ttl = self.ttl_seconds if ttl_seconds == -1 else ttl_seconds
        try:
            raw = json.dumps({"data": data, "timestamp": self._clock(), "ttl": ttl})
        except (TypeError, ValueError) as e:
            logger.warning("session_cache_set_failed", key=key, error=str(e))
            return
        self._items[self._full_key(key)] = raw

    def delete(self, key: str) -> None:
        """Remove one entry."""
        self._items.pop(self._full_key(key), None)

    def invalidate(self, key_prefix: str = "") -> int:
        """Remove every entry whose key starts with ``key_prefix``.

        Returns:
            Number of removed entries.
        """
        full_prefix = self._full_key(key_prefix)
        doomed = [k for k in self._items if k.startswith(full_prefix)]
        for k in doomed:
            del self._items[k]
        if doomed:
            logger.info(
                "session_cache_invalidated", prefix=full_prefix, removed=len(doomed)
            )
        return len(doomed)

    def keys(self, key_prefix: str = "") -> List[str]:
        """Stored keys (without the cache prefix) starting with ``key_prefix``."""
        full_prefix = self._full_key(key_prefix)
        start = len(self.prefix)
        return [k[start:] for k in self._items if k.startswith(full_prefix)]

    def clear(self) -> None:
        """Drop every entry (end of session)."""
        self._items.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get_stats(self) -> Dict[str, Any]:
        """Cache statistics."""
        return {
            "entries": len(self._items),
            "hits": self._hits,
            "misses": self._misses,
            "expired": self._expired,
            "ttl_seconds": self.ttl_seconds,
            "prefix": self.prefix,
        }
