"""Client-side style caches.

- SessionCache: TTL snapshot cache scoped to a browsing session
- PreferenceStore: durable preferences such as the selected language

Usage:
    from infrastructure.cache import SessionCache

    cache = SessionCache(ttl_seconds=60)
    cache.set("hero_translations", {"en": {...}})
    hero = cache.get("hero_translations")
"""

from infrastructure.cache.preferences import (
    CookiePreferenceStore,
    InMemoryPreferenceStore,
    PreferenceStore,
)
from infrastructure.cache.session import SessionCache

__all__ = [
    "SessionCache",
    "PreferenceStore",
    "InMemoryPreferenceStore",
    "CookiePreferenceStore",
]
