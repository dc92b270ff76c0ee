"""Unit tests for SessionCache."""

from freezegun import freeze_time

from infrastructure.cache import SessionCache


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class TestSessionCache:
    def test_set_and_get(self):
        """Stored snapshots are returned while fresh."""
        cache = SessionCache()
        cache.set("translations-de-package", {"valid.for": "Gültig für"})
        assert cache.get("translations-de-package") == {"valid.for": "Gültig für"}
        assert "translations-de-package" in cache

    def test_missing_key(self):
        """Absent keys return None."""
        assert SessionCache().get("nope") is None

    def test_entry_expires_after_ttl(self):
        """Entries older than the TTL are dropped on read."""
        clock = FakeClock()
        cache = SessionCache(ttl_seconds=60, clock=clock)
        cache.set("hero_translations", {"en": {}})

        clock.now += 59
        assert cache.get("hero_translations") == {"en": {}}

        clock.now += 1
        assert cache.get("hero_translations") is None
        assert cache.get_stats()["expired"] == 1

    def test_expiry_with_freezegun(self):
        """Wall clock time drives staleness by default."""
        cache = SessionCache(ttl_seconds=60)
        with freeze_time("2024-05-01 12:00:00") as frozen:
            cache.set("popup_settings", {"enabled": True})
            frozen.tick(30)
            assert cache.get("popup_settings") == {"enabled": True}
            frozen.tick(31)
            assert cache.get("popup_settings") is None

    def test_custom_and_infinite_ttl(self):
        """Per-entry TTL overrides the default; None never expires."""
        clock = FakeClock()
        cache = SessionCache(ttl_seconds=60, clock=clock)
        cache.set("short", 1, ttl_seconds=5)
        cache.set("forever", 2, ttl_seconds=None)
        clock.now += 10_000
        assert cache.get("short") is None
        assert cache.get("forever") == 2

    def test_unserializable_value_not_stored(self):
        """Values that are not JSON serializable are skipped."""
        cache = SessionCache()
        cache.set("bad", object())
        assert cache.get("bad") is None

    def test_unreadable_entry_removed(self):
        """Corrupt raw entries read as missing."""
        cache = SessionCache()
        cache._items["kudosim_broken"] = "{not json"  # pylint: disable=protected-access
        assert cache.get("broken") is None
        assert cache.get_stats()["entries"] == 0

    def test_invalidate_by_prefix(self):
        """invalidate removes every key under the prefix."""
        cache = SessionCache()
        cache.set("translations-de-faq", {})
        cache.set("translations-en-faq", {})
        cache.set("hero_translations", {})

        assert cache.invalidate("translations-") == 2
        assert cache.keys() == ["hero_translations"]

    def test_keys_strip_prefix(self):
        """keys() reports keys without the cache prefix."""
        cache = SessionCache(prefix="kudosim_")
        cache.set("translations-de-faq", {})
        assert cache.keys("translations-") == ["translations-de-faq"]

    def test_delete_and_clear(self):
        """delete removes one entry, clear removes all."""
        cache = SessionCache()
        cache.set("a", 1)
        cache.set("b", 2)
        cache.delete("a")
        assert cache.get("a") is None
        cache.clear()
        assert cache.get_stats()["entries"] == 0

    def test_stats_count_hits_and_misses(self):
        """Hits and misses are tracked."""
        cache = SessionCache()
        cache.set("a", 1)
        cache.get("a")
        cache.get("b")
        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["prefix"] == "kudosim_"
