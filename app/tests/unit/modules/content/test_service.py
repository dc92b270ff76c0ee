"""Unit tests for ContentService."""

import pytest

from infrastructure.cache import SessionCache
from infrastructure.clients.supabase import InMemoryTableClient
from infrastructure.operations import OperationResult
from infrastructure.resilience import RetryPolicy
from modules.content import DEFAULT_POPUP_SETTINGS, ContentService, PopupSettings
from modules.content.schemas import PopupTexts

HERO = {
    "en": {"title": "Stay connected abroad"},
    "sq": {"title": "Qëndroni të lidhur jashtë vendit"},
}

POPUP = {
    "enabled": True,
    "delay": 5000,
    "background_image": "https://cdn.kudosim.com/popup.jpg",
    "translations": {"en": {"title": "1GB free", "description": "Get the app"}},
}


class DownTableClient(InMemoryTableClient):
    async def select(self, table, query=None):
        self.calls.append(("select", table))
        return OperationResult.transient_error("down")


class FlakyTableClient(InMemoryTableClient):
    """Fails the first select, then serves the stored rows."""

    def __init__(self, tables):
        super().__init__(tables)
        self.failures_left = 1

    async def select(self, table, query=None):
        if self.failures_left:
            self.failures_left -= 1
            self.calls.append(("select", table))
            return OperationResult.transient_error("connection reset")
        return await super().select(table, query)


@pytest.fixture
def client():
    return InMemoryTableClient(
        {
            "cms_hero_settings": [{"id": 1, "translations": HERO}],
            "cms_settings": [{"id": 7, "key": "popup", "value": POPUP}],
        }
    )


@pytest.fixture
def content(client, no_sleep):
    return ContentService(client, SessionCache(), RetryPolicy(sleep=no_sleep))


class TestHeroTranslations:
    @pytest.mark.asyncio
    async def test_fetched_once_per_session(self, content, client):
        """Hero texts are cached after the first read."""
        assert await content.get_hero_translations() == HERO
        assert await content.get_hero_translations() == HERO
        assert client.calls_for("select", "cms_hero_settings") == 1

    @pytest.mark.asyncio
    async def test_invalidate(self, content, client):
        """Invalidation forces a new read."""
        await content.get_hero_translations()
        content.invalidate_hero_translations()
        await content.get_hero_translations()
        assert client.calls_for("select", "cms_hero_settings") == 2

    @pytest.mark.asyncio
    async def test_empty_when_missing_or_down(self, no_sleep):
        """No row or a failing store yields an empty mapping."""
        empty = ContentService(InMemoryTableClient(), SessionCache())
        assert await empty.get_hero_translations() == {}
        down_client = DownTableClient()
        down = ContentService(down_client, SessionCache(), RetryPolicy(sleep=no_sleep))
        assert await down.get_hero_translations() == {}
        assert down_client.calls_for("select", "cms_hero_settings") == 4

    @pytest.mark.asyncio
    async def test_transient_failure_is_retried(self, no_sleep):
        """A failed first read is retried before giving up on hero texts."""
        client = FlakyTableClient({"cms_hero_settings": [{"id": 1, "translations": HERO}]})
        content = ContentService(client, SessionCache(), RetryPolicy(sleep=no_sleep))

        assert await content.get_hero_translations() == HERO
        assert client.calls_for("select", "cms_hero_settings") == 2


class TestPopupSettings:
    @pytest.mark.asyncio
    async def test_reads_stored_settings(self, content, client):
        """Stored settings are parsed and cached."""
        settings = await content.get_popup_settings()
        assert settings.enabled is True
        assert settings.delay == 5000
        assert settings.texts_for("en").title == "1GB free"

        await content.get_popup_settings()
        assert client.calls_for("select", "cms_settings") == 1

    @pytest.mark.asyncio
    async def test_defaults_when_absent(self, no_sleep):
        """Without a stored row the built-in defaults are used."""
        content = ContentService(InMemoryTableClient(), SessionCache(), RetryPolicy(sleep=no_sleep))
        settings = await content.get_popup_settings()
        assert settings == DEFAULT_POPUP_SETTINGS
        assert settings.texts_for("de").title == "Erhalte 1GB kostenloses Internet!"

    @pytest.mark.asyncio
    async def test_defaults_when_invalid(self, no_sleep):
        """Malformed stored values fall back to the defaults."""
        client = InMemoryTableClient(
            {"cms_settings": [{"key": "popup", "value": {"delay": -5}}]}
        )
        content = ContentService(client, SessionCache(), RetryPolicy(sleep=no_sleep))
        assert await content.get_popup_settings() == DEFAULT_POPUP_SETTINGS

    @pytest.mark.asyncio
    async def test_defaults_when_store_down(self, no_sleep):
        """A failing store is retried, then the defaults are used uncached."""
        client = DownTableClient()
        content = ContentService(client, SessionCache(), RetryPolicy(sleep=no_sleep))
        assert await content.get_popup_settings() == DEFAULT_POPUP_SETTINGS
        assert client.calls_for("select", "cms_settings") == 4
        assert no_sleep.calls == [1.0, 2.0, 4.0]

    def test_texts_fall_back_to_english(self):
        """Languages without texts use the English ones."""
        settings = PopupSettings(translations={"en": PopupTexts(title="Hi")})
        assert settings.texts_for("tr").title == "Hi"
        assert PopupSettings().texts_for("tr") is None


class TestSavePopupSettings:
    @pytest.mark.asyncio
    async def test_update_existing(self, content, client):
        """Saving replaces the stored value and clears the cache."""
        await content.get_popup_settings()

        result = await content.save_popup_settings(PopupSettings(enabled=False, delay=1000))

        assert result.is_success
        assert client.tables["cms_settings"][0]["value"]["delay"] == 1000
        assert (await content.get_popup_settings()).delay == 1000
        assert client.calls_for("update", "cms_settings") == 1

    @pytest.mark.asyncio
    async def test_insert_when_missing(self, no_sleep):
        """Saving without a stored row inserts one."""
        client = InMemoryTableClient()
        content = ContentService(client, SessionCache(), RetryPolicy(sleep=no_sleep))

        await content.save_popup_settings(PopupSettings(enabled=True))

        assert client.tables["cms_settings"][0]["key"] == "popup"
        assert client.tables["cms_settings"][0]["value"]["enabled"] is True

    @pytest.mark.asyncio
    async def test_store_down(self):
        """A failing store is reported and nothing is written."""
        client = DownTableClient()
        result = await ContentService(client, SessionCache()).save_popup_settings(PopupSettings())
        assert not result.is_success
        assert client.calls_for("insert") == 0
