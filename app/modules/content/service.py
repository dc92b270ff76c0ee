"""Hero translations and popup settings with session caching.

Both are read on every page view, so each is fetched once per session and
kept in the SessionCache until it expires or an admin save clears it.
"""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from infrastructure.cache import SessionCache
from infrastructure.clients.supabase import Query, TableClient
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult
from infrastructure.resilience import RetryPolicy
from modules.content.schemas import DEFAULT_POPUP_SETTINGS, PopupSettings

logger = get_module_logger()

HERO_TABLE = "cms_hero_settings"
SETTINGS_TABLE = "cms_settings"
HERO_CACHE_KEY = "hero_translations"
POPUP_CACHE_KEY = "popup_settings"
POPUP_SETTINGS_KEY = "popup"


class ContentService:
    """Reads hero texts and popup settings from the hosted store."""

    def __init__(
        self,
        client: TableClient,
        session_cache: SessionCache,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self._client = client
        self._cache = session_cache
        self._retry = retry_policy or RetryPolicy()

    async def get_hero_translations(self) -> Dict[str, Any]:
        """Per-language hero texts, empty when unavailable."""
        cached = self._cache.get(HERO_CACHE_KEY)
        if isinstance(cached, dict):
            return cached

        async def select():
            return await self._client.select(HERO_TABLE, Query("translations").limit_to(1))

        result = await self._retry.run(select, operation_name="fetch_hero_translations")
        if not result.is_success:
            logger.warning("hero_translations_unavailable", error=result.message)
            return {}

        rows = result.rows
        translations = rows[0].get("translations") if rows else None
        if not isinstance(translations, dict):
            logger.info("hero_translations_missing")
            return {}

        self._cache.set(HERO_CACHE_KEY, translations)
        return translations

    async def get_popup_settings(self) -> PopupSettings:
        """Popup settings; the defaults when absent, malformed or unreachable."""
        cached = self._cache.get(POPUP_CACHE_KEY)
        if isinstance(cached, dict):
            try:
                return PopupSettings.model_validate(cached)
            except ValidationError:
                self._cache.delete(POPUP_CACHE_KEY)

        async def select():
            return await self._client.select(
                SETTINGS_TABLE, Query("value").eq("key", POPUP_SETTINGS_KEY).limit_to(1)
            )

        result = await self._retry.run(select, operation_name="fetch_popup_settings")
        if not result.is_success:
            logger.error("popup_settings_unavailable", error=result.message)
            return DEFAULT_POPUP_SETTINGS.model_copy(deep=True)

        rows = result.rows
        value = rows[0].get("value") if rows else None
        settings = DEFAULT_POPUP_SETTINGS.model_copy(deep=True)
        if value:
            try:
                settings = PopupSettings.model_validate(value)
            except ValidationError as e:
                logger.warning("popup_settings_invalid", error=str(e))

        self._cache.set(POPUP_CACHE_KEY, settings.model_dump())
        return settings

    async def save_popup_settings(self, settings: PopupSettings) -> OperationResult:
        """Store popup settings and clear the cached copy."""
        existing = await self._client.select(
            SETTINGS_TABLE, Query("id").eq("key", POPUP_SETTINGS_KEY).limit_to(1)
        )
        if not existing.is_success:
            logger.error("popup_settings_save_failed", error=existing.message)
            return existing

        value = settings.model_dump()
        if existing.data:
            result = await self._client.update(
                SETTINGS_TABLE, {"value": value}, Query().eq("key", POPUP_SETTINGS_KEY)
            )
        else:
            result = await self._client.insert(
                SETTINGS_TABLE, [{"key": POPUP_SETTINGS_KEY, "value": value}]
            )

        if not result.is_success:
            logger.error("popup_settings_save_failed", error=result.message)
            return result

        self.invalidate_popup_settings()
        logger.info("popup_settings_saved", enabled=settings.enabled)
        return result

    def invalidate_popup_settings(self) -> None:
        self._cache.delete(POPUP_CACHE_KEY)

    def invalidate_hero_translations(self) -> None:
        self._cache.delete(HERO_CACHE_KEY)
