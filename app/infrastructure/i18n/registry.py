"""Language registry: the selectable languages and the active one."""

import asyncio
from typing import Awaitable, Callable, List, Optional

from infrastructure.cache import PreferenceStore
from infrastructure.clients.supabase import Query, TableClient
from infrastructure.i18n.errors import RegistryLoadError
from infrastructure.i18n.models import DEFAULT_LANGUAGE, Language
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LanguageListener = Callable[[str], Awaitable[None]]

FALLBACK_LANGUAGES = (
    Language("en", "English", "GB", is_default=True),
    Language("sq", "Shqip", "AL"),
    Language("fr", "Français", "FR"),
    Language("de", "Deutsch", "DE"),
    Language("tr", "Türkçe", "TR"),
)


async def _next_tick() -> None:
    await asyncio.sleep(0)


class LanguageRegistry:
    """Holds the language list and switches the active language.

    The active language is whatever the preference store holds, provided it is
    in the loaded list; otherwise the default language.

    Attributes:
        table: Languages table name
        cookie_name: Preference name holding the selected code
        cookie_days: Lifetime of the persisted preference
        timeout_seconds: Upper bound for the language list fetch
    """

    def __init__(
        self,
        table_client: TableClient,
        preferences: PreferenceStore,
        table: str = "cms_languages",
        cookie_name: str = "kudosim_language",
        cookie_days: int = 365,
        timeout_seconds: float = 5.0,
        default_language: str = DEFAULT_LANGUAGE,
        defer: Optional[Callable[[], Awaitable[None]]] = None,
    ):
        self._client = table_client
        self._preferences = preferences
        self.table = table
        self.cookie_name = cookie_name
        self.cookie_days = cookie_days
        self.timeout_seconds = timeout_seconds
        self._defer = defer or _next_tick
        self._languages: List[Language] = list(FALLBACK_LANGUAGES)
        self._fallback_default = default_language
        self._default_code = default_language
        self._changing = False
        self._listeners: List[LanguageListener] = []
        self.loaded_from_remote = False

    @property
    def languages(self) -> List[Language]:
        return list(self._languages)

    @property
    def default_language(self) -> str:
        return self._default_code

    @property
    def is_changing(self) -> bool:
        return self._changing

    @property
    def preferences(self) -> PreferenceStore:
        return self._preferences

    def is_supported(self, code: Optional[str]) -> bool:
        return bool(code) and any(lang.code == code for lang in self._languages)

    def get_language(self, code: str) -> Optional[Language]:
        return next((lang for lang in self._languages if lang.code == code), None)

    async def load_languages(self) -> List[Language]:
        """Fetch the language list, falling back to the built-in list.

        Never raises; failures are logged and the fallback list is used.
        """
        try:
            languages = await asyncio.wait_for(self._fetch(), self.timeout_seconds)
            self.loaded_from_remote = True
        except asyncio.TimeoutError:
            logger.warning(
                "language_registry_timeout", timeout_seconds=self.timeout_seconds
            )
            languages = list(FALLBACK_LANGUAGES)
            self.loaded_from_remote = False
        except RegistryLoadError as e:
            logger.warning("language_registry_fallback", error=str(e))
            languages = list(FALLBACK_LANGUAGES)
            self.loaded_from_remote = False
        except Exception as e:  # pylint: disable=broad-except
            logger.error(
                "language_registry_failed", error=str(e), error_type=type(e).__name__
            )
            languages = list(FALLBACK_LANGUAGES)
            self.loaded_from_remote = False

        self._languages = languages
        self._default_code = self._resolve_default(languages)
        logger.info(
            "languages_loaded",
            count=len(languages),
            default_language=self._default_code,
            remote=self.loaded_from_remote,
        )
        return list(languages)

    async def _fetch(self) -> List[Language]:
        result = await self._client.select(
            self.table, Query().order("is_default", ascending=False)
        )
        if not result.is_success:
            raise RegistryLoadError(result.message or "language fetch failed", result)

        languages: List[Language] = []
        for row in result.rows:
            try:
                languages.append(Language.from_row(row))
            except ValueError as e:
                logger.warning("skipped_language_row", error=str(e))

        if not languages:
            raise RegistryLoadError("Language table returned no usable rows", result)
        return languages

    def _resolve_default(self, languages: List[Language]) -> str:
        defaults = [lang.code for lang in languages if lang.is_default]
        if len(defaults) == 1:
            return defaults[0]
        logger.warning(
            "default_language_ambiguous",
            default_count=len(defaults),
            codes=defaults,
            using=self._fallback_default,
        )
        return self._fallback_default

    def get_active_language(self, preferences: Optional[PreferenceStore] = None) -> str:
        """Persisted code when supported, else the default.

        Args:
            preferences: Store to read instead of the registry's own, e.g. a
                request's cookies
        """
        stored = (preferences or self._preferences).get(self.cookie_name)
        if self.is_supported(stored):
            return stored
        return self._default_code or self._fallback_default

    def add_listener(self, listener: LanguageListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: LanguageListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def set_active_language(self, code: str) -> bool:
        """Switch the active language.

        Ignored while another switch is in flight, for unknown codes and for
        the language already active.

        Returns:
            True if the switch happened.
        """
        if self._changing:
            logger.debug("language_switch_ignored", code=code, reason="in_flight")
            return False
        if not self.is_supported(code):
            logger.warning("language_switch_ignored", code=code, reason="unsupported")
            return False
        previous = self.get_active_language()
        if code == previous:
            logger.debug("language_switch_ignored", code=code, reason="already_active")
            return False

        self._changing = True
        try:
            self._preferences.set(self.cookie_name, code, max_age_days=self.cookie_days)
            await self._defer()
            for listener in list(self._listeners):
                try:
                    await listener(code)
                except Exception as e:  # pylint: disable=broad-except
                    logger.error(
                        "language_listener_failed",
                        code=code,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
            logger.info("language_changed", previous=previous, language=code)
            return True
        finally:
            self._changing = False
