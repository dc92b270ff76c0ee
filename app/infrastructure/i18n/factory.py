"""Factory functions for creating i18n components."""

from pathlib import Path
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from infrastructure.cache import InMemoryPreferenceStore, PreferenceStore, SessionCache
from infrastructure.clients.supabase import TableClient, create_table_client
from infrastructure.i18n.bundles import StaticResourceBundle
from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.models import ResolvedResourceTable
from infrastructure.i18n.registry import LanguageRegistry
from infrastructure.i18n.remote import RemoteTranslationStore
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger
from infrastructure.resilience import BackoffConfig, RetryPolicy

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def default_locales_dir() -> Path:
    # this file is at .../app/infrastructure/i18n/factory.py
    return Path(__file__).resolve().parents[2] / "locales"


def create_translation_service(
    settings: "Settings",
    table_client: Optional[TableClient] = None,
    preferences: Optional[PreferenceStore] = None,
    session_cache: Optional[SessionCache] = None,
    static_bundle: Optional[StaticResourceBundle] = None,
    locales_dir: Optional[Path] = None,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> TranslationService:
    """Create a fully wired TranslationService.

    Args:
        settings: Application settings
        table_client: Hosted table client (default: built from settings)
        preferences: Durable preference store (default: in-memory)
        session_cache: Session cache (default: built from settings)
        static_bundle: Pre-built static bundle (default: read from locales_dir)
        locales_dir: Directory with YAML bundles (default: settings, then app/locales)
        sleep: Backoff sleep, injectable for tests

    Returns:
        TranslationService: Service whose languages are not loaded yet;
        call ``load_languages()`` before use.

    Raises:
        ValueError: If the locales directory is missing or a bundle is malformed.
    """
    i18n = settings.i18n
    table_client = table_client or create_table_client(settings)
    preferences = preferences or InMemoryPreferenceStore()
    if session_cache is None:
        session_cache = SessionCache(
            ttl_seconds=settings.session_cache.ttl_seconds,
            prefix=settings.session_cache.prefix,
        )

    if static_bundle is None:
        if locales_dir is None:
            locales_dir = Path(i18n.locales_dir) if i18n.locales_dir else default_locales_dir()
        static_bundle = StaticResourceBundle.from_directory(locales_dir)

    registry = LanguageRegistry(
        table_client,
        preferences,
        table=i18n.languages_table,
        cookie_name=i18n.language_cookie,
        cookie_days=i18n.language_cookie_days,
        timeout_seconds=i18n.registry_timeout_seconds,
        default_language=i18n.default_language,
    )
    remote_store = RemoteTranslationStore(
        table_client,
        table=i18n.translations_table,
        retry_policy=RetryPolicy(BackoffConfig.from_settings(settings.retry), sleep=sleep),
    )
    table = ResolvedResourceTable()
    loader = NamespaceLoader(
        table,
        static_bundle,
        remote_store,
        session_cache=session_cache,
        language_provider=registry.get_active_language,
        fallback_language=i18n.default_language,
    )
    translator = Translator(
        table,
        static_bundle,
        language_provider=registry.get_active_language,
        fallback_language=i18n.default_language,
    )

    logger.info(
        "translation_service_created",
        static_languages=static_bundle.languages(),
        translations_table=i18n.translations_table,
    )
    return TranslationService(
        registry, static_bundle, remote_store, loader, translator, session_cache
    )
