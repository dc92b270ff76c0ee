from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, AsyncIterator

from dotenv import load_dotenv
from fastapi import FastAPI
from structlog.stdlib import BoundLogger

from infrastructure.cache import SessionCache
from infrastructure.clients.supabase import create_table_client
from infrastructure.i18n import create_translation_service
from infrastructure.logging.setup import configure_logging
from infrastructure.resilience import BackoffConfig, RetryPolicy
from infrastructure.services import get_settings
from modules.content import ContentService
from modules.translations import TranslationEditor

if TYPE_CHECKING:
    from infrastructure.configuration import Settings


def _list_configs(settings: "Settings", logger: BoundLogger) -> None:
    config_settings: dict[str, list[object]] = {"settings": []}

    for key, value in settings.model_dump().items():
        if isinstance(value, dict):
            config_settings[key] = list(value.keys())
        else:
            config_settings["settings"].append({key: value})

    logger.info("configuration_initialized", base_settings=config_settings["settings"])
    for key, value in config_settings.items():
        if key != "settings":
            logger.info("configuration_loaded", config_setting=key, keys=value)


async def _start_services(app: FastAPI, settings: "Settings", logger: BoundLogger) -> None:
    """Create the shared services and store them on ``app.state``.

    Values already present on ``app.state`` (set by ``create_app``) win, so
    tests can hand in an in-memory table client and a no-op sleep.
    """
    table_client = getattr(app.state, "table_client", None) or create_table_client(
        settings
    )
    sleep = getattr(app.state, "sleep", None)
    session_cache = SessionCache(
        ttl_seconds=settings.session_cache.ttl_seconds,
        prefix=settings.session_cache.prefix,
    )

    translation_service = create_translation_service(
        settings,
        table_client=table_client,
        session_cache=session_cache,
        sleep=sleep,
    )
    languages = await translation_service.load_languages()

    app.state.table_client = table_client
    app.state.session_cache = session_cache
    app.state.translation_service = translation_service
    app.state.translation_editor = TranslationEditor(
        table_client, translation_service, table=settings.i18n.translations_table
    )
    app.state.content_service = ContentService(
        table_client,
        session_cache,
        retry_policy=RetryPolicy(BackoffConfig.from_settings(settings.retry), sleep=sleep),
    )
    logger.info(
        "services_started",
        languages=[lang.code for lang in languages],
        default_language=translation_service.registry.default_language,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    load_dotenv()
    settings = getattr(app.state, "settings", None) or get_settings()
    logger = configure_logging(settings=settings)

    app.state.settings = settings
    app.state.logger = logger

    logger.info("application_startup")
    _list_configs(settings, logger)

    await _start_services(app, settings, logger)

    yield

    logger.info("application_shutdown")
    await app.state.table_client.aclose()
