"""
Factory functions for dependency injection.

Settings are a process-wide singleton. The translation, editor and content
services are created once in the FastAPI lifespan and read from ``app.state``.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver, TranslationService
from modules.content import ContentService
from modules.translations import TranslationEditor


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_translation_service(request: Request) -> TranslationService:
    """Translation service created by the application lifespan."""
    return request.app.state.translation_service


def get_translation_editor(request: Request) -> TranslationEditor:
    return request.app.state.translation_editor


def get_content_service(request: Request) -> ContentService:
    return request.app.state.content_service


def get_language_resolver(request: Request) -> LanguageResolver:
    service = get_translation_service(request)
    return LanguageResolver(default_language=service.registry.default_language)
