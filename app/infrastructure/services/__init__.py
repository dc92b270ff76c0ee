"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    ContentServiceDep,
    LanguageResolverDep,
    SettingsDep,
    TranslationEditorDep,
    TranslationServiceDep,
)
from infrastructure.services.providers import (
    get_content_service,
    get_language_resolver,
    get_settings,
    get_translation_editor,
    get_translation_service,
)

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "TranslationEditorDep",
    "ContentServiceDep",
    "LanguageResolverDep",
    "get_settings",
    "get_translation_service",
    "get_translation_editor",
    "get_content_service",
    "get_language_resolver",
]
