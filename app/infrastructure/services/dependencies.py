"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends

from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver, TranslationService
from infrastructure.services.providers import (
    get_content_service,
    get_language_resolver,
    get_settings,
    get_translation_editor,
    get_translation_service,
)
from modules.content import ContentService
from modules.translations import TranslationEditor

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Shared translation service (registry, loader, translator)
TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]

# Admin translation editor
TranslationEditorDep = Annotated[TranslationEditor, Depends(get_translation_editor)]

ContentServiceDep = Annotated[ContentService, Depends(get_content_service)]

LanguageResolverDep = Annotated[LanguageResolver, Depends(get_language_resolver)]

__all__ = [
    "SettingsDep",
    "TranslationServiceDep",
    "TranslationEditorDep",
    "ContentServiceDep",
    "LanguageResolverDep",
]
