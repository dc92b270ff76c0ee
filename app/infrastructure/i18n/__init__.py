"""Translation resolution and caching.

Public API:
- TranslationService: Facade used by routes and feature modules
- create_translation_service: Wires the service from settings
- LanguageRegistry, NamespaceLoader, Translator: The underlying components
- StaticResourceBundle, RemoteTranslationStore: Translation sources
- Language, TranslationEntry, ResolvedResourceTable, NamespaceLoadState: Models
- TranslationError, RegistryLoadError, RemoteFetchError: Errors

Usage:
    from infrastructure.i18n import create_translation_service

    i18n = create_translation_service(settings)
    await i18n.load_languages()
    await i18n.use_namespaces(["package"])
    i18n.t("valid.for", namespace="package")
"""

from infrastructure.i18n.bundles import StaticResourceBundle, YAMLBundleLoader
from infrastructure.i18n.errors import (
    RegistryLoadError,
    RemoteFetchError,
    TranslationError,
)
from infrastructure.i18n.factory import create_translation_service
from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.models import (
    DEFAULT_LANGUAGE,
    Language,
    LoaderState,
    NamespaceLoadState,
    ResolvedResourceTable,
    ResourceKey,
    TranslationEntry,
)
from infrastructure.i18n.registry import FALLBACK_LANGUAGES, LanguageRegistry
from infrastructure.i18n.remote import RemoteTranslationStore
from infrastructure.i18n.resolvers import LanguageNegotiator, LanguageResolver
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.translator import Translator

__all__ = [
    "DEFAULT_LANGUAGE",
    "FALLBACK_LANGUAGES",
    "Language",
    "LanguageNegotiator",
    "LanguageRegistry",
    "LanguageResolver",
    "LoaderState",
    "NamespaceLoadState",
    "NamespaceLoader",
    "RegistryLoadError",
    "RemoteFetchError",
    "RemoteTranslationStore",
    "ResolvedResourceTable",
    "ResourceKey",
    "StaticResourceBundle",
    "TranslationEntry",
    "TranslationError",
    "TranslationService",
    "Translator",
    "YAMLBundleLoader",
    "create_translation_service",
]
