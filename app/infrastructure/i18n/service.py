"""Translation service for dependency injection.

One facade over the language registry, static bundles, remote store,
namespace loader and translator.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from infrastructure.cache import PreferenceStore, SessionCache
from infrastructure.i18n.bundles import StaticResourceBundle
from infrastructure.i18n.loader import NamespaceLoader
from infrastructure.i18n.models import Language, NamespaceLoadState
from infrastructure.i18n.registry import LanguageRegistry
from infrastructure.i18n.remote import RemoteTranslationStore
from infrastructure.i18n.translator import Translator


class TranslationService:
    """Class-based translation service.

    Registers the namespace loader as language-change listener so mounted
    namespaces follow the active language.

    Usage:
        # Via dependency injection
        from infrastructure.services import TranslationServiceDep

        @router.get("/greeting")
        async def greeting(i18n: TranslationServiceDep):
            await i18n.use_namespaces(["package"], language="de")
            return {"text": i18n.t("valid.for", namespace="package", language="de")}

        # Direct construction
        from infrastructure.i18n import create_translation_service

        service = create_translation_service(settings)
        await service.load_languages()
    """

    def __init__(
        self,
        registry: LanguageRegistry,
        static_bundle: StaticResourceBundle,
        remote_store: RemoteTranslationStore,
        loader: NamespaceLoader,
        translator: Translator,
        session_cache: Optional[SessionCache] = None,
    ):
        self.registry = registry
        self.static_bundle = static_bundle
        self.remote_store = remote_store
        self.loader = loader
        self.translator = translator
        self.session_cache = session_cache
        self.registry.add_listener(self._on_language_changed)

    async def _on_language_changed(self, language: str) -> None:
        await self.loader.on_language_changed(language)

    async def load_languages(self) -> List[Language]:
        return await self.registry.load_languages()

    @property
    def languages(self) -> List[Language]:
        return self.registry.languages

    def get_active_language(self, preferences: Optional[PreferenceStore] = None) -> str:
        return self.registry.get_active_language(preferences)

    async def set_active_language(self, code: str) -> bool:
        return await self.registry.set_active_language(code)

    def is_supported(self, code: Optional[str]) -> bool:
        return self.registry.is_supported(code)

    async def use_namespaces(
        self, namespaces: Iterable[str], language: Optional[str] = None
    ) -> NamespaceLoadState:
        return await self.loader.use_namespaces(namespaces, language)

    def release(self, namespaces: Iterable[str]) -> None:
        self.loader.release(namespaces)

    async def get_bundle(
        self, language: str, namespace: str
    ) -> Tuple[Dict[str, str], NamespaceLoadState]:
        """Resolved bundle for one namespace, loading it if needed.

        Keys only present in the fallback language are included, so the
        bundle is what ``t`` would return for each key.
        """
        state = await self.loader.load([namespace], language)
        fallback = self.translator.fallback_language
        bundle: Dict[str, str] = {}
        for lang in dict.fromkeys((fallback, language)):
            bundle.update(self.static_bundle.get_namespace(lang, namespace) or {})
            bundle.update(self.loader.table.get_bundle(lang, namespace))
        return bundle, state

    def t(
        self,
        key: str,
        namespace: Optional[str] = None,
        language: Optional[str] = None,
        default: Optional[str] = None,
        **variables: Any,
    ) -> str:
        return self.translator.t(
            key, namespace=namespace, language=language, default=default, **variables
        )

    def get_fixed_t(self, namespace: str) -> Callable[..., str]:
        return self.translator.for_namespace(namespace)

    def exists(
        self, key: str, namespace: Optional[str] = None, language: Optional[str] = None
    ) -> bool:
        return self.translator.exists(key, namespace, language)

    def invalidate(self, namespace: Optional[str] = None) -> int:
        return self.loader.invalidate(namespace)
