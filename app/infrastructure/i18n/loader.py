"""Namespace loader: makes namespaces available in the resolved table.

For each request the loader checks the resolved table, then the static
bundles, then the session cache, and finally fetches whatever is still
missing from the remote store in a single call.
"""

from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Set

from infrastructure.cache import SessionCache
from infrastructure.i18n.bundles import StaticResourceBundle
from infrastructure.i18n.errors import RemoteFetchError
from infrastructure.i18n.models import (
    DEFAULT_LANGUAGE,
    LoaderState,
    NamespaceLoadState,
    ResolvedResourceTable,
    ResourceKey,
)
from infrastructure.i18n.remote import RemoteTranslationStore
from infrastructure.logging import get_module_logger

logger = get_module_logger()

SESSION_KEY_PREFIX = "translations-"


def session_key(language: str, namespace: str) -> str:
    return f"{SESSION_KEY_PREFIX}{language}-{namespace}"


class NamespaceLoader:
    """Resolves namespaces into a shared ResolvedResourceTable.

    A namespace that failed remotely is remembered as attempted for that
    language and not retried until invalidated. Mounted namespaces are
    re-resolved in one pass when the language changes.

    Attributes:
        table: Shared resolved table
        current_state: Last phase reached, for introspection
    """

    def __init__(
        self,
        table: ResolvedResourceTable,
        static_bundle: StaticResourceBundle,
        remote_store: RemoteTranslationStore,
        session_cache: Optional[SessionCache] = None,
        language_provider: Optional[Callable[[], str]] = None,
        fallback_language: str = DEFAULT_LANGUAGE,
    ):
        self.table = table
        self._static = static_bundle
        self._remote = remote_store
        self._session_cache = session_cache
        self._language_provider = language_provider or (lambda: fallback_language)
        self.fallback_language = fallback_language
        self._attempted: Set[ResourceKey] = set()
        self._mounted: Counter = Counter()
        self.current_state = LoaderState.IDLE

    @property
    def mounted_namespaces(self) -> List[str]:
        return [ns for ns, count in self._mounted.items() if count > 0]

    def mount(self, namespaces: Iterable[str]) -> None:
        for ns in dict.fromkeys(namespaces):
            self._mounted[ns] += 1

    def release(self, namespaces: Iterable[str]) -> None:
        """Unmount namespaces. An in-flight load still merges its result."""
        for ns in dict.fromkeys(namespaces):
            if self._mounted[ns] > 0:
                self._mounted[ns] -= 1
            if self._mounted[ns] <= 0:
                del self._mounted[ns]

    def was_attempted(self, language: str, namespace: str) -> bool:
        return ResourceKey(language, namespace) in self._attempted

    async def use_namespaces(
        self, namespaces: Iterable[str], language: Optional[str] = None
    ) -> NamespaceLoadState:
        """Mount ``namespaces`` and make sure they are loaded."""
        namespaces = list(dict.fromkeys(namespaces))
        self.mount(namespaces)
        return await self.load(namespaces, language)

    async def load(
        self, namespaces: Iterable[str], language: Optional[str] = None
    ) -> NamespaceLoadState:
        """Resolve ``namespaces`` for ``language`` (default: the active one).

        Never raises. Remote failures are reported in the returned state.
        """
        requested = list(dict.fromkeys(namespaces))
        language = language or self._language_provider()
        state = NamespaceLoadState(
            namespaces=requested, language=language, is_loading=bool(requested)
        )
        if not requested:
            return state

        log = logger.bind(language=language, namespaces=requested)
        try:
            self.current_state = LoaderState.CHECKING
            missing = []
            for ns in requested:
                if self.table.is_loaded(language, ns):
                    state.sources[ns] = "table"
                elif self.was_attempted(language, ns):
                    state.sources[ns] = "attempted"
                else:
                    missing.append(ns)

            if missing:
                self.current_state = LoaderState.LOADING_STATIC
                missing = self._load_static(language, missing, state)

            if missing:
                missing = self._load_session(language, missing, state)

            if missing:
                self.current_state = LoaderState.LOADING_REMOTE
                state.error = await self._load_remote(language, missing, state)
        except Exception as e:  # pylint: disable=broad-except
            log.error(
                "namespace_load_failed", error=str(e), error_type=type(e).__name__
            )
            state.error = e
        finally:
            state.is_loading = False
            state.loaded_namespaces = list(requested)
            self.current_state = LoaderState.DONE

        log.debug("namespaces_loaded", sources=state.sources, error=bool(state.error))
        return state

    def _load_static(
        self, language: str, namespaces: List[str], state: NamespaceLoadState
    ) -> List[str]:
        remaining = []
        for ns in namespaces:
            resources = self._static.get_namespace(language, ns)
            if resources is None:
                remaining.append(ns)
                continue
            self.table.merge(language, ns, resources)
            state.sources[ns] = "static"
        return remaining

    def _load_session(
        self, language: str, namespaces: List[str], state: NamespaceLoadState
    ) -> List[str]:
        if self._session_cache is None:
            return namespaces
        remaining = []
        for ns in namespaces:
            cached = self._session_cache.get(session_key(language, ns))
            if not isinstance(cached, dict):
                remaining.append(ns)
                continue
            self.table.merge(language, ns, cached)
            state.sources[ns] = "session"
        return remaining

    async def _load_remote(
        self, language: str, namespaces: List[str], state: NamespaceLoadState
    ) -> Optional[Exception]:
        try:
            entries = await self._remote.fetch_translations(namespaces)
        except RemoteFetchError as e:
            for ns in namespaces:
                self._attempted.add(ResourceKey(language, ns))
                state.sources[ns] = "attempted"
            logger.warning(
                "remote_namespaces_unavailable",
                language=language,
                namespaces=namespaces,
                attempts=e.attempts,
                error=str(e),
            )
            return e

        resolved: Dict[str, Dict[str, str]] = {ns: {} for ns in namespaces}
        for entry in entries:
            value = entry.value_for(language, self.fallback_language)
            if value is not None and entry.namespace in resolved:
                resolved[entry.namespace][entry.key] = value

        for ns, resources in resolved.items():
            self.table.merge(language, ns, resources)
            if self._session_cache is not None:
                self._session_cache.set(session_key(language, ns), resources)
            state.sources[ns] = "remote"
            logger.info(
                "namespace_loaded_remote",
                language=language,
                namespace=ns,
                key_count=len(resources),
            )
        return None

    async def on_language_changed(self, language: str) -> NamespaceLoadState:
        """Re-resolve every mounted namespace for ``language`` in one pass."""
        self.current_state = LoaderState.IDLE
        return await self.load(self.mounted_namespaces, language)

    def invalidate(self, namespace: Optional[str] = None) -> int:
        """Forget resolved and cached data for one namespace or all of them.

        Returns:
            Number of resolved bundles dropped.
        """
        removed = self.table.invalidate(namespace)
        if namespace is None:
            self._attempted.clear()
            if self._session_cache is not None:
                self._session_cache.invalidate(SESSION_KEY_PREFIX)
        else:
            self._attempted = {k for k in self._attempted if k.namespace != namespace}
            if self._session_cache is not None:
                # language codes may contain "-" (pt-BR), so match the namespace suffix
                suffix = f"-{namespace}"
                for key in self._session_cache.keys(SESSION_KEY_PREFIX):
                    language = key[len(SESSION_KEY_PREFIX) : -len(suffix)]
                    if key.endswith(suffix) and language:
                        self._session_cache.delete(key)

        logger.info("translations_invalidated", namespace=namespace, removed=removed)
        return removed
