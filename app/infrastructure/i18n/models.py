"""Domain models for translation resolution.

Languages, remote translation entries, the in-memory resolved resource table
and the per-request load outcome.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set

DEFAULT_LANGUAGE = "en"
DEFAULT_NAMESPACE = "common"


@dataclass(frozen=True)
class Language:
    """A selectable site language.

    Attributes:
        code: Short language code, e.g. "en", "sq"
        name: Native display name, e.g. "Shqip"
        flag: Country code used to pick a flag icon, e.g. "AL"
        is_default: Whether this is the site default language
    """

    code: str
    name: str
    flag: str
    is_default: bool = False

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Language":
        """Build a Language from a languages table row.

        Raises:
            ValueError: If the row has no usable code.
        """
        code = row.get("code") if isinstance(row, Mapping) else None
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"Language row without code: {row!r}")
        code = code.strip()
        return cls(
            code=code,
            name=row.get("name") or code,
            flag=row.get("flag") or code.upper(),
            is_default=bool(row.get("is_default")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "flag": self.flag,
            "is_default": self.is_default,
        }


@dataclass(frozen=True)
class TranslationEntry:
    """One remotely stored key with its per-language values.

    Attributes:
        key: Translation key, e.g. "hero.title"
        namespace: Namespace the key belongs to (the row's ``category``)
        values: Language code to text
    """

    key: str
    namespace: str
    values: Mapping[str, str] = field(default_factory=dict, hash=False)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TranslationEntry":
        """Build an entry from a ``{key, category, translations}`` row.

        Raises:
            ValueError: If key, category or translations are missing or mistyped.
        """
        if not isinstance(row, Mapping):
            raise ValueError(f"Translation row is not a mapping: {row!r}")
        key = row.get("key")
        namespace = row.get("category")
        values = row.get("translations")
        if not isinstance(key, str) or not key:
            raise ValueError(f"Translation row without key: {row!r}")
        if not isinstance(namespace, str) or not namespace:
            raise ValueError(f"Translation row without category: {row!r}")
        if not isinstance(values, Mapping):
            raise ValueError(f"Translation row without translations: {row!r}")
        return cls(
            key=key,
            namespace=namespace,
            values={
                str(lang): str(text)
                for lang, text in values.items()
                if text is not None
            },
        )

    def value_for(
        self, language: str, fallback: str = DEFAULT_LANGUAGE
    ) -> Optional[str]:
        """Text for ``language``, else the fallback language's text.

        Empty strings count as missing.
        """
        return self.values.get(language) or self.values.get(fallback) or None


@dataclass(frozen=True)
class ResourceKey:
    """Address of one bundle in the resolved table."""

    language: str
    namespace: str


class ResolvedResourceTable:
    """In-memory ``(language, namespace) -> {key: text}`` map.

    Bundles are merged, never replaced, so entries resolved from different
    sources for the same pair accumulate. A pair is "loaded" once something
    was merged into it, even an empty bundle.
    """

    def __init__(self) -> None:
        self._bundles: Dict[ResourceKey, Dict[str, str]] = {}
        self._loaded: Set[ResourceKey] = set()

    def merge(
        self,
        language: str,
        namespace: str,
        resources: Mapping[str, str],
        mark_loaded: bool = True,
    ) -> None:
        key = ResourceKey(language, namespace)
        self._bundles.setdefault(key, {}).update(resources)
        if mark_loaded:
            self._loaded.add(key)

    def mark_loaded(self, language: str, namespace: str) -> None:
        key = ResourceKey(language, namespace)
        self._bundles.setdefault(key, {})
        self._loaded.add(key)

    def is_loaded(self, language: str, namespace: str) -> bool:
        return ResourceKey(language, namespace) in self._loaded

    def get(self, language: str, namespace: str, key: str) -> Optional[str]:
        bundle = self._bundles.get(ResourceKey(language, namespace))
        if not bundle:
            return None
        return bundle.get(key)

    def get_bundle(self, language: str, namespace: str) -> Dict[str, str]:
        """Copy of the bundle, empty when nothing was merged yet."""
        return dict(self._bundles.get(ResourceKey(language, namespace), {}))

    def missing(self, language: str, namespaces: Iterable[str]) -> List[str]:
        return [ns for ns in namespaces if not self.is_loaded(language, ns)]

    def loaded_keys(self) -> List[ResourceKey]:
        return sorted(self._loaded, key=lambda k: (k.language, k.namespace))

    def invalidate(self, namespace: Optional[str] = None) -> int:
        """Forget one namespace in every language, or everything.

        Returns:
            Number of bundles dropped.
        """
        if namespace is None:
            count = len(self._bundles)
            self.clear()
            return count

        doomed = [k for k in self._bundles if k.namespace == namespace]
        for key in doomed:
            del self._bundles[key]
            self._loaded.discard(key)
        return len(doomed)

    def clear(self) -> None:
        self._bundles.clear()
        self._loaded.clear()

    def __len__(self) -> int:
        return len(self._bundles)


class LoaderState(str, Enum):
    """Namespace loader phases."""

    IDLE = "idle"
    CHECKING = "checking"
    LOADING_STATIC = "loading_static"
    LOADING_REMOTE = "loading_remote"
    DONE = "done"


@dataclass
class NamespaceLoadState:
    """Outcome of one ``use_namespaces`` request.

    Attributes:
        namespaces: Requested namespaces, de-duplicated, in request order
        language: Language the request resolved for
        is_loading: True while the request is in flight
        loaded_namespaces: Namespaces considered loaded once the request ends,
            also on remote failure
        error: RemoteFetchError (or unexpected error) when the remote step failed
        sources: Where each namespace came from: "table", "static",
            "session", "remote" or "attempted"
    """

    namespaces: List[str]
    language: str
    is_loading: bool = False
    loaded_namespaces: List[str] = field(default_factory=list)
    error: Optional[Exception] = None
    sources: Dict[str, str] = field(default_factory=dict)

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "namespaces": list(self.namespaces),
            "language": self.language,
            "is_loading": self.is_loading,
            "loaded_namespaces": list(self.loaded_namespaces),
            "error": str(self.error) if self.error else None,
            "sources": dict(self.sources),
        }
