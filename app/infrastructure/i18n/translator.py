"""Key lookup with language fallback and ``{{variable}}`` interpolation."""

import re
from functools import partial
from typing import Any, Callable, Dict, Optional, Tuple

from infrastructure.i18n.bundles import StaticResourceBundle
from infrastructure.i18n.models import (
    DEFAULT_LANGUAGE,
    DEFAULT_NAMESPACE,
    ResolvedResourceTable,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Translator:
    """Resolves translation keys against the resolved table and static bundles.

    Resolution order for a key in namespace ``ns``:

    1. resolved table, active language
    2. static bundle, active language
    3. resolved table, fallback language ("en")
    4. static bundle, fallback language
    5. the caller's default
    6. the key itself

    Attributes:
        fallback_language: Language consulted when the active one has no text
        default_namespace: Namespace used when none is given
    """

    def __init__(
        self,
        table: ResolvedResourceTable,
        static_bundle: StaticResourceBundle,
        language_provider: Optional[Callable[[], str]] = None,
        fallback_language: str = DEFAULT_LANGUAGE,
        default_namespace: str = DEFAULT_NAMESPACE,
    ):
        self.table = table
        self._static = static_bundle
        self._language_provider = language_provider or (lambda: fallback_language)
        self.fallback_language = fallback_language
        self.default_namespace = default_namespace

    def _split_key(self, key: str, namespace: Optional[str]) -> Tuple[str, str]:
        # "package:valid.for" addresses a namespace inline
        if namespace is None and ":" in key:
            ns, _, bare = key.partition(":")
            if ns and bare:
                return ns, bare
        return namespace or self.default_namespace, key

    def lookup(self, key: str, namespace: str, language: str) -> Optional[str]:
        """Raw text for ``key`` following the fallback chain, or None."""
        for candidate in dict.fromkeys((language, self.fallback_language)):
            text = self.table.get(candidate, namespace, key)
            if text:
                return text
            text = self._static.get_message(candidate, namespace, key)
            if text:
                return text
        return None

    def t(
        self,
        key: str,
        namespace: Optional[str] = None,
        language: Optional[str] = None,
        default: Optional[str] = None,
        **variables: Any,
    ) -> str:
        """Translate ``key``. Never raises.

        Args:
            key: Translation key, optionally prefixed "namespace:"
            namespace: Namespace, defaults to "common"
            language: Language, defaults to the active one
            default: Text returned when no language has the key
            **variables: Values for ``{{name}}`` placeholders

        Returns:
            The translated, interpolated text.
        """
        namespace, key = self._split_key(key, namespace)
        language = language or self._language_provider()

        message = self.lookup(key, namespace, language)
        if message is None:
            logger.debug(
                "translation_not_found",
                key=key,
                namespace=namespace,
                language=language,
            )
            message = default if default is not None else key

        return self._interpolate(message, variables)

    def exists(
        self, key: str, namespace: Optional[str] = None, language: Optional[str] = None
    ) -> bool:
        namespace, key = self._split_key(key, namespace)
        return self.lookup(key, namespace, language or self._language_provider()) is not None

    def for_namespace(self, namespace: str) -> Callable[..., str]:
        """Translate callable bound to ``namespace``."""
        return partial(self.t, namespace=namespace)

    def _interpolate(self, message: str, variables: Dict[str, Any]) -> str:
        """Replace ``{{name}}`` placeholders; unknown ones stay as written."""
        if "{{" not in message:
            return message

        def replace(match: "re.Match") -> str:
            name = match.group(1)
            if name not in variables:
                logger.debug("missing_interpolation_variable", variable=name)
                return match.group(0)
            return str(variables[name])

        return PLACEHOLDER.sub(replace, message)
