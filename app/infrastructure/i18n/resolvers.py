"""Initial language detection for a visitor.

Sources are consulted in order: the language cookie, the Accept-Language
header, then the site default.
"""

from typing import List, Optional, Sequence, Tuple

from infrastructure.i18n.models import DEFAULT_LANGUAGE
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def parse_accept_language(header: Optional[str]) -> List[str]:
    """Language ranges of an Accept-Language header, best first.

    "de-CH,de;q=0.9,en;q=0.5" -> ["de-CH", "de", "en"]. Ranges with q=0 and
    the "*" wildcard are dropped.
    """
    if not header:
        return []

    ranked: List[Tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        lang_range, _, params = part.strip().partition(";")
        lang_range = lang_range.strip()
        if not lang_range or lang_range == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 1.0
        if quality <= 0:
            continue
        ranked.append((-quality, position, lang_range))

    return [lang_range for _, _, lang_range in sorted(ranked)]


class LanguageNegotiator:
    """Matches requested language tags against the supported codes.

    "fr-FR" matches "fr" unless matching is strict.
    """

    @staticmethod
    def matches_language(requested: str, available: str, strict: bool = False) -> bool:
        if requested.lower() == available.lower():
            return True
        if strict:
            return False
        return requested.split("-")[0].lower() == available.split("-")[0].lower()

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """First available code matching the requested tags in preference order."""
        for req_lang in requested:
            for strict in (True, False):
                for avail_lang in available:
                    if LanguageNegotiator.matches_language(req_lang, avail_lang, strict):
                        return avail_lang
        return default


class LanguageResolver:
    """Picks the initial language for a request.

    Attributes:
        default_language: Returned when nothing else matches
    """

    def __init__(self, default_language: str = DEFAULT_LANGUAGE):
        self.default_language = default_language

    def resolve_from_header(
        self, accept_language: Optional[str], supported: Sequence[str]
    ) -> Optional[str]:
        return LanguageNegotiator.find_best_match(
            parse_accept_language(accept_language), supported
        )

    def resolve(
        self,
        supported: Sequence[str],
        cookie_value: Optional[str] = None,
        accept_language: Optional[str] = None,
        default: Optional[str] = None,
    ) -> str:
        """Resolve the language from cookie, header and default.

        Args:
            supported: Codes of the loaded languages
            cookie_value: Value of the language cookie, if any
            accept_language: Accept-Language header, if any
            default: Default overriding ``default_language``

        Returns:
            A supported code, or the default.
        """
        if cookie_value and cookie_value in supported:
            logger.debug("language_resolved", source="cookie", language=cookie_value)
            return cookie_value

        from_header = self.resolve_from_header(accept_language, supported)
        if from_header:
            logger.debug("language_resolved", source="header", language=from_header)
            return from_header

        return default or self.default_language
