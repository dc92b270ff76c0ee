"""Fixtures for i18n unit tests."""

import pytest

from infrastructure.cache import InMemoryPreferenceStore, SessionCache
from infrastructure.clients.supabase import InMemoryTableClient
from infrastructure.i18n import (
    NamespaceLoader,
    RemoteTranslationStore,
    ResolvedResourceTable,
    StaticResourceBundle,
    Translator,
    create_translation_service,
)
from infrastructure.operations import OperationResult
from infrastructure.resilience import RetryPolicy


class FailingTableClient(InMemoryTableClient):
    """In-memory client whose selects on ``failing`` tables always fail."""

    def __init__(self, tables=None, failing=("cms_translations",)):
        super().__init__(tables)
        self.failing = set(failing)

    async def select(self, table, query=None):
        if table in self.failing:
            self.calls.append(("select", table))
            return OperationResult.transient_error("upstream down", error_code="HTTP_503")
        return await super().select(table, query)


@pytest.fixture
def static_resources():
    return {
        "en": {
            "common": {"nav.home": "Home", "footer.rights": "© {{year}} KudoSIM"},
            "package": {"valid.for": "Valid for", "days": "days"},
            "popup": {"close": "Close"},
        },
        "de": {
            "common": {"nav.home": "Startseite"},
            "package": {"valid.for": "Gültig für"},
            "popup": {"close": "Schließen"},
        },
    }


@pytest.fixture
def static_bundle(static_resources):
    return StaticResourceBundle(static_resources)


@pytest.fixture
def session_cache():
    return SessionCache(ttl_seconds=60)


@pytest.fixture
def resolved_table():
    return ResolvedResourceTable()


@pytest.fixture
def make_loader(static_bundle, session_cache, resolved_table, no_sleep):
    """Build a NamespaceLoader over the given table client."""

    def _make(client, cache=session_cache, table=resolved_table):
        remote = RemoteTranslationStore(client, retry_policy=RetryPolicy(sleep=no_sleep))
        return NamespaceLoader(table, static_bundle, remote, session_cache=cache)

    return _make


@pytest.fixture
def translator(resolved_table, static_bundle):
    return Translator(resolved_table, static_bundle)


@pytest.fixture
def make_failing_client():
    """Build a FailingTableClient."""
    return FailingTableClient


@pytest.fixture
def failing_client(language_rows, translation_rows):
    return FailingTableClient(
        {"cms_languages": language_rows, "cms_translations": translation_rows}
    )


@pytest.fixture
def preferences():
    return InMemoryPreferenceStore()


@pytest.fixture
def make_service(settings, static_bundle, preferences, session_cache, no_sleep):
    """Build a TranslationService over the given table client."""

    def _make(client, cache=session_cache, prefs=preferences):
        return create_translation_service(
            settings,
            table_client=client,
            preferences=prefs,
            session_cache=cache,
            static_bundle=static_bundle,
            sleep=no_sleep,
        )

    return _make
