"""Shared fixtures for the test suite.

Provides settings, seeded in-memory table clients and a recording sleep so
tests never touch the network or wait on real backoff delays.
"""

from pathlib import Path
from typing import Any, Dict, List

import pytest

from infrastructure.clients.supabase import InMemoryTableClient
from infrastructure.configuration import Settings

APP_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def locales_dir() -> Path:
    """Real static bundles shipped with the application."""
    return APP_ROOT / "locales"


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Settings without a remote store and with fast defaults."""
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_ANON_KEY", raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def language_rows() -> List[Dict[str, Any]]:
    return [
        {"code": "en", "name": "English", "flag": "GB", "is_default": True},
        {"code": "sq", "name": "Shqip", "flag": "AL", "is_default": False},
        {"code": "fr", "name": "Français", "flag": "FR", "is_default": False},
        {"code": "de", "name": "Deutsch", "flag": "DE", "is_default": False},
        {"code": "tr", "name": "Türkçe", "flag": "TR", "is_default": False},
        {"code": "mk", "name": "Македонски", "flag": "MK", "is_default": False},
    ]


@pytest.fixture
def translation_rows() -> List[Dict[str, Any]]:
    return [
        {
            "key": "title",
            "category": "faq",
            "translations": {"en": "Frequently asked questions", "de": "Häufige Fragen"},
        },
        {
            "key": "refund.question",
            "category": "faq",
            "translations": {"en": "Can I get a refund?", "de": ""},
        },
        {
            "key": "hero.title",
            "category": "destinations",
            "translations": {"en": "Travel the world connected"},
        },
    ]


@pytest.fixture
def table_client(language_rows, translation_rows) -> InMemoryTableClient:
    return InMemoryTableClient(
        {
            "cms_languages": language_rows,
            "cms_translations": translation_rows,
        }
    )


class RecordingSleep:
    """Awaitable sleep that records requested delays instead of waiting."""

    def __init__(self):
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def no_sleep() -> RecordingSleep:
    return RecordingSleep()
