"""Fixtures for the translation editor tests."""

import pytest

from infrastructure.i18n import create_translation_service
from modules.translations import TranslationEditor


@pytest.fixture
def i18n(settings, table_client, no_sleep):
    return create_translation_service(settings, table_client=table_client, sleep=no_sleep)


@pytest.fixture
def editor(table_client, i18n):
    return TranslationEditor(table_client, i18n, table="cms_translations")
