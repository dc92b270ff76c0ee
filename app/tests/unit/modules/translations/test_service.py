"""Unit tests for TranslationEditor."""

from unittest.mock import AsyncMock

import pytest

from infrastructure.operations import OperationResult, OperationStatus
from modules.translations import TranslationEditor
from modules.translations.schemas import (
    CreateTranslationRequest,
    UpdateTranslationRequest,
)


class TestListTranslations:
    @pytest.mark.asyncio
    async def test_lists_all_rows(self, editor):
        """Every stored row is returned as a record."""
        result = await editor.list_translations()
        assert result.is_success
        assert [r.key for r in result.data] == ["title", "refund.question", "hero.title"]
        assert TranslationEditor.namespaces_in(result.data) == ["destinations", "faq"]

    @pytest.mark.asyncio
    async def test_filter_by_namespace(self, editor):
        """namespace restricts to one category."""
        result = await editor.list_translations(namespace="destinations")
        assert [r.key for r in result.data] == ["hero.title"]

    @pytest.mark.asyncio
    async def test_filter_by_language(self, editor):
        """language keeps rows with a non-empty text."""
        result = await editor.list_translations(language="de")
        assert [r.key for r in result.data] == ["title"]

    @pytest.mark.asyncio
    async def test_failure_passed_through(self, i18n):
        """Store failures are returned unchanged."""
        client = AsyncMock()
        client.select.return_value = OperationResult.transient_error("down")
        result = await TranslationEditor(client, i18n, "cms_translations").list_translations()
        assert result.status == OperationStatus.TRANSIENT_ERROR


class TestAddTranslation:
    @pytest.mark.asyncio
    async def test_add_fills_every_language(self, editor, i18n, table_client):
        """New keys get a slot for every registry language."""
        await i18n.load_languages()
        result = await editor.add_translation(
            CreateTranslationRequest(key="cta", namespace="press", translations={"en": "Read"})
        )
        assert result.is_success
        stored = table_client.tables["cms_translations"][-1]
        assert stored["category"] == "press"
        assert stored["translations"] == {
            "en": "Read",
            "sq": "",
            "fr": "",
            "de": "",
            "tr": "",
            "mk": "",
        }

    @pytest.mark.asyncio
    async def test_add_invalidates_namespace(self, editor, i18n, table_client):
        """The namespace is re-fetched after an add."""
        await i18n.use_namespaces(["press"], language="en")
        assert i18n.t("cta", namespace="press", language="en") == "cta"

        await editor.add_translation(
            CreateTranslationRequest(key="cta", namespace="press", translations={"en": "Read"})
        )
        await i18n.use_namespaces(["press"], language="en")

        assert i18n.t("cta", namespace="press", language="en") == "Read"


class TestUpdateTranslation:
    @pytest.mark.asyncio
    async def test_update_and_invalidate(self, editor, i18n):
        """Updated texts are visible after the next load."""
        await i18n.use_namespaces(["faq"], language="de")

        result = await editor.update_translation(
            UpdateTranslationRequest(key="title", translations={"en": "FAQ", "de": "FAQ (de)"})
        )
        assert result.is_success
        assert not i18n.loader.table.is_loaded("de", "faq")

        await i18n.use_namespaces(["faq"], language="de")
        assert i18n.t("title", namespace="faq", language="de") == "FAQ (de)"

    @pytest.mark.asyncio
    async def test_update_unknown_key(self, editor):
        """Unknown keys are NOT_FOUND."""
        result = await editor.update_translation(
            UpdateTranslationRequest(key="nope", translations={"en": "x"})
        )
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update_respects_namespace(self, editor):
        """A namespace narrows the update."""
        result = await editor.update_translation(
            UpdateTranslationRequest(key="title", namespace="press", translations={"en": "x"})
        )
        assert result.status == OperationStatus.NOT_FOUND


class TestDeleteTranslation:
    @pytest.mark.asyncio
    async def test_delete(self, editor, i18n, table_client):
        """Deleted keys disappear from the table and the cache."""
        await i18n.use_namespaces(["destinations"], language="en")

        result = await editor.delete_translation("hero.title")

        assert len(result.data) == 1
        assert all(r["key"] != "hero.title" for r in table_client.tables["cms_translations"])
        assert not i18n.loader.table.is_loaded("en", "destinations")

    @pytest.mark.asyncio
    async def test_delete_unknown_key(self, editor):
        """Deleting an unknown key is NOT_FOUND."""
        result = await editor.delete_translation("nope", namespace="faq")
        assert result.status == OperationStatus.NOT_FOUND
