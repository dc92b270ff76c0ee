"""Service layer for the admin translation editor.

Every successful write invalidates the touched namespaces in the translation
service so the next request re-resolves them from the store.
"""

from typing import Dict, List, Optional, Set

from infrastructure.clients.supabase import Query, TableClient
from infrastructure.i18n import TranslationService
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, OperationStatus
from modules.translations.schemas import (
    CreateTranslationRequest,
    TranslationRecord,
    UpdateTranslationRequest,
)

logger = get_module_logger()


def _not_found(key: str) -> OperationResult:
    logger.warning("translation_key_not_found", key=key)
    return OperationResult.error_result(
        OperationStatus.NOT_FOUND, f"Translation key not found: {key}", "NOT_FOUND"
    )


class TranslationEditor:
    """Admin operations on the remote translations table.

    Failures are logged and returned as OperationResult, never raised.

    Attributes:
        table: Translations table name
    """

    def __init__(self, client: TableClient, i18n: TranslationService, table: str):
        self._client = client
        self._i18n = i18n
        self.table = table

    def _invalidate(self, namespaces: Set[str]) -> None:
        if not namespaces:
            self._i18n.invalidate()
            return
        for namespace in sorted(namespaces):
            self._i18n.invalidate(namespace)

    async def _namespaces_of(self, key: str, namespace: Optional[str]) -> Set[str]:
        if namespace:
            return {namespace}
        result = await self._client.select(self.table, Query("category").eq("key", key))
        if not result.is_success:
            return set()
        return {row["category"] for row in result.rows if row.get("category")}

    async def list_translations(
        self, namespace: Optional[str] = None, language: Optional[str] = None
    ) -> OperationResult:
        """List stored rows, newest first.

        Args:
            namespace: Only rows of this namespace
            language: Only rows that have a non-empty text for this language

        Returns:
            OperationResult whose data is a list of TranslationRecord.
        """
        query = Query().order("created_at", ascending=False)
        if namespace:
            query = query.eq("category", namespace)

        result = await self._client.select(self.table, query)
        if not result.is_success:
            logger.error(
                "translation_list_failed", namespace=namespace, error=result.message
            )
            return result

        records: List[TranslationRecord] = []
        for row in result.rows:
            try:
                record = TranslationRecord.model_validate(row)
            except ValueError as e:
                logger.warning("skipped_translation_row", error=str(e))
                continue
            if language and not record.translations.get(language):
                continue
            records.append(record)

        return OperationResult.success(data=records, message=f"{len(records)} rows")

    async def add_translation(self, request: CreateTranslationRequest) -> OperationResult:
        """Insert a new key with a text slot for every known language."""
        values: Dict[str, str] = {lang.code: "" for lang in self._i18n.languages}
        values.update(request.translations)
        if not values.get("en"):
            logger.warning(
                "translation_without_english",
                key=request.key,
                namespace=request.namespace,
            )

        result = await self._client.insert(
            self.table,
            [
                {
                    "key": request.key,
                    "category": request.namespace,
                    "translations": values,
                }
            ],
        )
        if not result.is_success:
            logger.error("translation_add_failed", key=request.key, error=result.message)
            return result

        self._invalidate({request.namespace})
        logger.info("translation_added", key=request.key, namespace=request.namespace)
        return result

    async def update_translation(
        self, request: UpdateTranslationRequest
    ) -> OperationResult:
        """Replace the texts of ``request.key``."""
        namespaces = await self._namespaces_of(request.key, request.namespace)
        query = Query().eq("key", request.key)
        if request.namespace:
            query = query.eq("category", request.namespace)

        result = await self._client.update(
            self.table, {"translations": request.translations}, query
        )
        if not result.is_success:
            logger.error(
                "translation_update_failed", key=request.key, error=result.message
            )
            return result
        if not result.data:
            return _not_found(request.key)

        self._invalidate(namespaces)
        logger.info(
            "translation_updated", key=request.key, namespaces=sorted(namespaces)
        )
        return result

    async def delete_translation(
        self, key: str, namespace: Optional[str] = None
    ) -> OperationResult:
        """Delete ``key`` (in one namespace, or wherever it appears)."""
        namespaces = await self._namespaces_of(key, namespace)
        query = Query().eq("key", key)
        if namespace:
            query = query.eq("category", namespace)

        result = await self._client.delete(self.table, query)
        if not result.is_success:
            logger.error("translation_delete_failed", key=key, error=result.message)
            return result
        if not result.data:
            return _not_found(key)

        self._invalidate(namespaces)
        logger.info("translation_deleted", key=key, namespaces=sorted(namespaces))
        return result

    @staticmethod
    def namespaces_in(records: List[TranslationRecord]) -> List[str]:
        return sorted({record.namespace for record in records})

