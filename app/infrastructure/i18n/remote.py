"""Adapter for translations stored in the hosted database."""

from typing import List, Optional, Sequence

from infrastructure.clients.supabase import Query, TableClient
from infrastructure.i18n.errors import RemoteFetchError
from infrastructure.i18n.models import TranslationEntry
from infrastructure.logging import get_module_logger
from infrastructure.resilience import RetryPolicy

logger = get_module_logger()


class RemoteTranslationStore:
    """Fetches translation rows by namespace with retry and backoff.

    Attributes:
        table: Translations table name
        retry_policy: RetryPolicy wrapping every select
    """

    def __init__(
        self,
        table_client: TableClient,
        table: str = "cms_translations",
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self._client = table_client
        self.table = table
        self.retry_policy = retry_policy or RetryPolicy()

    async def fetch_translations(
        self, namespaces: Sequence[str]
    ) -> List[TranslationEntry]:
        """Fetch all entries whose namespace is in ``namespaces``.

        Args:
            namespaces: Namespaces to fetch in one request

        Returns:
            Parsed entries; malformed rows are skipped.

        Raises:
            RemoteFetchError: When every attempt failed.
        """
        wanted = list(dict.fromkeys(namespaces))
        if not wanted:
            return []

        query = Query().in_("category", wanted)

        async def select():
            return await self._client.select(self.table, query)

        result = await self.retry_policy.run(
            select, operation_name="fetch_translations"
        )
        if not result.is_success:
            raise RemoteFetchError(
                f"Failed to fetch translations for {wanted}: {result.message}",
                namespaces=wanted,
                attempts=self.retry_policy.config.total_attempts,
                last_result=result,
            )

        entries: List[TranslationEntry] = []
        for row in result.rows:
            try:
                entry = TranslationEntry.from_row(row)
            except ValueError as e:
                logger.warning("skipped_translation_row", error=str(e))
                continue
            if entry.namespace in wanted:
                entries.append(entry)

        logger.info(
            "remote_translations_fetched", namespaces=wanted, entry_count=len(entries)
        )
        return entries
