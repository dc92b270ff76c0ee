"""Table client abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from infrastructure.clients.supabase.query import Query
from infrastructure.operations import OperationResult


class TableClient(ABC):
    """Generic tabular query interface over the hosted database.

    Every call is scoped to a named table and returns an OperationResult
    whose ``data`` holds the affected rows as a list of dicts. Failures are
    returned, never raised.
    """

    @abstractmethod
    async def select(self, table: str, query: Optional[Query] = None) -> OperationResult:
        """Return rows matching ``query`` (all rows when omitted)."""

    @abstractmethod
    async def insert(self, table: str, rows: List[Dict[str, Any]]) -> OperationResult:
        """Insert rows and return them as stored."""

    @abstractmethod
    async def upsert(
        self,
        table: str,
        rows: List[Dict[str, Any]],
        on_conflict: Optional[str] = None,
    ) -> OperationResult:
        """Insert rows, merging into existing rows that collide on ``on_conflict``.

        Args:
            table: Table name
            rows: Rows to write
            on_conflict: Comma separated column list identifying duplicates
        """

    @abstractmethod
    async def update(
        self, table: str, values: Dict[str, Any], query: Query
    ) -> OperationResult:
        """Apply ``values`` to rows matching ``query`` and return them."""

    @abstractmethod
    async def delete(self, table: str, query: Query) -> OperationResult:
        """Delete rows matching ``query`` and return them."""

    async def aclose(self) -> None:
        """Release network resources, if any."""
