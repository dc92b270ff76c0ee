"""In-memory table client for development and tests."""

import copy
import uuid
from typing import Any, Dict, List, Optional

from infrastructure.clients.supabase.base import TableClient
from infrastructure.clients.supabase.query import Query
from infrastructure.operations import OperationResult


class InMemoryTableClient(TableClient):
    """Dict-of-rows implementation of TableClient.

    Rows are deep-copied on the way in and out so callers never share state
    with the store. ``calls`` records every (operation, table) pair, which
    makes "was the remote store touched?" a one-line assertion.

    Attributes:
        tables: Mapping of table name to list of rows
        calls: Ordered log of (operation, table) tuples
    """

    def __init__(self, tables: Optional[Dict[str, List[Dict[str, Any]]]] = None):
        self.tables: Dict[str, List[Dict[str, Any]]] = copy.deepcopy(tables or {})
        self.calls: List[tuple] = []

    def calls_for(self, operation: str, table: Optional[str] = None) -> int:
        """Count recorded calls of ``operation`` (optionally on one table)."""
        return sum(
            1
            for op, tbl in self.calls
            if op == operation and (table is None or tbl == table)
        )

    def _rows(self, table: str) -> List[Dict[str, Any]]:
        return self.tables.setdefault(table, [])

    async def select(self, table: str, query: Optional[Query] = None) -> OperationResult:
        self.calls.append(("select", table))
        query = query or Query()
        rows = [row for row in self._rows(table) if query.matches(row)]
        if query.order_by:
            column = query.order_by
            present = [r for r in rows if r.get(column) is not None]
            present.sort(key=lambda r: r[column], reverse=not query.ascending)
            # nulls last in both directions, as rendered for PostgREST
            rows = present + [r for r in rows if r.get(column) is None]
        if query.limit is not None:
            rows = rows[: query.limit]
        return OperationResult.success(data=copy.deepcopy(rows))

    async def insert(self, table: str, rows: List[Dict[str, Any]]) -> OperationResult:
        self.calls.append(("insert", table))
        stored = []
        for row in rows:
            new_row = copy.deepcopy(row)
            new_row.setdefault("id", str(uuid.uuid4()))
            self._rows(table).append(new_row)
            stored.append(copy.deepcopy(new_row))
        return OperationResult.success(data=stored)

    async def upsert(
        self,
        table: str,
        rows: List[Dict[str, Any]],
        on_conflict: Optional[str] = None,
    ) -> OperationResult:
        self.calls.append(("upsert", table))
        columns = [c.strip() for c in (on_conflict or "id").split(",")]
        stored = []
        for row in rows:
            existing = next(
                (
                    r
                    for r in self._rows(table)
                    if all(c in row and r.get(c) == row[c] for c in columns)
                ),
                None,
            )
            if existing is None:
                existing = copy.deepcopy(row)
                existing.setdefault("id", str(uuid.uuid4()))
                self._rows(table).append(existing)
            else:
                existing.update(copy.deepcopy(row))
            stored.append(copy.deepcopy(existing))
        return OperationResult.success(data=stored)

    async def update(
        self, table: str, values: Dict[str, Any], query: Query
    ) -> OperationResult:
        self.calls.append(("update", table))
        updated = []
        for row in self._rows(table):
            if query.matches(row):
                row.update(copy.deepcopy(values))
                updated.append(copy.deepcopy(row))
        return OperationResult.success(data=updated)

    async def delete(self, table: str, query: Query) -> OperationResult:
        self.calls.append(("delete", table))
        kept, removed = [], []
        for row in self._rows(table):
            (removed if query.matches(row) else kept).append(row)
        self.tables[table] = kept
        return OperationResult.success(data=copy.deepcopy(removed))
