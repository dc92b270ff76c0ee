"""PostgREST (Supabase REST) table client built on httpx."""

from typing import Any, Dict, List, Optional

import httpx

from infrastructure.clients.supabase.base import TableClient
from infrastructure.clients.supabase.query import Query
from infrastructure.logging import get_module_logger
from infrastructure.operations import OperationResult, classify_http_error

logger = get_module_logger()

CLIENT_INFO = "kudosim-website"


class PostgrestTableClient(TableClient):
    """Table client talking to ``<url>/rest/v1/<table>``.

    Args:
        base_url: Project URL (e.g. https://xyz.supabase.co)
        api_key: Anon key, sent both as ``apikey`` and as bearer token
        timeout: Per-request timeout in seconds
        client: Optional pre-built httpx.AsyncClient (tests pass one with a
            MockTransport)
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._rest_url = f"{base_url.rstrip('/')}/rest/v1"
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "x-client-info": CLIENT_INFO,
            "Content-Type": "application/json",
            "Cache-Control": "no-store",
        }
        self._log = logger.bind(rest_url=self._rest_url)

    async def _request(
        self,
        method: str,
        table: str,
        params: Optional[List[tuple]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> OperationResult:
        headers = dict(self._headers)
        if prefer:
            headers["Prefer"] = prefer
        try:
            response = await self._client.request(
                method,
                f"{self._rest_url}/{table}",
                params=params,
                json=json,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            result = classify_http_error(exc)
            self._log.warning(
                "table_request_failed",
                method=method,
                table=table,
                status=result.status.value,
                error=result.message,
            )
            return result

        if not response.content:
            return OperationResult.success(data=[])
        try:
            data = response.json()
        except ValueError as exc:
            self._log.warning(
                "table_response_unreadable", method=method, table=table, error=str(exc)
            )
            return OperationResult.permanent_error(
                f"Invalid JSON in response from {table}", error_code="INVALID_RESPONSE"
            )
        return OperationResult.success(data=data)

    async def select(self, table: str, query: Optional[Query] = None) -> OperationResult:
        return await self._request("GET", table, params=(query or Query()).to_params())

    async def insert(self, table: str, rows: List[Dict[str, Any]]) -> OperationResult:
        return await self._request(
            "POST", table, json=rows, prefer="return=representation"
        )

    async def upsert(
        self,
        table: str,
        rows: List[Dict[str, Any]],
        on_conflict: Optional[str] = None,
    ) -> OperationResult:
        params = [("on_conflict", on_conflict)] if on_conflict else None
        return await self._request(
            "POST",
            table,
            params=params,
            json=rows,
            prefer="resolution=merge-duplicates,return=representation",
        )

    async def update(
        self, table: str, values: Dict[str, Any], query: Query
    ) -> OperationResult:
        params = [p for p in query.to_params() if p[0] != "select"]
        return await self._request(
            "PATCH", table, params=params, json=values, prefer="return=representation"
        )

    async def delete(self, table: str, query: Query) -> OperationResult:
        params = [p for p in query.to_params() if p[0] != "select"]
        return await self._request(
            "DELETE", table, params=params, prefer="return=representation"
        )

    async def aclose(self) -> None:
        await self._client.aclose()
