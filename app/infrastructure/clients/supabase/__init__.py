"""Hosted database (Supabase / PostgREST) table clients.

Public API:
- TableClient: Abstract select/insert/upsert/update/delete interface
- Query, Filter: Backend-neutral query description
- PostgrestTableClient: httpx implementation against ``/rest/v1``
- InMemoryTableClient: Dict-backed implementation for development and tests
- create_table_client: Picks the implementation from settings

Usage:
    from infrastructure.clients.supabase import Query, create_table_client

    client = create_table_client(settings)
    result = await client.select(
        "cms_translations", Query().in_("category", ["faq"])
    )
    if result.is_success:
        rows = result.data
"""

from infrastructure.clients.supabase.base import TableClient
from infrastructure.clients.supabase.factory import create_table_client
from infrastructure.clients.supabase.memory import InMemoryTableClient
from infrastructure.clients.supabase.postgrest import PostgrestTableClient
from infrastructure.clients.supabase.query import Filter, Query

__all__ = [
    "TableClient",
    "Query",
    "Filter",
    "PostgrestTableClient",
    "InMemoryTableClient",
    "create_table_client",
]
