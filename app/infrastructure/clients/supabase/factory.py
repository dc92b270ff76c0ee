"""Table client factory."""

from typing import TYPE_CHECKING

from infrastructure.clients.supabase.base import TableClient
from infrastructure.clients.supabase.memory import InMemoryTableClient
from infrastructure.clients.supabase.postgrest import PostgrestTableClient
from infrastructure.logging import get_module_logger

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

logger = get_module_logger()


def create_table_client(settings: "Settings") -> TableClient:
    """Create the table client for the configured backend.

    Returns a PostgrestTableClient when SUPABASE_URL and SUPABASE_ANON_KEY
    are set, otherwise an empty InMemoryTableClient.
    """
    supabase = settings.supabase
    if supabase.is_configured:
        logger.info("initialized_table_client", backend="postgrest")
        return PostgrestTableClient(
            base_url=supabase.SUPABASE_URL,
            api_key=supabase.SUPABASE_ANON_KEY,
            timeout=supabase.SUPABASE_TIMEOUT_SECONDS,
        )

    logger.warning("initialized_table_client", backend="memory")
    return InMemoryTableClient()
