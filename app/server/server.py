from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.services import get_settings
from server.lifespan import lifespan
from server.middleware import RequestContextMiddleware

if TYPE_CHECKING:
    from infrastructure.clients.supabase import TableClient
    from infrastructure.configuration import Settings


def create_app(
    settings: Optional["Settings"] = None,
    table_client: Optional["TableClient"] = None,
    sleep: Optional[Callable[[float], Awaitable[None]]] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Settings to use instead of the cached environment settings
        table_client: Table client to use instead of one built from settings
        sleep: Retry backoff sleep, injectable for tests
    """
    settings = settings or get_settings()
    app = FastAPI(title="KudoSIM translations", lifespan=lifespan)
    app.state.settings = settings
    app.state.table_client = table_client
    app.state.sleep = sleep

    setup_rate_limiter(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(api_router)
    return app
