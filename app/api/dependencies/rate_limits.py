"""Per-client rate limiting for the public endpoints."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

FORWARDED_HEADER = "X-Forwarded-For"


def client_address(request: Request) -> str:
    """First address of X-Forwarded-For when behind the CDN, else the peer."""
    forwarded = request.headers.get(FORWARDED_HEADER, "")
    first = forwarded.split(",")[0].strip()
    return first or get_remote_address(request)


limiter = Limiter(key_func=client_address)


async def rate_limit_handler(_request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={"message": "Rate limit exceeded", "limit": str(exc.detail)},
    )


def setup_rate_limiter(app: FastAPI) -> None:
    """Attach the shared limiter and its 429 handler to ``app``."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    return limiter
