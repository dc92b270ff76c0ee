from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import bind_request_context

CORRELATION_HEADER = "X-Request-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id and the request path to every log line."""

    async def dispatch(self, request, call_next):
        correlation_id = request.headers.get(CORRELATION_HEADER)
        with bind_request_context(
            correlation_id=correlation_id,
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
        if correlation_id:
            response.headers[CORRELATION_HEADER] = correlation_id
        return response
