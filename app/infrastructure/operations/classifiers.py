"""Error classifiers for remote data store exceptions.

Converts httpx exceptions and PostgREST error responses into OperationResult
objects so that retry decisions are made in one place.

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        return classify_http_error(exc)
"""

from typing import Optional

import httpx

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus


def _retry_after(response: httpx.Response) -> Optional[int]:
    value = response.headers.get("Retry-After")
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify an httpx exception into an OperationResult.

    Status Code Mapping:
    - 429: Rate limiting → TRANSIENT_ERROR with retry_after
    - 401/403: Rejected API key or row-level security → UNAUTHORIZED
    - 404: Unknown table → NOT_FOUND
    - 408, 5xx: Server side trouble → TRANSIENT_ERROR
    - Other 4xx: Bad query or constraint violation → PERMANENT_ERROR
    - Timeouts and transport failures → TRANSIENT_ERROR

    Args:
        exc: Exception raised while talking to the remote store

    Returns:
        OperationResult with status, message and error_code
    """
    if isinstance(exc, httpx.TimeoutException):
        return OperationResult.transient_error(
            f"Request timed out: {exc}", error_code="TIMEOUT"
        )

    if not isinstance(exc, httpx.HTTPStatusError):
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {exc}",
            error_code="CONNECTION_ERROR",
        )

    response = exc.response
    status_code = response.status_code
    message = _error_message(response)

    if status_code == 429:
        return OperationResult.transient_error(
            f"Rate limited: {message}",
            error_code="RATE_LIMITED",
            retry_after=_retry_after(response),
        )
    if status_code in (401, 403):
        return OperationResult.error_result(
            OperationStatus.UNAUTHORIZED,
            f"Unauthorized: {message}",
            error_code=f"HTTP_{status_code}",
        )
    if status_code == 404:
        return OperationResult.error_result(
            OperationStatus.NOT_FOUND,
            f"Not found: {message}",
            error_code="HTTP_404",
        )
    if status_code == 408 or status_code >= 500:
        return OperationResult.transient_error(
            f"Server error {status_code}: {message}",
            error_code=f"HTTP_{status_code}",
        )
    return OperationResult.permanent_error(
        f"Request rejected {status_code}: {message}",
        error_code=f"HTTP_{status_code}",
    )
