"""Unit tests for classify_http_error."""

import httpx
import pytest

from infrastructure.operations import OperationStatus, classify_http_error

URL = "https://example.supabase.co/rest/v1/cms_translations"


def _status_error(status_code, json=None, headers=None):
    request = httpx.Request("GET", URL)
    response = httpx.Response(status_code, json=json, headers=headers, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


class TestClassifyHttpError:
    def test_timeout_is_transient(self):
        """Timeouts are retried."""
        result = classify_http_error(httpx.ReadTimeout("slow"))
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "TIMEOUT"

    def test_connection_error_is_transient(self):
        """Transport failures are retried."""
        result = classify_http_error(httpx.ConnectError("refused"))
        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CONNECTION_ERROR"

    def test_rate_limited_with_retry_after(self):
        """429 carries the Retry-After header."""
        result = classify_http_error(
            _status_error(429, json={"message": "slow down"}, headers={"Retry-After": "7"})
        )
        assert result.error_code == "RATE_LIMITED"
        assert result.retry_after == 7
        assert "slow down" in result.message

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_unauthorized(self, status_code):
        """Rejected keys map to UNAUTHORIZED."""
        result = classify_http_error(_status_error(status_code, json={"message": "JWT"}))
        assert result.status == OperationStatus.UNAUTHORIZED
        assert result.error_code == f"HTTP_{status_code}"

    def test_not_found(self):
        """404 maps to NOT_FOUND."""
        result = classify_http_error(_status_error(404, json={"message": "relation missing"}))
        assert result.status == OperationStatus.NOT_FOUND
        assert result.error_code == "HTTP_404"

    @pytest.mark.parametrize("status_code", [408, 500, 503])
    def test_server_errors_are_transient(self, status_code):
        """408 and 5xx are retried."""
        result = classify_http_error(_status_error(status_code))
        assert result.status == OperationStatus.TRANSIENT_ERROR

    def test_bad_request_is_permanent(self):
        """Other 4xx are permanent."""
        result = classify_http_error(_status_error(400, json={"error": "bad column"}))
        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "HTTP_400"
        assert "bad column" in result.message
