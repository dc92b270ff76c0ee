"""Unit tests for infrastructure.logging.context module."""

import uuid

import structlog

from infrastructure.logging.context import bind_request_context, get_correlation_id


class TestBindRequestContext:
    """Test suite for bind_request_context context manager."""

    def test_auto_generates_correlation_id(self):
        """Correlation ID is auto-generated if not provided."""
        with bind_request_context():
            uuid.UUID(get_correlation_id())

    def test_uses_provided_correlation_id(self):
        """Provided correlation ID is used instead of generating one."""
        with bind_request_context(correlation_id="req-123"):
            assert get_correlation_id() == "req-123"

    def test_binds_request_path_and_method(self):
        """Path and method are bound to context."""
        with bind_request_context(request_path="/api/v1/i18n/languages", request_method="GET"):
            ctx = structlog.contextvars.get_contextvars()
            assert ctx["request_path"] == "/api/v1/i18n/languages"
            assert ctx["request_method"] == "GET"

    def test_binds_extra_context(self):
        """Extra keyword arguments are bound as well."""
        with bind_request_context(language="de"):
            assert structlog.contextvars.get_contextvars()["language"] == "de"

    def test_context_cleared_on_exit(self):
        """Bound keys are removed after the block, also on error."""
        try:
            with bind_request_context(correlation_id="req-1", request_path="/x"):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        ctx = structlog.contextvars.get_contextvars()
        assert "correlation_id" not in ctx
        assert "request_path" not in ctx

    def test_get_correlation_id_outside_context(self):
        """No correlation id outside a bound block."""
        assert get_correlation_id() is None
