"""Unit tests for infrastructure.logging.setup module."""

import structlog

from infrastructure.logging import configure_logging, get_module_logger
from infrastructure.logging.setup import _is_test_environment


class TestConfigureLogging:
    def test_detects_pytest(self):
        """pytest in sys.modules marks a test environment."""
        assert _is_test_environment() is True

    def test_returns_usable_logger_under_pytest(self, settings):
        """Under pytest logging is configured silent but usable."""
        logger = configure_logging(settings=settings)
        logger.info("test_event", key="value")


class TestGetModuleLogger:
    def test_binds_component_and_module_path(self):
        """The calling module is bound to the logger context."""
        context = structlog.get_context(get_module_logger())
        assert context["component"] == "test_setup"
        assert context["module_path"].endswith("test_setup")
