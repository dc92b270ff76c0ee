"""Structlog configuration and logger setup.

Configures structlog once per process and hands out module-bound loggers.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # At startup (the FastAPI lifespan does this)
    configure_logging(settings=settings)

    # In a module
    logger = get_module_logger()
    logger.info("namespace_loaded", language="de", namespace="package")
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import add_app_info, mask_sensitive_data

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "kudosim-i18n"
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _apply(processors: List[Any], level: int, force: bool = False) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=force)
    return structlog.stdlib.get_logger()


def _pipeline(version: str, json_output: bool) -> List[Any]:
    """Processors applied to every event, renderer last."""
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, version),
        mask_sensitive_data(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Development renders to the console, production renders JSON. Under
    pytest every log line is dropped.

    Args:
        settings: Optional Settings used for LOG_LEVEL, GIT_SHA and the
            production flag.
        log_level: Optional override for the log level.
        is_production: Optional override for production mode.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        logging.root.setLevel(SILENT)
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            SILENT,
            force=True,
        )

    if is_production is None:
        is_production = settings.is_production if settings is not None else False
    version = settings.GIT_SHA if settings is not None else "unknown"
    level_name = log_level or (settings.LOG_LEVEL if settings is not None else "INFO")

    return _apply(
        _pipeline(version, json_output=is_production),
        getattr(logging, level_name.upper(), logging.INFO),
    )


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last dotted segment) and ``module_path`` so log lines
    can be filtered per module.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    return logger.bind(
        component=module.__name__.rsplit(".", 1)[-1],
        module_path=module.__name__,
    )
