"""Structlog configuration and logger setup.

This module provides the core logging configuration for the service clients.
It configures structlog with processors for debugging context, credential
masking, proper exception formatting, and environment-aware rendering.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at app startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - infrastructure.configuration.Settings
"""

import logging
import sys
import inspect
import structlog
from structlog.stdlib import BoundLogger
from typing import Optional
from infrastructure.configuration import Settings, settings as default_settings
from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)

APP_NAME = "aws-service-clients"


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging with enhanced processors.

    Configures structlog with:
    - Enhanced processors for file/line/function context
    - Masking of credentials and request signatures
    - Truncation of large response bodies
    - Proper exception formatting with stack traces
    - Context variable merging for correlation IDs
    - Test environment detection for log suppression

    Args:
        settings: Optional Settings instance. Defaults to the module singleton.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance

    Example:
        # At application startup
        logger = configure_logging()

        # With overrides for testing
        logger = configure_logging(log_level="DEBUG", is_production=False)
    """
    settings = settings or default_settings

    if _is_test_environment():
        # Nothing is emitted above CRITICAL; processors stay minimal
        logging.root.setLevel(logging.CRITICAL + 1)
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    # Determine production mode
    prod_mode = is_production if is_production is not None else settings.is_production

    # Build processor pipeline
    processors = [
        # Add context variables (correlation IDs, operation names, etc)
        structlog.contextvars.merge_contextvars,
        # Add log level
        structlog.stdlib.add_log_level,
        # Add timestamp in ISO 8601 format
        structlog.processors.TimeStamper(fmt="iso"),
        # Add file, line, and function information (enhanced debugging)
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, settings.GIT_SHA),
        # Never let signatures or credentials reach the log sink
        mask_sensitive_data(),
        truncate_large_values(max_length=1000),
        # Format exceptions with full stack traces
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # Add pretty printing for development, JSON for production
    if not prod_mode:  # Development mode
        processors.append(structlog.dev.ConsoleRenderer())
    else:  # Production mode
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure standard logging
    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def _caller_module_name(depth: int = 2) -> Optional[str]:
    """Name of the module `depth` frames above this helper, if resolvable."""
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    module = inspect.getmodule(frame)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a logger bound to `name`, or to the calling module's name.

    Example:
        logger = get_logger("transport")
        logger.debug("http_request_sent", method="POST")
    """
    logger = structlog.stdlib.get_logger()
    return logger.bind(logger_name=name or _caller_module_name() or "unknown")


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module's component and path.

    Example:
        # In infrastructure/clients/aws/client.py
        logger = get_module_logger()
        # context: {"component": "client", "module_path": "infrastructure.clients.aws.client"}
    """
    logger = structlog.stdlib.get_logger()
    module_name = _caller_module_name()
    if module_name is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module_name.rsplit(".", 1)[-1], module_path=module_name
    )
