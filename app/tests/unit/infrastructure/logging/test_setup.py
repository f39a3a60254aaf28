"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging function
- get_logger and get_module_logger context binding
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    APP_NAME,
    _is_test_environment,
    configure_logging,
    get_logger,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        # pytest is running these tests, so it's in sys.modules
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_bound_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "error")

    def test_configure_logging_accepts_overrides(self, mock_settings):
        assert configure_logging(settings=mock_settings, log_level="DEBUG") is not None
        assert configure_logging(settings=mock_settings, is_production=True) is not None

    def test_configure_logging_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)

        assert logging.getLogger().level >= logging.CRITICAL

    def test_app_name(self):
        assert APP_NAME == "aws-service-clients"


@pytest.mark.unit
class TestGetLogger:
    def test_explicit_name_is_bound(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = get_logger("transport")

        assert structlog.get_context(logger)["logger_name"] == "transport"

    def test_caller_name_is_bound_when_absent(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = get_logger()

        assert structlog.get_context(logger)["logger_name"]


@pytest.mark.unit
class TestGetModuleLogger:
    def test_binds_component(self, mock_settings):
        configure_logging(settings=mock_settings)

        logger = get_module_logger()

        assert structlog.get_context(logger)["component"]

    def test_logging_methods_dont_raise(self, mock_settings):
        configure_logging(settings=mock_settings)
        logger = get_module_logger().bind(service="SESv2", operation="GetAccount")

        logger.debug("endpoint_resolved", endpoint="https://email.us-east-1.amazonaws.com")
        logger.info("aws_api_call", duration_ms=12.5)
        logger.warning("aws_api_error", error_code="ThrottlingException")
        try:
            raise ValueError("boom")
        except ValueError:
            logger.exception("unexpected_error")
