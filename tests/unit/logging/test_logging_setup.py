"""Unit tests for docsite_i18n.logging.setup module."""

# pylint: disable=protected-access

import logging

import pytest

from docsite_i18n.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_bound_logger(self):
        """configure_logging returns a usable logger."""
        result = configure_logging()

        assert hasattr(result, "info")
        assert hasattr(result, "warning")
        assert hasattr(result, "error")

    def test_suppressed_during_tests(self):
        """Root logger is silenced under pytest."""
        configure_logging(log_level="DEBUG", is_production=False)

        assert logging.root.level > logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_module_context(self):
        """Logger is bound to the calling module."""
        logger = get_module_logger()
        context = logger._context

        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]

    def test_logging_does_not_raise(self):
        """Events with keyword context can be emitted."""
        get_module_logger().info("test_event", key="value")
