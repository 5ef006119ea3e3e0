"""Tests for logging configuration."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from rip.core.logging import PACKAGE_LOGGER, configure_logging, get_logger, resolve_level


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestResolveLevel:
    """Tests for flag precedence."""

    def test_default_is_warning(self) -> None:
        assert resolve_level() == logging.WARNING

    def test_verbose(self) -> None:
        assert resolve_level(verbose=True) == logging.INFO

    def test_debug_beats_verbose(self) -> None:
        assert resolve_level(debug=True, verbose=True) == logging.DEBUG

    def test_quiet_beats_everything(self) -> None:
        assert resolve_level(debug=True, verbose=True, quiet=True) == logging.ERROR


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_uses_basic_config(self, package_logger) -> None:
        with patch("rip.core.logging.logging.basicConfig") as basic_config:
            configure_logging(debug=True)
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_sets_package_level_when_root_configured(self, package_logger) -> None:
        configure_logging(quiet=True)
        assert package_logger.level == logging.ERROR
        configure_logging(verbose=True)
        assert package_logger.level == logging.INFO

    def test_get_logger_defaults_to_package(self) -> None:
        assert get_logger().name == PACKAGE_LOGGER
        assert get_logger("rip.launcher").name == "rip.launcher"
