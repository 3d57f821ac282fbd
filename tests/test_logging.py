"""
Tests for mavenver.logging module.

Tests logger behavior including:
- Verbose and debug gating
- Global logger configuration
"""

from __future__ import annotations

from mavenver.logging import (
    DefaultLogger,
    SilentLogger,
    get_global_logger,
    get_logger,
    set_global_logger,
)


class TestDefaultLogger:
    """Tests for DefaultLogger output gating."""

    def test_quiet_by_default(self, capsys):
        """Test that a default logger prints nothing."""
        logger = get_logger()
        logger.verbose("COMPARE", "hidden")
        logger.debug("PARSE", "hidden")
        assert capsys.readouterr().out == ""

    def test_verbose_only(self, capsys):
        """Test that verbose mode does not print debug messages."""
        logger = get_logger(verbose=True)
        logger.verbose("COMPARE", "shown")
        logger.debug("PARSE", "hidden")
        assert capsys.readouterr().out == "[COMPARE] shown\n"

    def test_debug_implies_verbose(self, capsys):
        """Test that debug mode prints both levels."""
        logger = get_logger(debug=True)
        logger.verbose("COMPARE", "a")
        logger.debug("PARSE", "b")
        assert capsys.readouterr().out == "[COMPARE] a\n[PARSE] b\n"


class TestGlobalLogger:
    """Tests for the global logger."""

    def test_default_is_silent(self):
        """Test that the global logger starts silent."""
        assert isinstance(get_global_logger(), SilentLogger)

    def test_set_global_logger(self):
        """Test replacing the global logger."""
        logger = DefaultLogger(verbose=True)
        set_global_logger(logger)
        assert get_global_logger() is logger
