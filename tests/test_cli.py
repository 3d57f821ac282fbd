"""
Tests for mavenver.cli module.

Tests the command-line interface including:
- parse, compare and sort commands
- Error reporting and exit codes
- Verbosity flags
"""

from __future__ import annotations

import sys

import pytest

from mavenver import __version__
from mavenver.cli import main


def run_cli(monkeypatch, capsys, *argv: str) -> tuple[int, str]:
    """Run the CLI with the given arguments and return (exit code, stdout)."""
    monkeypatch.setattr(sys, "argv", ["mavenver", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code, capsys.readouterr().out


class TestParseCommand:
    """Tests for 'mavenver parse'."""

    def test_parse_shows_forms(self, monkeypatch, capsys):
        """Test that parse prints original, canonical and tokens."""
        code, out = run_cli(monkeypatch, capsys, "parse", "1.0alpha1")
        assert code == 0
        assert "Version:    1.0alpha1" in out
        assert "Canonical:  1-alpha-1" in out
        assert "Tokens:     [1, [alpha, [1]]]" in out

    def test_parse_overflow(self, monkeypatch, capsys):
        """Test that an unparseable version exits with 1."""
        code, out = run_cli(monkeypatch, capsys, "parse", "12345678901234567890")
        assert code == 1
        assert out.startswith("Error: numeric component")

    def test_parse_overflow_verbose_traceback(self, monkeypatch, capsys):
        """Test that verbose mode prints the traceback."""
        monkeypatch.setattr(sys, "argv", ["mavenver", "parse", "-v", "12345678901234567890"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "NumericOverflowError" in capsys.readouterr().err


class TestCompareCommand:
    """Tests for 'mavenver compare'."""

    def test_compare_listing(self, monkeypatch, capsys):
        """Test the version listing with relations between neighbours."""
        code, out = run_cli(monkeypatch, capsys, "compare", "1.0-alpha-1", "1.0", "1.0-sp")
        assert code == 0
        assert out.splitlines() == [
            "1. 1.0-alpha-1 -> 1-alpha-1; tokens: [1, [alpha, [1]]]",
            "   1.0-alpha-1 < 1.0",
            "2. 1.0 -> 1; tokens: [1]",
            "   1.0 < 1.0-sp",
            "3. 1.0-sp -> 1-sp; tokens: [1, [sp]]",
        ]

    def test_compare_equal(self, monkeypatch, capsys):
        """Test that equal versions are reported with ==."""
        code, out = run_cli(monkeypatch, capsys, "compare", "1.0.0", "1-GA")
        assert code == 0
        assert "   1.0.0 == 1-GA" in out

    def test_compare_needs_two_versions(self, monkeypatch, capsys):
        """Test that a single version is rejected."""
        code, out = run_cli(monkeypatch, capsys, "compare", "1.0")
        assert code == 1
        assert "at least two versions" in out


class TestSortCommand:
    """Tests for 'mavenver sort'."""

    def test_sort_ascending(self, monkeypatch, capsys):
        """Test ascending sort."""
        code, out = run_cli(monkeypatch, capsys, "sort", "1.10", "1.9", "1.9-rc1")
        assert code == 0
        assert out.splitlines() == ["1.9-rc1", "1.9", "1.10"]

    def test_sort_reverse(self, monkeypatch, capsys):
        """Test newest-first sort."""
        code, out = run_cli(monkeypatch, capsys, "sort", "--reverse", "1.10", "1.9", "1.9-rc1")
        assert code == 0
        assert out.splitlines() == ["1.10", "1.9", "1.9-rc1"]

    def test_sort_debug_logs_parse(self, monkeypatch, capsys):
        """Test that debug mode prints parsed trees."""
        code, out = run_cli(monkeypatch, capsys, "sort", "-d", "2.0", "1.0")
        assert code == 0
        assert "[PARSE] '2.0' -> [2]" in out
        assert out.splitlines()[-2:] == ["1.0", "2.0"]


class TestGlobalOptions:
    """Tests for top-level options."""

    def test_version_flag(self, monkeypatch, capsys):
        """Test --version output."""
        code, out = run_cli(monkeypatch, capsys, "--version")
        assert code == 0
        assert out.strip() == f"mavenver {__version__}"

    def test_command_required(self, monkeypatch, capsys):
        """Test that a command is required."""
        code, _ = run_cli(monkeypatch, capsys)
        assert code == 2
