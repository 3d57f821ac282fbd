"""
Pytest configuration and shared fixtures for mavenver tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from mavenver.logging import SilentLogger, set_global_logger


@pytest.fixture(scope="session")
def fixtures_dir() -> Path:
    """Provide path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def version_vectors(fixtures_dir: Path) -> dict[str, Any]:
    """
    Provide the shared version vectors from versions.yaml.

    Keys: "ordered" (strictly ascending list), "equal" (groups of
    equivalent spellings) and "canonical" (input -> canonical form).
    """
    with (fixtures_dir / "versions.yaml").open(encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def ordered_versions(version_vectors: dict[str, Any]) -> list[str]:
    """Provide the strictly ascending version list."""
    return list(version_vectors["ordered"])


@pytest.fixture
def equal_groups(version_vectors: dict[str, Any]) -> list[list[str]]:
    """Provide groups of version strings that must compare equal."""
    return [list(group) for group in version_vectors["equal"]]


@pytest.fixture
def canonical_cases(version_vectors: dict[str, Any]) -> dict[str, str]:
    """Provide input -> canonical form pairs."""
    return dict(version_vectors["canonical"])


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Restore the silent global logger after every test."""
    yield
    set_global_logger(SilentLogger())
