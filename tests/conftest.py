"""
Pytest configuration and shared fixtures for vercmp tests.

This module provides reusable fixtures and test data used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from vercmp.cmp import Cmp
from vercmp.logging import SilentLogger, set_global_logger

# (a, b, compare(a, b)) with the default parser
VERSION_SETS: list[tuple[str, str, Cmp]] = [
    ("1", "1", Cmp.EQ),
    ("1.0.0.0", "1", Cmp.EQ),
    ("1", "1.0.0.0", Cmp.EQ),
    ("0", "0", Cmp.EQ),
    ("0.0.0", "0", Cmp.EQ),
    ("0", "0.0.0", Cmp.EQ),
    ("", "", Cmp.EQ),
    ("", "0.0", Cmp.EQ),
    ("0.0", "", Cmp.EQ),
    ("", "0.1", Cmp.LT),
    ("0.1", "", Cmp.GT),
    ("1.2.3", "1.2.3", Cmp.EQ),
    ("1.2.3", "1.2.4", Cmp.LT),
    ("1.0.0.1", "1.0.0.0", Cmp.GT),
    ("1.0.0.0", "1.0.0.1", Cmp.LT),
    ("1.2.3.4", "1.2", Cmp.GT),
    ("1.2", "1.2.3.4", Cmp.LT),
    ("1.2.3.4", "2", Cmp.LT),
    ("2", "1.2.3.4", Cmp.GT),
    ("123", "123", Cmp.EQ),
    ("123", "1.2.3", Cmp.GT),
    ("1.2.3", "123", Cmp.LT),
    ("1.2", "1.5.1", Cmp.LT),
    ("1", "0.1", Cmp.GT),
    ("1.0.1", "1", Cmp.GT),
    ("1", "1.0.1", Cmp.LT),
    ("1.2-beta", "1.2-alpha", Cmp.GT),
    ("1.2.beta", "1.2.0", Cmp.LT),
]

# (version string, number of segments) with the default parser
VERSIONS: list[tuple[str, int]] = [
    ("1", 1),
    ("1.2", 2),
    ("1.2.3.4", 4),
    ("1.2.3.4.5.6.7.8", 8),
    ("0", 1),
    ("0.0.0", 3),
    ("1.0.0", 3),
    ("0.0.1", 3),
    ("", 0),
    ("1.2-dev", 3),
    (" .   -32 . 1", 2),
]

# Strings the default parser rejects
INVALID_VERSIONS: list[str] = ["alpha", "dev.beta", "a-b_c", "1a"]


@pytest.fixture(params=VERSION_SETS, ids=lambda case: f"{case[0]!r}-{case[1]!r}")
def version_set(request) -> tuple[str, str, Cmp]:
    """Provide one (a, b, expected) comparison case."""
    return request.param


@pytest.fixture(params=VERSIONS, ids=lambda case: repr(case[0]))
def valid_version(request) -> tuple[str, int]:
    """Provide one (version, segment count) parse case."""
    return request.param


@pytest.fixture(params=INVALID_VERSIONS)
def invalid_version(request) -> str:
    """Provide one string the default parser rejects."""
    return request.param


@pytest.fixture
def silent_global_logger():
    """Reset the global logger around tests that run the CLI."""
    set_global_logger(SilentLogger())
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Provide a complete config file structure."""
    return {
        "parser": "pep440",
        "manifest": {
            "max_depth": 3,
            "ignore_text": False,
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
