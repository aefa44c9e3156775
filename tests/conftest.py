"""
Pytest configuration and shared fixtures for dewey tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

import pytest
import yaml

from dewey.logging import DefaultLogger, SilentLogger, set_global_logger


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def fixtures_dir() -> Path:
    """Provide path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def versions_path(fixtures_dir: Path) -> Path:
    """Provide path to the sample version fixture list."""
    return fixtures_dir / "versions.txt"


@pytest.fixture
def sample_versions() -> list[str]:
    """
    Provide a small mixed list of version strings.

    Covers equal spellings, a pre-release and one incomparable pair.
    """
    return ["1", "1.0", "1rc1", "7.3.2", "7.3ce.1"]


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("dewey.yaml", {"overflow": "wrap"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture
def log_stream() -> io.StringIO:
    """Provide an in-memory stream for DefaultLogger output."""
    return io.StringIO()


@pytest.fixture
def debug_logger(log_stream: io.StringIO) -> DefaultLogger:
    """Provide a debug-level logger writing to log_stream."""
    return DefaultLogger(debug=True, stream=log_stream)


@pytest.fixture(autouse=True)
def _reset_global_logger():
    """Restore the silent global logger after every test (the CLI replaces it)."""
    yield
    set_global_logger(SilentLogger())
