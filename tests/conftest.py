"""
Pytest configuration and shared fixtures for segver tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from segver.logging import SilentLogger, set_global_logger


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Reset the global logger so CLI tests don't leak verbosity."""
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
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("segver.yaml", {"key": "value"})
    """

    def _create(filename: str, data: dict[str, Any]) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return path

    return _create


@pytest.fixture
def java_versions_sorted() -> list[str]:
    """Java distribution versions (d.d.d(_d)-d) in ascending order."""
    return [
        "1.8.0_332-1",
        "1.8.0_345-2",
        "1.8.0_372-1",
        "1.8.0_372-2",
        "1.8.0_372-3",
        "1.8.0_402-1",
        "11.0.15-1",
        "11.0.17-10",
        "11.0.19-1",
        "11.0.19-2",
        "17.0.3-1",
        "17.0.4-2",
        "17.0.7-1",
        "17.0.8-3",
        "17.0.8-5",
        "17.0.9-1",
        "17.0.9-2",
        "21.0.0-1",
        "21.0.1-1",
        "21.0.1-2",
        "21.0.1-3",
        "21.0.1-4",
        "21.0.2-1",
        "21.0.2-50",
    ]


@pytest.fixture
def maven_versions() -> list[str]:
    """Maven-style versions with optional qualifier and build number."""
    return [
        "2.0-alpha-1",
        "2.0-alpha-2",
        "2.0-alpha-3",
        "2.0-beta-1",
        "2.0-beta-2",
        "2.0-beta-3",
        "2.0",
        "2.0.1",
        "2.0.2",
        "2.0.3",
        "2.0.4",
        "2.1.0-M1",
        "3.0-alpha-1",
        "3.0-alpha-2",
        "3.0-alpha-3",
        "3.0-alpha-4",
        "3.0-alpha-5",
        "3.0-alpha-6",
        "3.0-alpha-7",
        "3.0-beta-1",
        "3.0-beta-2",
        "3.0-beta-3",
        "3.0",
        "3.5.0-alpha-1",
        "3.5.0-beta-1",
        "3.5.0",
        "3.5.2",
        "3.5.3",
        "3.5.4",
        "3.6.0",
        "4.0.0-alpha-2",
        "4.0.0-alpha-3",
    ]
