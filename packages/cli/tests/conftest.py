"""Pytest configuration and fixtures for CLI tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

_packages_root = Path(__file__).parent.parent.parent
for _package_dir in ("cli", "core", "common-py"):
    _path = str(_packages_root / _package_dir)
    if _path not in sys.path:
        sys.path.insert(0, _path)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove depignore environment variables for the duration of a test."""
    for name in ("DEPIGNORE_LOG_LEVEL", "DEPIGNORE_LOG_JSON", "DEPIGNORE_MANIFEST"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def sample_manifest(tmp_path):
    """Create a manifest with one rule of each kind."""
    manifest_path = tmp_path / "depignore.yaml"
    manifest_path.write_text(
        """version: "1"
dependencies:
  - core >= 2.0
  - left-pad >= 1.0, < 2.0
ignore_dependencies:
  - package: left-pad
    type: upper
  - package: legacy-shim
  - platform: runtime
    type: upper
"""
    )
    return str(manifest_path)


@pytest.fixture
def empty_manifest(tmp_path):
    """Create a manifest without ignore rules."""
    manifest_path = tmp_path / "empty.yaml"
    manifest_path.write_text("dependencies:\n  - core >= 2.0\n")
    return str(manifest_path)


@pytest.fixture
def invalid_manifest(tmp_path):
    """Create a manifest with a malformed ignore rule."""
    manifest_path = tmp_path / "invalid.yaml"
    manifest_path.write_text(
        "ignore_dependencies:\n  - package: left-pad\n    type: lower\n"
    )
    return str(manifest_path)
