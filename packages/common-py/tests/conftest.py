"""Pytest configuration and fixtures for depignore-common tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import io
import logging
import sys
from pathlib import Path

import pytest

_package_root = Path(__file__).parent.parent
if str(_package_root) not in sys.path:
    sys.path.insert(0, str(_package_root))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove depignore environment variables for the duration of a test."""
    for name in ("DEPIGNORE_LOG_LEVEL", "DEPIGNORE_LOG_JSON", "DEPIGNORE_MANIFEST"):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def log_stream():
    """Capture depignore log output; restores the logger afterwards."""
    root = logging.getLogger("depignore")
    handlers, level, propagate = list(root.handlers), root.level, root.propagate
    stream = io.StringIO()
    yield stream
    root.handlers = handlers
    root.setLevel(level)
    root.propagate = propagate
