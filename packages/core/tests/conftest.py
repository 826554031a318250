"""Pytest configuration and fixtures for depignore core tests.

This conftest.py ensures tests work for both developers (editable install)
and users (pip installed package).
"""
import sys
from pathlib import Path

import pytest

_PACKAGES_DIR = Path(__file__).parent.parent.parent

# Make the core and common packages importable from a source checkout
for _package_root in (_PACKAGES_DIR / "core", _PACKAGES_DIR / "common-py"):
    if str(_package_root) not in sys.path:
        sys.path.insert(0, str(_package_root))

from depignore import (  # noqa: E402
    Dependency,
    OverrideKind,
    PlatformKind,
    RuleEvaluator,
    RuleStore,
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def store():
    """A fresh, empty rule store."""
    return RuleStore()


@pytest.fixture
def make_evaluator():
    """Build a RuleEvaluator from a {subject: kind} mapping."""

    def _make(rules=None):
        rule_store = RuleStore()
        for subject, kind in (rules or {}).items():
            rule_store.record(subject, kind)
        return RuleEvaluator(rule_store.snapshot())

    return _make


@pytest.fixture
def empty_evaluator(make_evaluator):
    return make_evaluator()


@pytest.fixture
def dep():
    """Shorthand for Dependency.package."""
    return Dependency.package


@pytest.fixture
def runtime():
    return PlatformKind.RUNTIME


@pytest.fixture
def complete():
    return OverrideKind.COMPLETE


@pytest.fixture
def upper():
    return OverrideKind.UPPER_ONLY
