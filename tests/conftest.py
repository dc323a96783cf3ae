"""
Pytest configuration and shared fixtures for bracketcalc tests.
"""

import pytest

from bracketcalc.config import EvaluatorConfig


@pytest.fixture
def strict_config():
    """Fixture providing the default strict configuration."""
    return EvaluatorConfig()


@pytest.fixture
def lenient_config():
    """Fixture providing the lenient (any closer matches any opener) configuration."""
    return EvaluatorConfig(strict_bracket_matching=False)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove BRACKETCALC_* variables so tests see the defaults."""
    monkeypatch.delenv("BRACKETCALC_STRICT_BRACKETS", raising=False)
    monkeypatch.delenv("BRACKETCALC_MAX_DEPTH", raising=False)
    return monkeypatch


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test component interactions"
    )


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths."""
    for item in items:
        if "cli" in item.nodeid.lower() or "self_check" in item.nodeid.lower():
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
