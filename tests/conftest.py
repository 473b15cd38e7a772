"""
Pytest configuration and shared fixtures for sigcore tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides keypair fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_keys = importlib.import_module("fixtures.keys")

make_keypair = _keys.make_keypair


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def keypair():
    """Provide a freshly generated Ed25519 keypair."""
    return make_keypair()


@pytest.fixture
def other_keypair():
    """Provide a second, unrelated keypair."""
    return make_keypair()


@pytest.fixture
def seeded_keypair():
    """Provide a reproducible keypair (fixed 32-byte seed)."""
    return make_keypair(seed=bytes(range(32)))


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SIGCORE_* variables so config tests start from defaults."""
    for name in ("SIGCORE_VERIFY_MODES", "SIGCORE_LOG_LEVEL", "SIGCORE_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
