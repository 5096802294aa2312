"""
Shared test fixtures and helpers for the authconf test suite.
"""

import os

import pytest

from authconf.properties import Properties
from authconf.registry import AuthenticatorRegistry, EncoderRegistry


# ============================================================================
# Environment isolation
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove AUTHCONF_* variables so the host environment never leaks in."""
    for key in list(os.environ):
        if key.startswith("AUTHCONF_"):
            monkeypatch.delenv(key, raising=False)


# ============================================================================
# Properties and registries
# ============================================================================


@pytest.fixture
def props():
    """Build ``Properties`` from a plain dict."""
    def _make(data=None):
        return Properties(data or {})
    return _make


@pytest.fixture
def encoders():
    return EncoderRegistry()


@pytest.fixture
def authenticators():
    return AuthenticatorRegistry()


@pytest.fixture
def properties_file(tmp_path):
    """Write a .properties file and return its path."""
    def _write(data, name="auth.properties"):
        path = tmp_path / name
        path.write_text("".join(f"{key}={value}\n" for key, value in data.items()))
        return path
    return _write
