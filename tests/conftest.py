"""Shared fixtures for rsspod tests."""

import pytest

import rsspod.config


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Drop cached settings and RSSPOD_ overrides around every test."""
    for name in ("GENERATOR", "INDENT_PREFIX", "INDENT", "LOG_LEVEL", "ENV"):
        monkeypatch.delenv(f"RSSPOD_{name}", raising=False)
    rsspod.config._settings = None
    yield
    rsspod.config._settings = None
