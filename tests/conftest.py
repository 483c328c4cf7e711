"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep developer LOCATOR_* variables from leaking into settings."""
    for key in list(os.environ):
        if key.startswith("LOCATOR_"):
            monkeypatch.delenv(key)
