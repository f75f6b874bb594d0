"""Shared fixtures for contrastlab tests."""

import pytest


@pytest.fixture(autouse=True)
def _isolated_terminal_env(monkeypatch):
    # the CLI sets COLORTERM; keep it from leaking between tests
    monkeypatch.setenv("COLORTERM", "truecolor")
