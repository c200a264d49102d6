"""pytest global fixtures: environment isolation."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Tests never pick up a developer's OPENHOURS_* settings or cached clock."""
    monkeypatch.delenv("OPENHOURS_TIMEZONE", raising=False)
    monkeypatch.delenv("OPENHOURS_LOG_UNRECOGNIZED", raising=False)
    from openhours.clock.provider import reset_default_clock
    from openhours.infrastructure.logging import reset_logger

    reset_default_clock()
    reset_logger()
    yield
    reset_default_clock()
    reset_logger()
