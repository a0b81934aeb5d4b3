from datetime import date

import httpx
import pytest
from httpx import ASGITransport

FIXED_TODAY = date(2025, 1, 10)


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("CDTRACKER_TIMEZONE", "UTC")
    monkeypatch.setenv("CDTRACKER_LOG_LEVEL", "DEBUG")


@pytest.fixture
async def client(mock_env):
    from cdtracker.main import app, lifespan

    async with lifespan(app):
        # Pin "today" so remaining-day assertions are deterministic
        app.state.tracker_service.clock = lambda: FIXED_TODAY
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
