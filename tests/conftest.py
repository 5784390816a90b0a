"""Shared test fixtures."""

import pytest
from fastapi import FastAPI

from marquee.api.routes import health, shows
from marquee.config import settings


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the lifespan hook, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(shows.router, prefix="/api")
    return app


@pytest.fixture(autouse=True)
def open_auth_gate(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run with no API token unless a test sets one."""
    monkeypatch.setattr(settings, "api_token", "")
