"""Shared test fixtures."""

from pathlib import Path

import pytest
from fastapi import FastAPI

from showfeed.api.routes import health, shows

FIXTURE_DIR = Path(__file__).parent / "feed" / "fixtures"


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without middleware, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(shows.router, prefix="/api")
    return app


@pytest.fixture
def feed_csv() -> str:
    return (FIXTURE_DIR / "shows.csv").read_text()
