"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
async def client():
    """HTTP client for testing API endpoints."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def brier_config_data():
    return {
        "mode": "brier",
        "points": {"groupStage": 1, "knockoutRound": 2, "medalRound": 3},
        "brier": {"base": 25, "multiplier": 100},
    }
