"""
Integration tests for Picks API endpoints
"""

import pytest


SHEET = (
    "game_id,team_a,team_a_score,team_b,team_b_score,confidence\n"
    "game1,Canada,4,USA,3,75\n"
    "game2,Finland,x,Sweden,2,\n"
    "game9,Latvia,1,Czechia,4,0.9\n"
)


class TestPicksEndpoints:
    """Test suite for /picks endpoints."""

    @pytest.mark.asyncio
    async def test_import_without_games(self, client):
        """Test POST /picks/import parses only"""
        response = await client.post("/picks/import", json={"content": SHEET})

        assert response.status_code == 200
        data = response.json()
        assert [p["gameId"] for p in data["picks"]] == ["game1", "game9"]
        assert data["picks"][0]["confidence"] == 0.75
        assert data["errors"][0]["type"] == "invalid_score"
        assert data["errors"][0]["row"] == 3
        assert data["validation"] is None

    @pytest.mark.asyncio
    async def test_import_with_games(self, client, sample_games_data):
        """Test POST /picks/import validates against the schedule"""
        response = await client.post("/picks/import", json={
            "content": SHEET,
            "games": sample_games_data,
        })

        assert response.status_code == 200
        validation = response.json()["validation"]
        assert [p["gameId"] for p in validation["valid_picks"]] == ["game1"]
        assert validation["errors"][0]["type"] == "unknown_game"
        assert validation["summary"]["coverage"] == 33.3

    @pytest.mark.asyncio
    async def test_import_empty_sheet(self, client):
        response = await client.post("/picks/import", json={"content": ""})
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_template(self, client, sample_games_data):
        """Test POST /picks/template"""
        response = await client.post("/picks/template", json={"games": sample_games_data})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert response.text.splitlines()[1] == "game1,Canada,,USA,,"
