"""
Integration tests for Leaderboard API endpoints
"""

import pytest


class TestLeaderboardEndpoints:
    """Test suite for /leaderboard endpoints."""

    @pytest.mark.asyncio
    async def test_brier_leaderboard(self, client, sample_players_data, sample_games_data, brier_config_data):
        """Test POST /leaderboard with a brier config"""
        response = await client.post("/leaderboard", json={
            "players": sample_players_data,
            "games": sample_games_data,
            "config": brier_config_data,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "brier"
        assert [e["playerName"] for e in data["entries"]] == [
            "Confident Alice",
            "Cautious Bob",
            "Wrongly Confident Charlie",
        ]
        assert [e["totalPoints"] for e in data["entries"]] == [50, 0, -150]
        assert [e["rank"] for e in data["entries"]] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_default_config_from_settings(self, client, sample_players_data, sample_games_data):
        """Without config the server's points config is used"""
        response = await client.post("/leaderboard", json={
            "players": sample_players_data,
            "games": sample_games_data,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] == "points"
        assert data["entries"][0]["totalPoints"] == 2
        assert data["entries"][0]["correctPicks"] == 2

    @pytest.mark.asyncio
    async def test_brier_without_brier_block(self, client, sample_players_data, sample_games_data):
        """Malformed config is reported, not defaulted"""
        response = await client.post("/leaderboard", json={
            "players": sample_players_data,
            "games": sample_games_data,
            "config": {"mode": "brier", "points": {"groupStage": 1}},
        })

        assert response.status_code == 422
        assert "brier" in response.json()["detail"]

    @pytest.mark.asyncio
    async def test_empty_pool(self, client):
        response = await client.post("/leaderboard", json={"players": [], "games": []})

        assert response.status_code == 200
        assert response.json()["entries"] == []

    @pytest.mark.asyncio
    async def test_player_position(self, client, sample_players_data, sample_games_data, brier_config_data):
        """Test POST /leaderboard/player/{player_id}"""
        body = {
            "players": sample_players_data,
            "games": sample_games_data,
            "config": brier_config_data,
        }

        response = await client.post("/leaderboard/player/player3", json=body)
        assert response.status_code == 200
        assert response.json()["rank"] == 3

        response = await client.post("/leaderboard/player/unknown", json=body)
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_get_default_config(self, client):
        response = await client.get("/leaderboard/config")

        assert response.status_code == 200
        data = response.json()
        assert data["mode"] in ["points", "brier"]
        assert "groupStage" in data["points"]
        assert "exactScoreBonus" in data


class TestHealthEndpoints:

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["docs"] == "/docs"
