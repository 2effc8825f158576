"""
Pytest fixtures and configuration for all tests.
"""

import pytest

from app.models.game import Game
from app.models.player import Player
from app.models.scoring_config import ScoringConfig


@pytest.fixture
def points_config():
    """Fixed-points scoring config (default round weights)."""
    return ScoringConfig(
        mode="points",
        points={"groupStage": 1, "knockoutRound": 2, "medalRound": 3},
    )


@pytest.fixture
def brier_config():
    """Brier scoring config: base 25, multiplier 100."""
    return ScoringConfig.model_validate({
        "mode": "brier",
        "points": {"groupStage": 1, "knockoutRound": 2, "medalRound": 3},
        "brier": {"base": 25, "multiplier": 100},
    })


@pytest.fixture
def sample_games_data():
    """Raw game payloads as the client sends them (camelCase)."""
    return [
        {
            "id": "game1",
            "name": "Canada vs USA",
            "teamA": {"name": "Canada", "abbreviation": "CAN"},
            "teamB": {"name": "USA", "abbreviation": "USA"},
            "status": {"state": "final"},
            "scores": {"teamA": 3, "teamB": 1},
            "roundType": "groupStage",
        },
        {
            "id": "game2",
            "name": "Finland vs Sweden",
            "teamA": {"name": "Finland", "abbreviation": "FIN"},
            "teamB": {"name": "Sweden", "abbreviation": "SWE"},
            "status": {"state": "final"},
            "scores": {"teamA": 2, "teamB": 2},
            "roundType": "groupStage",
        },
        {
            "id": "game3",
            "name": "Canada vs Sweden - Gold Medal Game",
            "teamA": {"name": "Canada", "abbreviation": "CAN"},
            "teamB": {"name": "Sweden", "abbreviation": "SWE"},
            "status": {"state": "in_progress"},
            "scores": {"teamA": 1, "teamB": 0},
            "roundType": "medalRound",
        },
    ]


@pytest.fixture
def sample_games(sample_games_data):
    return [Game.model_validate(g) for g in sample_games_data]


@pytest.fixture
def sample_players_data():
    """Three players: confident and right, cautious, confident and wrong."""
    return [
        {
            "id": "player1",
            "name": "Confident Alice",
            "picks": [
                {"gameId": "game1", "teamAScore": 3, "teamBScore": 0, "confidence": 1.0},
                {"gameId": "game2", "teamAScore": 1, "teamBScore": 1, "confidence": 1.0},
            ],
        },
        {
            "id": "player2",
            "name": "Cautious Bob",
            "picks": [
                {"gameId": "game1", "teamAScore": 3, "teamBScore": 0, "confidence": 0.5},
                {"gameId": "game2", "teamAScore": 1, "teamBScore": 1, "confidence": 0.5},
            ],
        },
        {
            "id": "player3",
            "name": "Wrongly Confident Charlie",
            "picks": [
                {"gameId": "game1", "teamAScore": 0, "teamBScore": 3, "confidence": 1.0},
                {"gameId": "game2", "teamAScore": 2, "teamBScore": 0, "confidence": 1.0},
            ],
        },
    ]


@pytest.fixture
def sample_players(sample_players_data):
    return [Player.model_validate(p) for p in sample_players_data]
