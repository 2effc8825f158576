from .game import Game, GameScores, GameStatus, Team
from .pick import Pick
from .player import Player
from .scoring_config import BrierConfig, ExactScoreBonus, ScoringConfig
from .leaderboard import LeaderboardEntry, PickScore, RoundStats

__all__ = [
    "Game",
    "GameScores",
    "GameStatus",
    "Team",
    "Pick",
    "Player",
    "BrierConfig",
    "ExactScoreBonus",
    "ScoringConfig",
    "LeaderboardEntry",
    "PickScore",
    "RoundStats",
]
