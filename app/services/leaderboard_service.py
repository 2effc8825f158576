"""
LeaderboardService - Calculates the leaderboard from players, games and picks.

The computation is a single synchronous pass with no shared state:
every call builds its own game lookup and its own entries, so the
service can be used from concurrent requests without locking.
"""

import logging
from typing import Optional

from app.models.game import Game
from app.models.leaderboard import LeaderboardEntry, RoundStats
from app.models.pick import Pick
from app.models.player import Player
from app.models.scoring_config import ScoringConfig
from app.services.scoring_service import build_strategy, score_pick


logger = logging.getLogger(__name__)


class LeaderboardService:
    def __init__(self, config: ScoringConfig):
        self.config = config
        # Raises ScoringConfigError before any pick is looked at
        self.strategy = build_strategy(config)

    def _calculate_player_stats(
        self,
        picks: list[Pick],
        games_by_id: dict[str, Game]
    ) -> dict:
        """
        Score every pick of one player and aggregate the results.

        Only picks whose game resolved to a final score count towards
        scored_games, accuracy and the round breakdown.
        """
        pick_results = []
        total_points = 0
        correct_picks = 0
        scored_games = 0
        round_breakdown: dict[str, RoundStats] = {
            round_type: RoundStats() for round_type in self.config.points
        }

        for pick in picks:
            result = score_pick(pick, games_by_id.get(pick.game_id), self.strategy, self.config)
            pick_results.append(result)

            if result.reason is not None:
                continue

            scored_games += 1
            total_points += result.total_points

            stats = round_breakdown.setdefault(result.round_type, RoundStats())
            stats.total += 1
            stats.points += result.total_points

            if result.is_correct:
                correct_picks += 1
                stats.correct += 1

        accuracy = round(correct_picks / scored_games * 100, 1) if scored_games > 0 else 0.0

        return {
            "total_points": total_points,
            "correct_picks": correct_picks,
            "total_picks": len(picks),
            "scored_games": scored_games,
            "accuracy": accuracy,
            "round_breakdown": round_breakdown,
            "pick_results": pick_results,
        }

    def calculate_leaderboard(
        self,
        players: list[Player],
        games: list[Game]
    ) -> list[LeaderboardEntry]:
        """
        Build the ranked leaderboard.

        Sorted by total points (descending). Players with equal totals
        keep their input order and share the same rank (1, 1, 3).
        """
        games_by_id = {game.id: game for game in games}

        entries = []
        for player in players:
            stats = self._calculate_player_stats(player.picks, games_by_id)
            entries.append(LeaderboardEntry(
                player_id=player.id,
                player_name=player.name,
                **stats
            ))

        # list.sort is stable
        entries.sort(key=lambda x: x.total_points, reverse=True)
        assign_ranks(entries)

        logger.info(
            f"Leaderboard calculated: {len(entries)} players, "
            f"{len(games_by_id)} games, mode={self.strategy.mode}"
        )

        return entries

    def get_player_rank(
        self,
        player_id: str,
        players: list[Player],
        games: list[Game]
    ) -> Optional[LeaderboardEntry]:
        """Entry (with rank) of a single player, or None if not in the pool."""
        for entry in self.calculate_leaderboard(players, games):
            if entry.player_id == player_id:
                return entry
        return None


def assign_ranks(entries: list[LeaderboardEntry]) -> None:
    """Standard competition ranking over entries already sorted by points."""
    current_rank = 1
    for idx, entry in enumerate(entries):
        if idx > 0 and entry.total_points < entries[idx - 1].total_points:
            current_rank = idx + 1
        entry.rank = current_rank


def calculate_leaderboard(
    players: list[Player],
    games: list[Game],
    config: ScoringConfig
) -> list[LeaderboardEntry]:
    """Entry point: players + games + config -> sorted leaderboard."""
    return LeaderboardService(config).calculate_leaderboard(players, games)
