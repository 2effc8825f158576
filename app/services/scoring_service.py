"""
Scoring Service - Convierte cada pick en puntos según el modo configurado.

Modos:
- points: puntos fijos por ronda al acertar el resultado (win_a / win_b / tie)
- brier: base - multiplier * (outcome - confidence)^2, escalado por la ronda

Los partidos que no están en estado final no puntúan (ni suman ni restan).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from app.models.game import Game
from app.models.leaderboard import PickScore
from app.models.pick import Pick
from app.models.scoring_config import ExactScoreBonus, ScoringConfig


logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.5
DEFAULT_ROUND_TYPE = "groupStage"


class ScoringServiceError(Exception):
    """Base exception for scoring service errors."""
    pass


class ScoringConfigError(ScoringServiceError):
    """Raised when the scoring configuration cannot be used as given."""
    pass


class Outcome(str, Enum):
    WIN_A = "win_a"
    WIN_B = "win_b"
    TIE = "tie"


def determine_winner(score_a: int, score_b: int) -> Outcome:
    """Resultado ternario a partir de dos marcadores (reales o pronosticados)."""
    if score_a > score_b:
        return Outcome.WIN_A
    if score_b > score_a:
        return Outcome.WIN_B
    return Outcome.TIE


def get_round_weight(points: dict[str, int], round_type: Optional[str]) -> int:
    """
    Peso configurado para una ronda.

    Una ronda que no aparece en la configuración vale 0: el pick
    no suma nada, pero tampoco rompe el cálculo del leaderboard.
    """
    if round_type is None:
        return 0
    return points.get(round_type, 0)


def resolve_round_type(game: Game, config: ScoringConfig) -> str:
    """
    Determine the round type of a game.

    An explicit roundType is always trusted. Otherwise it is inferred
    from the game name: configured mappings first, then the built-in
    medal / knockout keywords, and finally the group stage.
    """
    if game.round_type:
        return game.round_type

    name = (game.name or "").lower()

    for key, round_type in config.round_types.items():
        if key.lower() in name:
            return round_type

    if "gold" in name or "bronze" in name:
        return "medalRound"
    if "semifinal" in name or "quarterfinal" in name:
        return "knockoutRound"

    return DEFAULT_ROUND_TYPE


def is_exact_score(pick: Pick, game: Game) -> bool:
    return (
        pick.team_a_score == game.scores.team_a
        and pick.team_b_score == game.scores.team_b
    )


@dataclass(frozen=True)
class FixedPointsStrategy:
    """Puntos fijos por acierto; nunca resta."""

    weights: dict[str, int]
    exact_score_bonus: ExactScoreBonus

    mode = "points"

    def points_for(
        self,
        pick: Pick,
        game: Game,
        round_type: str,
        is_correct: bool
    ) -> tuple[float, float]:
        """Returns (base_points, bonus_points) for a resolved pick."""
        if not is_correct:
            return 0, 0

        base_points = get_round_weight(self.weights, round_type)
        bonus_points = 0

        # Una ronda sin peso no puntúa, tampoco el bonus
        if base_points == 0:
            return 0, 0

        if self.exact_score_bonus.enabled and is_exact_score(pick, game):
            bonus_points = self.exact_score_bonus.points

        return base_points, bonus_points


@dataclass(frozen=True)
class BrierStrategy:
    """
    Puntuación Brier invertida.

    outcome = 1 si el lado elegido ganó, 0 si no. Con confidence == outcome
    se obtiene el máximo (weight * base); con confianza total y fallo,
    weight * (base - multiplier).
    """

    weights: dict[str, int]
    base: float
    multiplier: float

    mode = "brier"

    def points_for(
        self,
        pick: Pick,
        game: Game,
        round_type: str,
        is_correct: bool
    ) -> tuple[float, float]:
        confidence = pick.confidence if pick.confidence is not None else DEFAULT_CONFIDENCE
        outcome = 1 if is_correct else 0

        raw = self.base - self.multiplier * (outcome - confidence) ** 2
        points = get_round_weight(self.weights, round_type) * raw

        # Se redondea a centésimas para que los totales no arrastren ruido de coma flotante
        return round(points, 2), 0


ScoringStrategy = Union[FixedPointsStrategy, BrierStrategy]


def build_strategy(config: ScoringConfig) -> ScoringStrategy:
    """
    Select the scoring strategy for a computation.

    Raises:
        ScoringConfigError: brier mode without a brier block. Guessing
            base/multiplier would silently change every score.
    """
    if config.mode == "brier":
        if config.brier is None:
            raise ScoringConfigError("Scoring mode 'brier' requires a 'brier' configuration (base, multiplier)")
        return BrierStrategy(
            weights=config.points,
            base=config.brier.base,
            multiplier=config.brier.multiplier,
        )

    if config.mode == "points":
        return FixedPointsStrategy(
            weights=config.points,
            exact_score_bonus=config.exact_score_bonus,
        )

    raise ScoringConfigError(f"Unknown scoring mode: {config.mode}")


def score_pick(
    pick: Pick,
    game: Optional[Game],
    strategy: ScoringStrategy,
    config: ScoringConfig
) -> PickScore:
    """
    Calcular los puntos de un pick.

    Un pick sin partido, con partido no final o sin marcador
    devuelve 0 puntos con el motivo en `reason`; nunca lanza.
    """
    if game is None:
        logger.debug(f"Pick for unknown game {pick.game_id} skipped")
        return PickScore(game_id=pick.game_id, reason="game_not_found")

    if not game.is_final:
        return PickScore(game_id=pick.game_id, reason="game_not_final")

    if game.scores is None or game.scores.team_a is None or game.scores.team_b is None:
        logger.debug(f"Final game {game.id} has no scores, pick skipped")
        return PickScore(game_id=pick.game_id, reason="missing_scores")

    round_type = resolve_round_type(game, config)
    actual = determine_winner(game.scores.team_a, game.scores.team_b)
    predicted = determine_winner(pick.team_a_score, pick.team_b_score)
    is_correct = predicted == actual

    base_points, bonus_points = strategy.points_for(pick, game, round_type, is_correct)

    return PickScore(
        game_id=pick.game_id,
        is_correct=is_correct,
        base_points=base_points,
        bonus_points=bonus_points,
        total_points=base_points + bonus_points,
        round_type=round_type,
        predicted_result=predicted.value,
        actual_result=actual.value,
    )
