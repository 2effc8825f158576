from typing import Optional
from pydantic import BaseModel, Field


class PickScore(BaseModel):
    """Resultado de puntuar un pick contra su partido"""

    game_id: str = Field(..., alias="gameId")

    is_correct: bool = Field(False, alias="isCorrect")
    base_points: float = Field(0.0, alias="basePoints")
    bonus_points: float = Field(0.0, alias="bonusPoints")
    total_points: float = Field(0.0, alias="totalPoints")

    round_type: Optional[str] = Field(None, alias="roundType")
    predicted_result: Optional[str] = Field(None, alias="predictedResult")
    actual_result: Optional[str] = Field(None, alias="actualResult")

    reason: Optional[str] = None  # game_not_found | game_not_final | missing_scores

    class Config:
        populate_by_name = True


class RoundStats(BaseModel):
    correct: int = 0
    total: int = 0
    points: float = 0.0

    class Config:
        populate_by_name = True


class LeaderboardEntry(BaseModel):
    """Entrada en la tabla de clasificación (resultado agregado)"""

    player_id: str = Field(..., alias="playerId")
    player_name: str = Field(..., alias="playerName")
    rank: int = 0

    # Puede ser negativo en modo brier
    total_points: float = Field(0.0, alias="totalPoints")

    correct_picks: int = Field(0, alias="correctPicks")
    total_picks: int = Field(0, alias="totalPicks")
    scored_games: int = Field(0, alias="scoredGames")
    accuracy: float = 0.0

    round_breakdown: dict[str, RoundStats] = Field(default_factory=dict, alias="roundBreakdown")
    pick_results: list[PickScore] = Field(default_factory=list, alias="pickResults")

    class Config:
        populate_by_name = True
