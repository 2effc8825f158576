from typing import Literal, Optional
from pydantic import BaseModel, Field


DEFAULT_ROUND_POINTS = {
    "groupStage": 1,
    "knockoutRound": 2,
    "medalRound": 3,
}


class BrierConfig(BaseModel):
    base: float  # máximo por partido antes de la penalización (ej: 25)
    multiplier: float  # escala de la penalización (ej: 100)

    class Config:
        populate_by_name = True


class ExactScoreBonus(BaseModel):
    enabled: bool = False
    points: int = 1

    class Config:
        populate_by_name = True


class ScoringConfig(BaseModel):
    """
    Configuración del sistema de puntos.

    - mode "points": puntos fijos por acertar el resultado, según la ronda
    - mode "brier": puntuación probabilística usando la confianza del pick
    """

    mode: Literal["points", "brier"] = "points"
    points: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_ROUND_POINTS))

    # Requerido cuando mode == "brier"; no se rellena con defaults
    brier: Optional[BrierConfig] = None

    exact_score_bonus: ExactScoreBonus = Field(default_factory=ExactScoreBonus, alias="exactScoreBonus")

    # Subcadena del nombre del partido -> roundType, para partidos sin roundType
    round_types: dict[str, str] = Field(default_factory=dict, alias="roundTypes")

    class Config:
        populate_by_name = True
