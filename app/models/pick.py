from typing import Optional
from pydantic import BaseModel, Field


class Pick(BaseModel):
    """Pronóstico de un jugador para un partido"""

    game_id: str = Field(..., alias="gameId")

    team_a_score: int = Field(..., alias="teamAScore")
    team_b_score: int = Field(..., alias="teamBScore")

    # Solo se usa en modo brier: probabilidad de que gane el lado elegido
    confidence: Optional[float] = None

    # Nombres tal cual venían en la hoja de picks (importación CSV)
    team_a: Optional[str] = Field(None, alias="teamA")
    team_b: Optional[str] = Field(None, alias="teamB")

    class Config:
        populate_by_name = True
