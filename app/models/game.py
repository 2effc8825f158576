from typing import Optional
from pydantic import BaseModel, Field


class Team(BaseModel):
    """Un lado del partido (país / equipo)"""

    name: str
    abbreviation: Optional[str] = None

    class Config:
        populate_by_name = True


class GameStatus(BaseModel):
    state: str = "scheduled"  # scheduled | in_progress | final
    detail: Optional[str] = None

    class Config:
        populate_by_name = True


class GameScores(BaseModel):
    team_a: Optional[int] = Field(None, alias="teamA")
    team_b: Optional[int] = Field(None, alias="teamB")

    class Config:
        populate_by_name = True


class Game(BaseModel):
    """Partido entre dos lados; solo puntúa cuando status.state == 'final'"""

    id: str
    name: Optional[str] = None

    team_a: Optional[Team] = Field(None, alias="teamA")
    team_b: Optional[Team] = Field(None, alias="teamB")

    status: GameStatus = GameStatus()
    scores: Optional[GameScores] = None

    round_type: Optional[str] = Field(None, alias="roundType")  # groupStage | knockoutRound | medalRound

    class Config:
        populate_by_name = True

    @property
    def is_final(self) -> bool:
        return self.status.state == "final"
