"""
Controlador de leaderboards - Endpoints de clasificación

El cliente manda jugadores, partidos y (opcional) la configuración de puntos;
el leaderboard se calcula en cada request, sin estado entre llamadas.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from app.core.config import get_settings
from app.models.game import Game
from app.models.leaderboard import LeaderboardEntry
from app.models.player import Player
from app.models.scoring_config import ScoringConfig
from app.services.leaderboard_service import LeaderboardService
from app.services.scoring_service import ScoringConfigError


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


class LeaderboardRequest(BaseModel):
    """Datos ya cargados por el cliente para calcular el leaderboard."""
    players: list[Player] = Field(default_factory=list)
    games: list[Game] = Field(default_factory=list)
    config: Optional[ScoringConfig] = None


class LeaderboardResponse(BaseModel):
    """Leaderboard ordenado por puntos y el modo con el que se calculó."""
    mode: str
    entries: list[LeaderboardEntry]


def _get_service(config: Optional[ScoringConfig]) -> LeaderboardService:
    config = config or get_settings().scoring_config()

    try:
        return LeaderboardService(config)
    except ScoringConfigError as e:
        logger.error(f"❌ Invalid scoring configuration: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )


@router.post("", response_model=LeaderboardResponse)
async def calculate_leaderboard(request: LeaderboardRequest):
    """
    Calcular el leaderboard.

    Si no viene `config`, se usa la configuración de puntos del servidor.
    """
    service = _get_service(request.config)
    entries = service.calculate_leaderboard(request.players, request.games)

    return LeaderboardResponse(
        mode=service.config.mode,
        entries=entries
    )


@router.post("/player/{player_id}", response_model=LeaderboardEntry)
async def get_player_position(player_id: str, request: LeaderboardRequest):
    """
    Obtener la posición de un jugador en el leaderboard.
    """
    service = _get_service(request.config)
    entry = service.get_player_rank(player_id, request.players, request.games)

    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Player {player_id} not found"
        )

    return entry


@router.get("/config", response_model=ScoringConfig)
async def get_scoring_config():
    """
    Configuración de puntos por defecto del servidor.
    """
    return get_settings().scoring_config()
