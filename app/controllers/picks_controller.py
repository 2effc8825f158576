"""
Controlador de picks - Importación de hojas de picks (CSV)
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from app.models.game import Game, Team
from app.models.pick import Pick
from app.services.pick_import_service import (
    ImportIssue,
    InvalidPicksFileError,
    PickValidationResult,
    generate_picks_template,
    parse_picks_csv,
    validate_picks,
)


router = APIRouter(prefix="/picks", tags=["picks"])


class PickImportRequest(BaseModel):
    content: str  # texto CSV
    games: list[Game] = Field(default_factory=list)
    teams: Optional[list[Team]] = None


class PickImportResponse(BaseModel):
    picks: list[Pick]
    errors: list[ImportIssue]
    validation: Optional[PickValidationResult] = None


class TemplateRequest(BaseModel):
    games: list[Game]


@router.post("/import", response_model=PickImportResponse)
async def import_picks(request: PickImportRequest):
    """
    Leer una hoja de picks en CSV.

    Si vienen partidos, además se validan los picks contra el calendario.
    """
    try:
        parsed = parse_picks_csv(request.content)
    except InvalidPicksFileError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    validation = None
    if request.games:
        validation = validate_picks(parsed.picks, request.games, request.teams)

    return PickImportResponse(
        picks=parsed.picks,
        errors=parsed.errors,
        validation=validation
    )


@router.post("/template", response_class=PlainTextResponse)
async def get_picks_template(request: TemplateRequest):
    """
    Plantilla CSV con una fila por partido.
    """
    return PlainTextResponse(
        generate_picks_template(request.games),
        media_type="text/csv"
    )
