"""
Controlador de salud - Endpoint de comprobación del servicio
"""

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.config import get_settings


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Respuesta del chequeo de estado."""
    status: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Endpoint de verificación de estado.

    El motor de puntos no tiene dependencias externas: si responde, está listo.
    """
    return HealthResponse(
        status="ok",
        environment=get_settings().app_env
    )
