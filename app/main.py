"""
Entry point de la API
"""

import logging
import re
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import get_settings
from app.core.logging_config import setup_logging

from app.controllers.health_controller import router as health_router
from app.controllers.leaderboard_controller import router as leaderboard_router
from app.controllers.picks_controller import router as picks_router

settings = get_settings()
logger = logging.getLogger(__name__)

# Parse CORS origins
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",")]
CORS_ORIGIN_REGEX = re.compile(r"https://.*\.netlify\.app") if settings.app_env == "production" else None


def is_allowed_origin(origin: str) -> bool:
    """Check if origin is allowed by explicit list or regex pattern."""
    if not origin:
        return False
    if origin in CORS_ORIGINS:
        return True
    if CORS_ORIGIN_REGEX and CORS_ORIGIN_REGEX.match(origin):
        return True
    return False


class CORSMiddleware(BaseHTTPMiddleware):
    """
    Custom CORS middleware that handles OPTIONS preflight BEFORE routing.
    """

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "")

        if request.method == "OPTIONS":
            if is_allowed_origin(origin):
                return Response(
                    status_code=200,
                    headers={
                        "Access-Control-Allow-Origin": origin,
                        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
                        "Access-Control-Allow-Headers": "Content-Type, Accept, Origin, X-Requested-With",
                        "Access-Control-Max-Age": "86400",  # Cache preflight for 24 hours
                    }
                )
            return Response(status_code=403, content="Origin not allowed")

        response = await call_next(request)

        if is_allowed_origin(origin):
            response.headers["Access-Control-Allow-Origin"] = origin

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    logger.info(f"🏒 Pool scoring API started (env={settings.app_env}, mode={settings.scoring_mode})")
    yield


app = FastAPI(
    title="Pick Pool Scoring API",
    description="Motor de puntos y leaderboard para pools de predicciones",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(CORSMiddleware)

app.include_router(health_router)
app.include_router(leaderboard_router)
app.include_router(picks_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Pick Pool Scoring API",
        "version": "1.0.0",
        "docs": "/docs"
    }
