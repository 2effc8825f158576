"""
Configuración de la app cargada desde variables de entorno (.env)

Todo lo que varía entre desarrollo/producción va aquí, incluida la
configuración de puntos por defecto del pool
"""

import json
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

from app.models.scoring_config import (
    DEFAULT_ROUND_POINTS,
    BrierConfig,
    ExactScoreBonus,
    ScoringConfig,
)


class Settings(BaseSettings):
    # App
    app_env: str = "development"  # o "production"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - de dónde pueden venir los requests
    cors_origins: str = "http://localhost:3000"  # URLs separadas por coma

    # ==================== Configuración de Puntos ====================
    # - "points": puntos fijos por ronda al acertar el resultado
    # - "brier": puntuación por confianza (base - multiplier * error^2)
    scoring_mode: str = "points"

    # En el .env va como JSON: ROUND_POINTS='{"groupStage": 1, "knockoutRound": 2}'
    round_points: dict[str, int] = dict(DEFAULT_ROUND_POINTS)

    # Solo se usan en modo brier
    brier_base: float = 25.0
    brier_multiplier: float = 100.0

    # Punto extra por acertar el marcador exacto (solo modo points)
    exact_score_bonus_enabled: bool = False
    exact_score_bonus_points: int = 1

    # Archivo JSON con un ScoringConfig completo; si está definido, manda sobre lo de arriba
    scoring_config_file: str | None = None

    class Config:
        env_file = ".env"  # Lee desde el archivo .env
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignora campos extras del .env que no estén en el modelo

    def scoring_config(self) -> ScoringConfig:
        """Configuración de puntos por defecto (la que se usa si el request no trae una)"""
        if self.scoring_config_file:
            data = json.loads(Path(self.scoring_config_file).read_text(encoding="utf-8"))
            return ScoringConfig.model_validate(data)

        return ScoringConfig(
            mode=self.scoring_mode,
            points=self.round_points,
            brier=BrierConfig(base=self.brier_base, multiplier=self.brier_multiplier),
            exact_score_bonus=ExactScoreBonus(
                enabled=self.exact_score_bonus_enabled,
                points=self.exact_score_bonus_points,
            ),
        )


@lru_cache()
def get_settings() -> Settings:
    """Retorna la instancia de configuración (cacheada para no releerla)"""
    return Settings()
