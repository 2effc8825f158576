"""
Configuración de logging de la API
"""

import logging
import sys


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configura un único handler de consola para el árbol de loggers "app"."""
    logger = logging.getLogger("app")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Evitar handlers duplicados si se llama más de una vez (tests, reload)
    while logger.handlers:
        logger.removeHandler(logger.handlers[0])

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname).1s | %(name)-30.30s | %(message)s"
    ))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
