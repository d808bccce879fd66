"""
➡️ But : Configurer les logs une seule fois au démarrage de l'application.

configure_logging() : un handler console sur le logger racine, niveau lu dans settings.LOG_LEVEL,
et alignement des loggers uvicorn pour éviter les doublons.

Ailleurs, chaque module fait simplement :

logger = logging.getLogger(__name__)
"""

import logging
from typing import Optional

from tasks_back.core.config import settings

_CONFIGURED = False


def configure_logging(level: Optional[str] = None) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or settings.LOG_LEVEL or "INFO").upper()
    resolved_level = getattr(logging, level_name, logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root.addHandler(handler)

    root.setLevel(resolved_level)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logger = logging.getLogger(name)
        logger.setLevel(resolved_level)
        logger.propagate = False

    _CONFIGURED = True
