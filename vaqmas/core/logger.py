import json
import logging
import sys
from datetime import datetime
from typing import Optional

from vaqmas.core.config import get_settings

settings = get_settings()

logger = logging.getLogger("vaqmas")
logger.setLevel(settings.LOG_LEVEL.upper())

# Prevent duplicate handlers on reload
if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get the service logger, or a child of it when a name is given."""
    if name:
        return logger.getChild(name)
    return logger


def log_debug(event: str, data: dict):
    """
    Logs structured debug info if enabled.
    """
    if not settings.DEBUG_MODE:
        return

    entry = {
        "timestamp": datetime.now().isoformat(),
        "event": event,
        "data": data,
    }
    logger.debug(json.dumps(entry, default=str))
