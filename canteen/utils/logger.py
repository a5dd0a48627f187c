"""
Logging configuration for the canteen logger tree
"""
import logging
import sys
from typing import Optional, Union

from canteen.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Optional[Union[str, int]] = None) -> int:
    """Explicit level, else LOG_LEVEL, else DEBUG/INFO from the DEBUG flag"""
    if level is None:
        settings = get_settings()
        level = settings.LOG_LEVEL or ("DEBUG" if settings.DEBUG else "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def get_logger(name: str, level: Optional[Union[str, int]] = None) -> logging.Logger:
    """Get a logger writing to stdout; the handler is attached only once"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(resolve_level(level))
    return logger
