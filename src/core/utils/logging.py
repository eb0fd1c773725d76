"""
Logger factory

Единая точка получения логгеров пакета. Уровень задаётся переменной
окружения COST_ENGINE_LOG_LEVEL (default: WARNING).
"""

import logging
import os
from typing import Final

LOG_LEVEL_ENV: Final[str] = "COST_ENGINE_LOG_LEVEL"
LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Логгер с одним stream handler.

    Повторный вызов для того же имени не добавляет дублирующих handler'ов.

    Args:
        name: Имя логгера (обычно __name__)

    Returns:
        Настроенный logging.Logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    return logger
