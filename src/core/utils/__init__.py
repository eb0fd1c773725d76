"""Вспомогательные утилиты (логирование)."""

from src.core.utils.logging import get_logger

__all__ = ["get_logger"]
