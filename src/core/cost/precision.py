"""
Precision Resolver — Общая дробная точность для единицы разбора

Все токены одного текста (или одного пула) нормализуются к одной ширине
дробной части, иначе их canonical keys несравнимы.
"""

from collections.abc import Iterable

from src.core.domain.cost import RawToken


def resolve_precision(tokens: Iterable[RawToken], floor: int | None = None) -> int:
    """
    Точность = максимальная ширина дробной части среди токенов.

    Args:
        tokens: Токены единицы разбора
        floor: Минимальная точность (опционально)

    Returns:
        max(ширина дробной части, floor); для пустого набора → floor или 0

    Raises:
        ValueError: Если floor отрицательный

    Examples:
        >>> resolve_precision([])
        0
        >>> resolve_precision([], floor=2)
        2
    """
    if floor is not None and floor < 0:
        raise ValueError(f"precision floor must be non-negative, got {floor}")

    precision = max((token.fraction_width for token in tokens), default=0)

    if floor is not None:
        precision = max(precision, floor)

    return precision


def resolve_key_width(tokens: Iterable[RawToken], precision: int) -> int:
    """Ширина canonical key: самая длинная целая часть + precision (0 для пустого набора)."""
    widths = [len(token.integer_digits) for token in tokens]
    if not widths:
        return 0
    return max(widths) + precision
