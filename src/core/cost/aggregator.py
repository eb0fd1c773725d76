"""
Range Aggregator — Выбор минимальной/максимальной стоимости

Ключи карты сравниваются как знаковые целые (через Decimal, без лимита
длины int-конверсии). Ключи обязаны иметь вид -?[0-9]+. Вызывающий код обязан
нормализовать все записи пула при одной общей точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустая карта → NEUTRAL_ZERO для MIN и MAX (не исключение)
2. Значение, не содержащее числового токена → NEUTRAL_ZERO
3. Порядок определяется только canonical key, никогда исходным текстом
"""

import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Final

from src.core.domain.cost import Extreme
from src.core.utils.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# "Нет стоимости" и "стоимость ноль" на этом уровне неразличимы
NEUTRAL_ZERO: Final[str] = "0"

_CANONICAL_KEY_RE: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


# =============================================================================
# AGGREGATION
# =============================================================================


def key_value(key: object) -> Decimal:
    """
    Числовое значение canonical key.

    Decimal вместо int: int() отвергает строки длиннее 4300 цифр.

    Raises:
        ValueError: Если ключ не строка вида -?[0-9]+
    """
    if not isinstance(key, str) or _CANONICAL_KEY_RE.fullmatch(key) is None:
        raise ValueError(f"invalid canonical cost key {key!r}, expected digits with optional leading '-'")
    return Decimal(key)


def _as_extreme(which: Extreme | str) -> Extreme:
    try:
        return Extreme(which)
    except ValueError:
        raise ValueError(f"which must be 'min' or 'max', got {which!r}") from None


def aggregate(
    entries: Mapping[str, str],
    which: Extreme | str,
    token_pattern: re.Pattern[str],
) -> str:
    """
    Исходное значение записи с минимальным/максимальным canonical key.

    Args:
        entries: Карта canonical key → исходный текст
        which: Extreme.MIN / Extreme.MAX (или "min" / "max")
        token_pattern: Паттерн числового токена для повторной проверки значения

    Returns:
        Исходный текст выбранной записи или NEUTRAL_ZERO

    Raises:
        ValueError: Если which не min/max или ключ карты не canonical key
    """
    extreme = _as_extreme(which)

    if not entries:
        return NEUTRAL_ZERO

    pick = min if extreme is Extreme.MIN else max
    key = pick(entries, key=key_value)
    value = entries[key]

    if not isinstance(value, str) or token_pattern.search(value) is None:
        logger.warning("Non-numeric cost value %r under key %s, using neutral zero", value, key)
        return NEUTRAL_ZERO

    return value


def sort_entries(entries: Mapping[str, str]) -> dict[str, str]:
    """Карта, упорядоченная по canonical key как по целому (по возрастанию)."""
    return {key: entries[key] for key in sorted(entries, key=key_value)}
