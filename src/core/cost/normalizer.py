"""
Key Normalizer — Canonical sort key для числового токена

Токен при точности P превращается в строку цифр value × 10^P:
- дробная часть дополняется нулями справа до P (усечение не применяется)
- целая и дробная части склеиваются без разделителя
- результат дополняется нулями слева до общей ширины единицы разбора
- знак сохраняется, кроме нулевой величины ("-0" и "0" совпадают)

КРИТИЧЕСКИЙ ИНВАРИАНТ:
    Для токенов A, B при одной точности P:
    int(normalize(A, P)) < int(normalize(B, P))  ⇔  value(A) < value(B)
    На этом держится корректность выбора min/max.

Примеры:
    "12.5"  @ P=2          → "1250"
    "-12.5" @ P=2          → "-1250"
    "9.5"   @ P=2, width=4 → "0950"
"""

from collections.abc import Iterable

from src.core.domain.cost import CostEntry, RawToken


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LogicError(Exception):
    """
    Токен нарушает контракт извлечения.

    Недостижимо при корректном TokenExtractor: пустая целая часть
    или дробная часть шире точности. Не перехватывается внутри ядра.
    """
    pass


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize_token(token: RawToken, precision: int, width: int = 0) -> str:
    """
    Canonical key токена при заданной точности.

    Args:
        token: Числовой токен
        precision: Общая ширина дробной части (>= ширины дробной части токена)
        width: Минимальная ширина величины без знака (default: 0, без выравнивания)

    Returns:
        Строка ASCII-цифр, возможно с ведущим '-'

    Raises:
        LogicError: Если integer_digits пуст или дробная часть шире precision
    """
    if not token.integer_digits:
        raise LogicError(f"token {token.text!r} has no integer digits")

    if token.fraction_width > precision:
        raise LogicError(
            f"token {token.text!r} has {token.fraction_width} fractional digits, "
            f"precision is {precision}"
        )

    magnitude = (token.integer_digits + token.fractional_digits.ljust(precision, "0")).zfill(width)

    if token.is_negative and magnitude.strip("0"):
        return "-" + magnitude
    return magnitude


def build_cost_entries(tokens: Iterable[RawToken], precision: int, width: int = 0) -> dict[str, str]:
    """
    Карта canonical key → исходный текст токена.

    Токены с одинаковым ключом схлопываются: последний перезаписывает
    предыдущий ("5" и "5.00" при P=2 дают одну запись "500").

    Args:
        tokens: Токены в порядке появления
        precision: Общая точность
        width: Общая ширина ключа

    Returns:
        dict в порядке первой вставки ключа
    """
    entries: dict[str, str] = {}
    for token in tokens:
        entry = CostEntry(normalize_token(token, precision, width), token.text)
        entries[entry.key] = entry.value
    return entries
