"""
Cost — Модели данных для разбора стоимости

Транзиентные значения, пересчитываемые на каждый вызов:
- RawToken: числовая подстрока, найденная в тексте стоимости
- CostEntry: пара (canonical key, исходный текст)
- Extreme: выбор экстремума (MIN/MAX)
- CostRange: итоговый диапазон стоимости (min/max) для отчёта

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. integer_digits никогда не пуст (ведущий разделитель без целой части не матчится)
2. Значение для отображения: всегда исходный текст, не нормализованное число
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Extreme(str, Enum):
    """Какой экстремум выбирать из набора стоимостей"""

    MIN = "min"
    MAX = "max"


# =============================================================================
# TOKENS
# =============================================================================


@dataclass(frozen=True)
class RawToken:
    """Числовой токен, извлечённый из текста стоимости.

    Пример: "-12,50" → sign="-", integer_digits="12", fractional_digits="50".
    Отсутствие разделителя и пустая дробная часть ("12." vs "12")
    нормализуются одинаково.
    """

    sign: str
    integer_digits: str
    fractional_digits: str
    text: str

    @property
    def fraction_width(self) -> int:
        return len(self.fractional_digits)

    @property
    def is_negative(self) -> bool:
        return self.sign == "-"


class CostEntry(NamedTuple):
    """Пара (canonical key, исходное значение)."""

    key: str
    value: str


# =============================================================================
# COST RANGE
# =============================================================================


class CostRange(BaseModel):
    """
    Диапазон стоимости: минимальное и максимальное значения пула.

    Оба поля хранят исходный текст токена (например "10.25", не "1025").
    Сериализованная форма соответствует контракту cost_range.
    """

    minimum: str = Field(..., min_length=1, description="Минимальная стоимость (исходный текст)")
    maximum: str = Field(..., min_length=1, description="Максимальная стоимость (исходный текст)")

    model_config = {"frozen": True}

    def is_single(self) -> bool:
        """Диапазон вырожден в одно значение"""
        return self.minimum == self.maximum
