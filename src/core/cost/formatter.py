"""
Display Formatter — Подготовка выбранной стоимости к отображению

Тонкий слой оркестрации, правила форматирования принадлежат коллабораторам:
- "0" → локализуемая метка (по умолчанию "Free")
- чисто числовое значение → рендер с символом валюты (CurrencyFormatter)
- итоговый текст всегда проходит через escaper
"""

import html
import re
from collections.abc import Callable
from typing import Final, Protocol

from src.core.cost.separators import SeparatorPolicy


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_ZERO_LABEL: Final[str] = "Free"

_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"\s*[+-]?[0-9]+\s*")


# =============================================================================
# COLLABORATORS
# =============================================================================


class CurrencyFormatter(Protocol):
    """Рендер числового текста с символом валюты."""

    def render(self, numeric_text: str) -> str: ...


# =============================================================================
# FORMATTER
# =============================================================================


class DisplayFormatter:
    """Форматирование стоимости для отображения."""

    def __init__(
        self,
        policy: SeparatorPolicy | None = None,
        zero_label: str = DEFAULT_ZERO_LABEL,
        currency_formatter: CurrencyFormatter | None = None,
        escaper: Callable[[str], str] = html.escape,
        zero_label_provider: Callable[[], str] | None = None,
    ):
        """
        Args:
            policy: Набор десятичных разделителей
            zero_label: Метка для нулевой стоимости
            currency_formatter: Рендер валюты (опционально)
            escaper: Экранирование итогового текста (default: html.escape)
            zero_label_provider: Источник локализованной метки, приоритетнее zero_label
        """
        self.policy = policy or SeparatorPolicy()
        self.zero_label = zero_label
        self.currency_formatter = currency_formatter
        self.escaper = escaper
        self.zero_label_provider = zero_label_provider

    def replace_zero(self, value: object) -> object:
        """Ровно "0" (как текст, не сравнение float) → метка нулевой стоимости."""
        if str(value) == "0":
            return self.zero_label_provider() if self.zero_label_provider else self.zero_label
        return value

    def format_with_currency(self, value: object) -> object:
        """
        Рендер с символом валюты, если значение чисто числовое.

        Разделители удаляются перед проверкой, поэтому "1.500,00" тоже числовое.
        Без currency_formatter значение возвращается без изменений.
        """
        if self.currency_formatter is None:
            return value

        text = str(value)
        if _NUMERIC_RE.fullmatch(self.policy.strip(text)):
            return self.currency_formatter.render(text)
        return value

    def format(self, value: object, with_currency: bool = False) -> str:
        """
        Текст для отображения.

        Args:
            value: Выбранная стоимость (исходный текст или NEUTRAL_ZERO)
            with_currency: Добавлять символ валюты

        Returns:
            Экранированный текст
        """
        result = self.replace_zero(value)

        if with_currency:
            result = self.format_with_currency(result)

        return self.escaper(str(result))
