"""
Token Extractor — Извлечение числовых токенов из текста стоимости

Сканирует произвольный текст слева направо и возвращает все подстроки вида
<sign><digits><separator>?<digits> в порядке появления.

Диапазоны ("10 - 20") и списки ("$5, $10") не имеют отдельного синтаксиса:
это просто несколько соседних числовых токенов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Извлечение тотально: любой вход (включая не-строку) → кортеж без исключений
2. Цифры только ASCII (0-9)
3. Одиночный знак или разделитель без цифр не матчится
"""

import re

from src.core.cost.separators import SeparatorPolicy
from src.core.domain.cost import RawToken


# =============================================================================
# PATTERNS
# =============================================================================


def build_token_pattern(policy: SeparatorPolicy, allow_negative: bool = True) -> re.Pattern[str]:
    """
    Regex числового токена для данного набора разделителей.

    Группы: (1) знак, (2) целая часть, (3) дробная часть (может быть пустой).

    Args:
        policy: Набор десятичных разделителей
        allow_negative: Учитывать ведущий '-' как знак

    Returns:
        Скомпилированный паттерн
    """
    sign = "(-?)" if allow_negative else "()"
    return re.compile(sign + r"([0-9]+)" + policy.character_class() + r"?([0-9]*)")


# =============================================================================
# EXTRACTOR
# =============================================================================


class TokenExtractor:
    """Извлекатель числовых токенов.

    Паттерны строятся один раз при создании, политика разделителей неизменна.
    """

    def __init__(self, policy: SeparatorPolicy | None = None):
        self.policy = policy or SeparatorPolicy()
        self._pattern = build_token_pattern(self.policy)
        self._unsigned_pattern = build_token_pattern(self.policy, allow_negative=False)

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def extract(self, text: object) -> tuple[RawToken, ...]:
        """
        Все числовые токены текста в порядке появления.

        Args:
            text: Исходный текст стоимости (не-строка → пустой результат)

        Returns:
            Кортеж RawToken (пустой, если чисел нет)

        Examples:
            >>> [t.text for t in TokenExtractor().extract("$5, $10.50")]
            ['5', '10.50']
            >>> TokenExtractor().extract("Free")
            ()
        """
        if not isinstance(text, str):
            return ()

        tokens = []
        for match in self._pattern.finditer(text):
            sign, integer_digits, fractional_digits = match.groups()
            # "5," в "$5, $10": висящий разделитель не входит в текст токена
            token_text = match.group(0) if fractional_digits else sign + integer_digits
            tokens.append(
                RawToken(
                    sign=sign,
                    integer_digits=integer_digits,
                    fractional_digits=fractional_digits,
                    text=token_text,
                )
            )
        return tuple(tokens)

    def matches(self, text: object, allow_negative: bool = True) -> bool:
        """
        Содержит ли текст хотя бы один числовой токен.

        Поиск не заякорен: "from $10" валиден.

        Args:
            text: Проверяемый текст
            allow_negative: Разрешать ведущий '-'

        Returns:
            True если найден числовой токен
        """
        if not isinstance(text, str):
            return False

        pattern = self._pattern if allow_negative else self._unsigned_pattern
        return pattern.search(text.strip()) is not None


def is_valid_cost(text: object, allow_negative: bool = True, policy: SeparatorPolicy | None = None) -> bool:
    """
    Является ли текст валидной стоимостью (содержит числовой токен).

    Args:
        text: Проверяемый текст
        allow_negative: Разрешать отрицательные значения
        policy: Набор разделителей (default: ',' и '.')

    Returns:
        True если текст содержит числовой токен
    """
    return TokenExtractor(policy).matches(text, allow_negative=allow_negative)
