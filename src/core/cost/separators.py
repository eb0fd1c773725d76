"""
Separator Policy — Допустимые десятичные разделители

Упорядоченный набор одиночных символов, принимаемых как десятичный
разделитель. По умолчанию: ',' и '.'.

Набор валидируется один раз при создании политики и далее неизменен.
Используется для построения regex извлечения и для нормализации
(удаление/замена разделителей).
"""

import re
from dataclasses import dataclass
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_SEPARATORS: Final[tuple[str, ...]] = (",", ".")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ConfigError(Exception):
    """
    Невалидная конфигурация набора разделителей.

    Возникает сразу при создании конфигурации: пустой набор,
    нестроковый элемент или элемент длиной не в один символ.
    """
    pass


# =============================================================================
# POLICY
# =============================================================================


@dataclass(frozen=True)
class SeparatorPolicy:
    """Набор десятичных разделителей.

    Дубликаты отбрасываются с сохранением порядка первого вхождения.
    """

    chars: tuple[str, ...] = DEFAULT_SEPARATORS

    def __post_init__(self) -> None:
        raw = self.chars
        if isinstance(raw, str):
            raise ConfigError(f"separators must be a collection of characters, got string {raw!r}")

        try:
            items = tuple(raw)
        except TypeError as e:
            raise ConfigError(f"separators must be iterable, got {type(raw).__name__}") from e

        if not items:
            raise ConfigError("separators must not be empty")

        for item in items:
            if not isinstance(item, str) or len(item) != 1:
                raise ConfigError(f"separator must be a single character, got {item!r}")

        object.__setattr__(self, "chars", tuple(dict.fromkeys(items)))

    def separators(self) -> tuple[str, ...]:
        """Упорядоченный набор разделителей"""
        return self.chars

    def with_extra(self, *extra: str) -> "SeparatorPolicy":
        """
        Новая политика, дополненная разделителями extra.

        Args:
            extra: Дополнительные одиночные символы

        Returns:
            Новый SeparatorPolicy (исходный не изменяется)

        Raises:
            ConfigError: Если хотя бы один элемент не одиночный символ
        """
        return SeparatorPolicy(self.chars + tuple(extra))

    def character_class(self) -> str:
        """Regex character class из экранированных разделителей, например "[,\\.]"."""
        return "[" + "".join(re.escape(sep) for sep in self.chars) + "]"

    def strip(self, text: str) -> str:
        """Удаление всех разделителей из текста"""
        for sep in self.chars:
            text = text.replace(sep, "")
        return text
