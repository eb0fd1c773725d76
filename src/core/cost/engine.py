"""
CostEngine — Разбор и ранжирование стоимостей

Фасад над компонентами ядра:
    raw text → TokenExtractor → resolve_precision → normalize_token
             → карта canonical key → aggregate (min/max) → DisplayFormatter

Движок создаётся явно с конфигурацией и коллабораторами, глобального
singleton нет: время жизни общего экземпляра определяет вызывающий код.

Коллабораторы (непрозрачные):
- CostSupplier: все записанные строки стоимости
- EntityCostSupplier: строки стоимости одной сущности
- CurrencyFormatter: рендер валюты
- escaper, zero_label_provider: экранирование и локализуемая метка "Free"
"""

import html
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from src.core.cost.aggregator import aggregate, sort_entries
from src.core.cost.extractor import TokenExtractor
from src.core.cost.formatter import DEFAULT_ZERO_LABEL, CurrencyFormatter, DisplayFormatter
from src.core.cost.normalizer import build_cost_entries
from src.core.cost.precision import resolve_key_width, resolve_precision
from src.core.cost.separators import DEFAULT_SEPARATORS, ConfigError, SeparatorPolicy
from src.core.domain.cost import CostRange, Extreme, RawToken
from src.core.utils.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# COLLABORATORS
# =============================================================================


class CostSupplier(Protocol):
    """Источник всех различных записанных строк стоимости."""

    def get_all_costs(self) -> Iterable[str]: ...


class EntityCostSupplier(Protocol):
    """Источник строк стоимости одной сущности (None, если сущность неизвестна)."""

    def get_entity_costs(self, entity: object) -> Iterable[str] | None: ...


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CostEngineConfig:
    """Конфигурация CostEngine.

    Валидируется один раз при создании.
    """

    # Допустимые десятичные разделители (одиночные символы)
    separators: tuple[str, ...] = DEFAULT_SEPARATORS

    # Метка для нулевой стоимости
    zero_label: str = DEFAULT_ZERO_LABEL

    # Разделитель min/max в отформатированном диапазоне
    range_separator: str = " - "

    def __post_init__(self) -> None:
        object.__setattr__(self, "separators", SeparatorPolicy(self.separators).separators())

        if not isinstance(self.zero_label, str):
            raise ConfigError(f"zero_label must be a string, got {type(self.zero_label).__name__}")
        if not isinstance(self.range_separator, str):
            raise ConfigError(
                f"range_separator must be a string, got {type(self.range_separator).__name__}"
            )

    def policy(self) -> SeparatorPolicy:
        return SeparatorPolicy(self.separators)


# =============================================================================
# ENGINE
# =============================================================================


class CostEngine:
    """Разбор текста стоимости и выбор min/max.

    Все операции чистые и синхронные; общее состояние только конфигурация.
    """

    def __init__(
        self,
        config: CostEngineConfig | None = None,
        cost_supplier: CostSupplier | None = None,
        entity_cost_supplier: EntityCostSupplier | None = None,
        currency_formatter: CurrencyFormatter | None = None,
        escaper: Callable[[str], str] = html.escape,
        zero_label_provider: Callable[[], str] | None = None,
    ):
        self.config = config or CostEngineConfig()
        self.policy = self.config.policy()
        self.extractor = TokenExtractor(self.policy)
        self.formatter = DisplayFormatter(
            policy=self.policy,
            zero_label=self.config.zero_label,
            currency_formatter=currency_formatter,
            escaper=escaper,
            zero_label_provider=zero_label_provider,
        )
        self.cost_supplier = cost_supplier
        self.entity_cost_supplier = entity_cost_supplier

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def parse_cost_range(self, text: object, min_decimals: int | None = None) -> dict[str, str]:
        """
        Разбор одной строки стоимости в карту canonical key → исходный текст.

        Args:
            text: Текст стоимости ("10 - 20", "$5, $10", ...)
            min_decimals: Минимальная точность (опционально)

        Returns:
            Карта, упорядоченная по возрастанию стоимости; пустая, если чисел нет

        Examples:
            >>> CostEngine().parse_cost_range("9.5, 10.25")
            {'0950': '9.5', '1025': '10.25'}
        """
        tokens = self.extractor.extract(text)
        return sort_entries(self._normalize(tokens, min_decimals))

    def pool_costs(self, costs: Iterable[object]) -> dict[str, str]:
        """
        Пул записей из нескольких строк при общей точности и ширине ключа.

        Точность вычисляется по объединению токенов всех строк.
        При совпадении ключей побеждает последняя запись.
        """
        tokens = [token for cost in costs for token in self.extractor.extract(cost)]
        entries = self._normalize(tokens)
        logger.debug("Pooled %d tokens into %d cost entries", len(tokens), len(entries))
        return entries

    def _normalize(self, tokens: Sequence[RawToken], min_decimals: int | None = None) -> dict[str, str]:
        precision = resolve_precision(tokens, floor=min_decimals)
        width = resolve_key_width(tokens, precision)
        logger.debug("Resolved precision=%d width=%d for %d tokens", precision, width, len(tokens))
        return build_cost_entries(tokens, precision, width)

    def _entries(self, costs: object) -> Mapping[str, str]:
        if isinstance(costs, Mapping):
            return costs

        if costs is None:
            raw = self.cost_supplier.get_all_costs() if self.cost_supplier else ()
        elif isinstance(costs, str) or not isinstance(costs, Iterable):
            raw = (costs,)
        else:
            raw = costs

        return self.pool_costs(raw)

    # -------------------------------------------------------------------------
    # Extremes
    # -------------------------------------------------------------------------

    def select_extreme(self, costs: object, which: Extreme | str = Extreme.MAX) -> str:
        """
        Минимальная или максимальная стоимость.

        Args:
            costs: Одна строка, коллекция строк (пул), готовая карта записей
                или None (все стоимости из cost_supplier)
            which: Extreme.MIN / Extreme.MAX

        Returns:
            Исходный текст выбранного токена или NEUTRAL_ZERO для пустого пула
        """
        return aggregate(self._entries(costs), which, self.extractor.pattern)

    def get_minimum_cost(self, costs: object = None) -> str:
        return self.select_extreme(costs, Extreme.MIN)

    def get_maximum_cost(self, costs: object = None) -> str:
        return self.select_extreme(costs, Extreme.MAX)

    def build_cost_range(self, costs: object = None) -> CostRange | None:
        """Диапазон min/max пула; None, если в пуле нет ни одной стоимости."""
        entries = self._entries(costs)
        if not entries:
            return None

        return CostRange(
            minimum=aggregate(entries, Extreme.MIN, self.extractor.pattern),
            maximum=aggregate(entries, Extreme.MAX, self.extractor.pattern),
        )

    # -------------------------------------------------------------------------
    # Entities
    # -------------------------------------------------------------------------

    def get_entity_costs(self, entity: object) -> dict[str, str]:
        """
        Пул стоимостей сущности (пустые строки пропускаются).

        Returns:
            Карта canonical key → исходный текст; пустая для неизвестной сущности
        """
        if self.entity_cost_supplier is None:
            return {}

        costs = self.entity_cost_supplier.get_entity_costs(entity)
        if costs is None:
            return {}

        return self.pool_costs(cost for cost in costs if cost != "")

    def get_formatted_entity_cost(self, entity: object, with_currency: bool = False) -> str:
        """
        Отформатированная стоимость сущности: "10", "Free" или "5 - 20".

        Args:
            entity: Сущность (непрозрачна для ядра)
            with_currency: Добавлять символ валюты

        Returns:
            Текст для отображения; "" если стоимостей нет
        """
        costs_range = self.build_cost_range(self.get_entity_costs(entity))
        if costs_range is None:
            return ""

        minimum = self.format_display(costs_range.minimum, with_currency)
        maximum = self.format_display(costs_range.maximum, with_currency)

        if minimum == maximum:
            return minimum
        return minimum + self.formatter.escaper(self.config.range_separator) + maximum

    # -------------------------------------------------------------------------
    # Display & validation
    # -------------------------------------------------------------------------

    def format_display(self, value: object, with_currency: bool = False) -> str:
        """Текст стоимости для отображения (метка нуля, валюта, экранирование)."""
        return self.formatter.format(value, with_currency=with_currency)

    def is_valid_cost(self, text: object, allow_negative: bool = True) -> bool:
        return self.extractor.matches(text, allow_negative=allow_negative)
