"""
Cost modules — разбор и ранжирование стоимостей

Извлечение числовых токенов из произвольного текста стоимости,
вычисление общей точности, построение canonical keys и выбор min/max.
"""

# Separator Policy
from src.core.cost.separators import (
    DEFAULT_SEPARATORS,
    ConfigError,
    SeparatorPolicy,
)

# Token Extractor
from src.core.cost.extractor import (
    TokenExtractor,
    build_token_pattern,
    is_valid_cost,
)

# Precision Resolver
from src.core.cost.precision import (
    resolve_key_width,
    resolve_precision,
)

# Key Normalizer
from src.core.cost.normalizer import (
    LogicError,
    build_cost_entries,
    normalize_token,
)

# Range Aggregator
from src.core.cost.aggregator import (
    NEUTRAL_ZERO,
    aggregate,
    key_value,
    sort_entries,
)

# Display Formatter
from src.core.cost.formatter import (
    DEFAULT_ZERO_LABEL,
    CurrencyFormatter,
    DisplayFormatter,
)

# Engine
from src.core.cost.engine import (
    CostEngine,
    CostEngineConfig,
    CostSupplier,
    EntityCostSupplier,
)

__all__ = [
    # Separator Policy
    "DEFAULT_SEPARATORS",
    "ConfigError",
    "SeparatorPolicy",
    # Token Extractor
    "TokenExtractor",
    "build_token_pattern",
    "is_valid_cost",
    # Precision Resolver
    "resolve_key_width",
    "resolve_precision",
    # Key Normalizer
    "LogicError",
    "build_cost_entries",
    "normalize_token",
    # Range Aggregator
    "NEUTRAL_ZERO",
    "aggregate",
    "key_value",
    "sort_entries",
    # Display Formatter
    "DEFAULT_ZERO_LABEL",
    "CurrencyFormatter",
    "DisplayFormatter",
    # Engine
    "CostEngine",
    "CostEngineConfig",
    "CostSupplier",
    "EntityCostSupplier",
]
