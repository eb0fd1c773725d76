"""
Contract Validation Module

Модуль для валидации JSON контрактов отчёта о стоимости.
"""

from .validators import (
    ContractValidator,
    CostRangeValidator,
    SchemaLoader,
    validate_cost_range,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CostRangeValidator",
    # Functions
    "validate_cost_range",
]
