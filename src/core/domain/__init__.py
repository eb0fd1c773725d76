"""
Domain models and value objects.

Contains cost parsing value objects: RawToken, CostEntry, Extreme, CostRange.
"""

from src.core.domain.cost import CostEntry, CostRange, Extreme, RawToken

__all__ = [
    "CostEntry",
    "CostRange",
    "Extreme",
    "RawToken",
]
