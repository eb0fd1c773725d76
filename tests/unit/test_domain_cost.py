"""
Тесты для доменных моделей стоимости: RawToken, CostEntry, Extreme, CostRange

Проверяет:
1. Свойства токена
2. Immutability (frozen)
3. Валидацию Pydantic модели CostRange
4. Сериализацию CostRange
"""

import dataclasses
import json

import pytest
from pydantic import ValidationError

from src.core.domain import CostEntry, CostRange, Extreme, RawToken


class TestRawToken:
    """RawToken"""

    def test_properties(self):
        token = RawToken(sign="-", integer_digits="12", fractional_digits="50", text="-12,50")
        assert token.is_negative
        assert token.fraction_width == 2

    def test_unsigned(self):
        token = RawToken(sign="", integer_digits="7", fractional_digits="", text="7")
        assert not token.is_negative
        assert token.fraction_width == 0

    def test_immutable(self):
        token = RawToken(sign="", integer_digits="7", fractional_digits="", text="7")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "8"  # type: ignore


class TestCostEntry:
    """CostEntry"""

    def test_unpacking(self):
        key, value = CostEntry("1025", "10.25")
        assert key == "1025"
        assert value == "10.25"


class TestExtreme:
    """Extreme"""

    def test_values(self):
        assert Extreme("min") is Extreme.MIN
        assert Extreme("max") is Extreme.MAX

    def test_str_enum(self):
        assert Extreme.MIN == "min"

    def test_invalid(self):
        with pytest.raises(ValueError):
            Extreme("avg")


class TestCostRange:
    """CostRange"""

    def test_creation(self):
        cost_range = CostRange(minimum="5", maximum="10.25")
        assert cost_range.minimum == "5"
        assert cost_range.maximum == "10.25"
        assert not cost_range.is_single()

    def test_single(self):
        assert CostRange(minimum="0", maximum="0").is_single()

    def test_immutable(self):
        cost_range = CostRange(minimum="5", maximum="10")
        with pytest.raises(ValidationError):
            cost_range.minimum = "1"  # type: ignore

    def test_empty_rejected(self):
        with pytest.raises(ValidationError):
            CostRange(minimum="", maximum="10")

    def test_missing_field(self):
        with pytest.raises(ValidationError):
            CostRange(minimum="5")  # type: ignore

    def test_json_round_trip(self):
        cost_range = CostRange(minimum="5", maximum="10")
        data = json.loads(cost_range.model_dump_json())
        assert data == {"minimum": "5", "maximum": "10"}
        assert CostRange.model_validate(data) == cost_range
