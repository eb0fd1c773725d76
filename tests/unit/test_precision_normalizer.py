"""
Тесты для Precision Resolver и Key Normalizer

Проверяемые инварианты:
1. Точность = max ширины дробной части, с учётом floor
2. Пустой набор токенов → floor или 0
3. Сохранение порядка: int(key_a) < int(key_b) ⇔ value_a < value_b
4. Ключ обратим в величину при известной точности
5. LogicError для токена с пустой целой частью
"""

import itertools
from decimal import Decimal

import pytest

from src.core.cost import (
    LogicError,
    TokenExtractor,
    build_cost_entries,
    normalize_token,
    resolve_key_width,
    resolve_precision,
)
from src.core.domain import RawToken


def _tokens(text: str) -> tuple[RawToken, ...]:
    return TokenExtractor().extract(text)


def _decimal(token: RawToken) -> Decimal:
    return Decimal(f"{token.sign}{token.integer_digits}.{token.fractional_digits or '0'}")


# =============================================================================
# ТЕСТЫ: Precision Resolver
# =============================================================================


class TestResolvePrecision:
    """resolve_precision"""

    def test_empty(self):
        assert resolve_precision([]) == 0

    def test_empty_with_floor(self):
        assert resolve_precision([], floor=3) == 3

    def test_widest_fraction(self):
        assert resolve_precision(_tokens("9.5, 10.25")) == 2

    def test_integers_only(self):
        assert resolve_precision(_tokens("10 - 20")) == 0

    def test_floor_below(self):
        assert resolve_precision(_tokens("9.5, 10.25"), floor=1) == 2

    def test_floor_above(self):
        assert resolve_precision(_tokens("9.5, 10.25"), floor=4) == 4

    def test_negative_floor(self):
        with pytest.raises(ValueError):
            resolve_precision([], floor=-1)


class TestResolveKeyWidth:
    """resolve_key_width"""

    def test_width(self):
        assert resolve_key_width(_tokens("9.5, 10.25"), 2) == 4

    def test_empty(self):
        assert resolve_key_width([], 2) == 0


# =============================================================================
# ТЕСТЫ: Key Normalizer
# =============================================================================


class TestNormalizeToken:
    """normalize_token"""

    def test_padding(self):
        assert normalize_token(_tokens("12.5")[0], 2) == "1250"

    def test_negative(self):
        assert normalize_token(_tokens("-12.5")[0], 2) == "-1250"

    def test_fixed_width(self):
        assert normalize_token(_tokens("9.5")[0], 2, width=4) == "0950"
        assert normalize_token(_tokens("-9.5")[0], 2, width=4) == "-0950"

    def test_integer(self):
        assert normalize_token(_tokens("10")[0], 0) == "10"
        assert normalize_token(_tokens("5")[0], 2) == "500"

    def test_negative_zero_unsigned(self):
        """"-0" и "0" дают один ключ"""
        assert normalize_token(_tokens("-0")[0], 0) == "0"
        assert normalize_token(_tokens("-0.00")[0], 2, width=4) == "0000"

    def test_empty_integer_digits(self):
        token = RawToken(sign="", integer_digits="", fractional_digits="5", text=".5")
        with pytest.raises(LogicError):
            normalize_token(token, 1)

    def test_fraction_wider_than_precision(self):
        """Усечение не применяется"""
        with pytest.raises(LogicError):
            normalize_token(_tokens("1.234")[0], 2)


class TestOrderPreservation:
    """Порядок ключей совпадает с порядком величин"""

    TEXT = "-10.5 -2 -0.25 0 0.5 3 10.25 100 99.99 -100"

    def test_pairwise(self):
        tokens = _tokens(self.TEXT)
        precision = resolve_precision(tokens)
        width = resolve_key_width(tokens, precision)

        for a, b in itertools.combinations(tokens, 2):
            key_a = int(normalize_token(a, precision, width))
            key_b = int(normalize_token(b, precision, width))
            assert (key_a < key_b) == (_decimal(a) < _decimal(b)), (a.text, b.text)
            assert (key_a == key_b) == (_decimal(a) == _decimal(b)), (a.text, b.text)

    def test_sorted_order(self):
        tokens = _tokens(self.TEXT)
        precision = resolve_precision(tokens)
        by_key = sorted(tokens, key=lambda t: int(normalize_token(t, precision)))
        by_value = sorted(tokens, key=_decimal)
        assert [t.text for t in by_key] == [t.text for t in by_value]

    def test_magnitude_round_trip(self):
        """Ключ / 10^P восстанавливает величину (но не исходное форматирование)"""
        tokens = _tokens(self.TEXT + " 7,5")
        precision = resolve_precision(tokens)
        for token in tokens:
            key = normalize_token(token, precision)
            assert Decimal(key).scaleb(-precision) == _decimal(token)


class TestBuildCostEntries:
    """build_cost_entries"""

    def test_entries(self):
        tokens = _tokens("9.5, 10.25")
        assert build_cost_entries(tokens, 2, 4) == {"0950": "9.5", "1025": "10.25"}

    def test_collapse_last_wins(self):
        """"5" и "5.00" при P=2 дают один ключ "500", побеждает последний"""
        tokens = _tokens("5 5.00")
        assert build_cost_entries(tokens, 2, 3) == {"500": "5.00"}

    def test_empty(self):
        assert build_cost_entries((), 0) == {}
