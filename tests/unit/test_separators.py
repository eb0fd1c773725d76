"""
Тесты для Separator Policy

Проверяет:
1. Набор разделителей по умолчанию
2. ConfigError при невалидной конфигурации
3. Расширение набора и удаление дубликатов
4. Построение character class и удаление разделителей
"""

import dataclasses
import re

import pytest

from src.core.cost import DEFAULT_SEPARATORS, ConfigError, SeparatorPolicy


class TestSeparatorPolicyDefaults:
    """Набор по умолчанию"""

    def test_default_separators(self):
        """По умолчанию ',' и '.' в этом порядке"""
        assert SeparatorPolicy().separators() == (",", ".")
        assert DEFAULT_SEPARATORS == (",", ".")

    def test_policy_immutable(self):
        """Политика frozen"""
        policy = SeparatorPolicy()
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.chars = (";",)  # type: ignore


class TestSeparatorPolicyValidation:
    """ConfigError при создании"""

    def test_empty_rejected(self):
        with pytest.raises(ConfigError):
            SeparatorPolicy(())

    def test_multi_character_rejected(self):
        with pytest.raises(ConfigError, match="single character"):
            SeparatorPolicy((",", ".."))

    def test_empty_string_entry_rejected(self):
        with pytest.raises(ConfigError):
            SeparatorPolicy(("",))

    def test_non_string_entry_rejected(self):
        with pytest.raises(ConfigError):
            SeparatorPolicy((",", 5))  # type: ignore

    def test_bare_string_rejected(self):
        """Строка ",." не трактуется как набор символов"""
        with pytest.raises(ConfigError):
            SeparatorPolicy(",.")  # type: ignore

    def test_non_iterable_rejected(self):
        with pytest.raises(ConfigError):
            SeparatorPolicy(None)  # type: ignore

    def test_list_accepted(self):
        assert SeparatorPolicy([",", "."]).separators() == (",", ".")  # type: ignore


class TestSeparatorPolicyExtension:
    """Расширение набора"""

    def test_with_extra_appends(self):
        policy = SeparatorPolicy().with_extra("'")
        assert policy.separators() == (",", ".", "'")

    def test_with_extra_keeps_original(self):
        base = SeparatorPolicy()
        base.with_extra("'")
        assert base.separators() == (",", ".")

    def test_with_extra_invalid(self):
        with pytest.raises(ConfigError):
            SeparatorPolicy().with_extra("ab")

    def test_duplicates_dropped(self):
        """Дубликаты удаляются, порядок первого вхождения сохраняется"""
        assert SeparatorPolicy((".", ",", ".")).separators() == (".", ",")
        assert SeparatorPolicy().with_extra(",").separators() == (",", ".")


class TestSeparatorPolicyHelpers:
    """character_class и strip"""

    def test_character_class_escaped(self):
        """Спецсимволы regex экранируются"""
        policy = SeparatorPolicy((".", "]", "^", "-"))
        char_class = re.compile(policy.character_class())
        for sep in (".", "]", "^", "-"):
            assert char_class.fullmatch(sep)
        assert char_class.fullmatch("x") is None

    def test_strip_removes_all(self):
        assert SeparatorPolicy().strip("1.500,00") == "150000"
        assert SeparatorPolicy().strip("Free") == "Free"
