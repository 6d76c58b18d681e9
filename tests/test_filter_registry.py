"""
Tests for the filter registry.
Validates built-in naming-case filters, custom registration and lookup errors.
"""

import pytest

from curlyparser.exceptions import FilterAlreadyRegisteredError, InvalidFilterError
from curlyparser.filters import BUILTIN_CASES, FilterRegistry


@pytest.fixture
def registry():
    """Fresh filter registry with the built-in naming cases."""
    return FilterRegistry()


class TestBuiltinFilters:
    """Test the naming-case filters available without registration."""

    def test_builtin_cases_are_valid(self, registry):
        for name in ("snake_case", "camel_case", "pascal_case", "dash_case",
                     "upper_snake_case", "upper_dash_case"):
            assert registry.is_valid(name)

    def test_snake_case(self, registry):
        assert registry.process("snake_case", "TwoPascalCase") == "two_pascal_case"

    def test_dash_case(self, registry):
        assert registry.process("dash_case", "one word case") == "one-word-case"

    def test_camel_case(self, registry):
        assert registry.process("camel_case", "UPPER-DASH-CASE") == "upperDashCase"

    def test_pascal_case(self, registry):
        assert registry.process("pascal_case", "big world") == "BigWorld"

    def test_upper_snake_case(self, registry):
        assert registry.process("upper_snake_case", "hello world") == "HELLO_WORLD"

    def test_train_case(self, registry):
        assert registry.process("train_case", "TwoPascalCase") == "Two-Pascal-Case"

    def test_word_case(self, registry):
        assert registry.process("word_case", "TwoPascalCase") == "two pascal case"

    def test_upper_word_case(self, registry):
        assert registry.process("upper_word_case", "two_pascal_case") == "TWO PASCAL CASE"

    def test_capital_word_case(self, registry):
        assert registry.process("capital_word_case", "two-pascal-case") == "Two Pascal Case"

    def test_sentence_case(self, registry):
        assert registry.process("sentence_case", "TwoPascalCase") == "Two pascal case"

    def test_word_cases_of_empty_value(self, registry):
        for name in ("train_case", "word_case", "upper_word_case", "capital_word_case", "sentence_case"):
            assert registry.process(name, "") == ""

    def test_all_naming_cases_are_builtin(self, registry):
        for name in ("snake_case", "upper_snake_case", "pascal_case", "camel_case",
                     "dash_case", "upper_dash_case", "train_case", "word_case",
                     "upper_word_case", "capital_word_case", "sentence_case"):
            assert name in registry.valid_filters()

    def test_valid_filters_start_with_builtins_only(self, registry):
        assert registry.valid_filters() == set(BUILTIN_CASES)
        assert registry.custom_filters() == set()


class TestCustomFilters:
    """Test runtime registration of filters."""

    def test_register_returns_function(self, registry):
        def shout(value):
            return value.upper() + "!"

        assert registry.register("shout", shout) is shout
        assert registry.is_valid("shout")
        assert registry.process("shout", "hey") == "HEY!"

    def test_decorator_registers_filter(self, registry):
        @registry.filter("reverse")
        def reverse(value):
            return value[::-1]

        assert registry.process("reverse", "abc") == "cba"
        assert "reverse" in registry.valid_filters()

    def test_second_registration_fails(self, registry):
        registry.register("twice", str.lower)

        with pytest.raises(FilterAlreadyRegisteredError) as exc_info:
            registry.register("twice", str.upper)

        assert exc_info.value.name == "twice"
        assert registry.process("twice", "AbC") == "abc"

    def test_builtin_name_cannot_be_registered(self, registry):
        with pytest.raises(FilterAlreadyRegisteredError):
            registry.register("snake_case", str.upper)

        assert registry.process("snake_case", "TwoWords") == "two_words"

    def test_unregister_custom_filter(self, registry):
        registry.register("gone", str.upper)

        assert registry.unregister("gone") is True
        assert not registry.is_valid("gone")
        assert registry.unregister("gone") is False

    def test_builtin_filter_cannot_be_unregistered(self, registry):
        assert registry.unregister("snake_case") is False
        assert registry.is_valid("snake_case")

    def test_registries_are_independent(self, registry):
        other = FilterRegistry()
        registry.register("only_here", str.upper)

        assert not other.is_valid("only_here")

    def test_custom_builtins(self):
        registry = FilterRegistry(builtin_cases={"upper": str.upper})

        assert registry.valid_filters() == {"upper"}
        assert registry.process("upper", "abc") == "ABC"
        with pytest.raises(FilterAlreadyRegisteredError):
            registry.register("upper", str.lower)


class TestInvalidFilter:
    """Test errors for unknown filters."""

    def test_unknown_filter_lists_valid_filters(self, registry):
        registry.register("custom_one", str.upper)

        with pytest.raises(InvalidFilterError) as exc_info:
            registry.process("no_such_filter", "value")

        error = exc_info.value
        assert error.name == "no_such_filter"
        assert "custom_one" in error.valid_filters
        assert "snake_case" in error.valid_filters
        assert "no_such_filter" in str(error)
        assert "custom_one" in str(error)
