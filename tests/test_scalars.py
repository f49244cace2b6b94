"""Unit tests for scalar parsers."""

import math

import pytest

from bureau_normalizer.parsing.scalars import is_present, parse_monetary_value, parse_quantity


class TestParseMonetaryValue:
    """Tests for parse_monetary_value."""

    def test_thousands_and_decimal(self) -> None:
        """Dots are thousand separators, comma is the decimal mark."""
        assert parse_monetary_value("1.234.567,89") == 1234567.89
        assert parse_monetary_value("1.234,56") == 1234.56

    def test_no_separators(self) -> None:
        assert parse_monetary_value("150") == 150.0
        assert parse_monetary_value("50,50") == 50.5

    def test_none_is_zero(self) -> None:
        """Absent monetary field is safe zero."""
        assert parse_monetary_value(None) == 0

    def test_empty_string_is_zero(self) -> None:
        assert parse_monetary_value("") == 0

    @pytest.mark.parametrize("value", [100, 12.5, ["1,00"], {"VALOR": "1,00"}])
    def test_non_string_is_zero(self, value) -> None:
        """Only strings are parsed; numbers and containers yield 0."""
        assert parse_monetary_value(value) == 0

    def test_unparsable_is_zero(self) -> None:
        """Garbage after locale normalization resolves to 0, not NaN."""
        result = parse_monetary_value("N/A")
        assert result == 0
        assert not math.isnan(result)

    def test_leading_numeric_prefix(self) -> None:
        """Trailing text after the number is ignored."""
        assert parse_monetary_value("1.500,00 BRL") == 1500.0
        assert parse_monetary_value("  -20,5") == -20.5

    def test_only_first_comma_replaced(self) -> None:
        assert parse_monetary_value("1,2,3") == 1.2


class TestParseQuantity:
    """Tests for parse_quantity."""

    def test_numeric_string(self) -> None:
        assert parse_quantity("3") == 3
        assert parse_quantity(" 12") == 12

    def test_leading_integer_prefix(self) -> None:
        assert parse_quantity("3.9") == 3
        assert parse_quantity("7 ocorrencias") == 7

    def test_absent_or_non_numeric(self) -> None:
        """Absent or non-numeric quantities default to 0."""
        assert parse_quantity(None) == 0
        assert parse_quantity("") == 0
        assert parse_quantity("abc") == 0
        assert parse_quantity(True) == 0
        assert parse_quantity({"TOTAL": "1"}) == 0

    def test_numbers_pass_through(self) -> None:
        assert parse_quantity(5) == 5
        assert parse_quantity(5.8) == 5
        assert parse_quantity(float("nan")) == 0


class TestIsPresent:
    """Tests for is_present."""

    @pytest.mark.parametrize("value", [None, False, 0, 0.0, "", float("nan")])
    def test_absent_values(self, value) -> None:
        assert is_present(value) is False

    @pytest.mark.parametrize("value", ["-", "0", 1, -1.5, [], {}, True])
    def test_present_values(self, value) -> None:
        """Empty containers and the '-' placeholder are present at this level."""
        assert is_present(value) is True
