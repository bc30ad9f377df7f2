"""Tests for numeric parsing and rounding helpers."""

from __future__ import annotations

from decimal import Decimal

import pytest

from credit_calc.utils import ceil_decimal, decimal_from_str, floor_decimal, parse_amount


class TestDecimalFromStr:
    def test_thousands_separators(self):
        assert decimal_from_str("1,000,000") == Decimal("1000000")

    def test_largest_accepted_value(self):
        assert decimal_from_str("9999999999999999") == Decimal("9999999999999999")

    @pytest.mark.parametrize("value", ["1e16", "1e999999", "-1e20"])
    def test_out_of_range(self, value):
        with pytest.raises(ValueError, match="out of range"):
            decimal_from_str(value)

    @pytest.mark.parametrize("value", ["abc", "nan", "inf", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="Invalid numeric value"):
            decimal_from_str(value)


class TestParseAmount:
    def test_suffixes(self):
        assert parse_amount("500k") == Decimal("500000")
        assert parse_amount(" 1.5M ") == Decimal("1500000")

    def test_suffix_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_amount("100000000000000m")


def test_directed_rounding():
    assert ceil_decimal(Decimal("21247.04")) == Decimal("21248")
    assert floor_decimal(Decimal("800018.64")) == Decimal("800018")
    assert ceil_decimal(Decimal("65750")) == Decimal("65750")
