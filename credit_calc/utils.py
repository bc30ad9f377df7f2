"""Utility functions for the credit calculator.

This module provides helpers for parsing user input into ``Decimal`` values
and for rounding intermediate results in a fixed direction. All arithmetic in
the calculator is done with ``Decimal`` so that rates such as 7.8 % are
represented exactly.
"""

from __future__ import annotations

from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, getcontext

getcontext().prec = 28  # increase decimal precision to avoid rounding errors

# largest accepted magnitude of a user-supplied number: below 10**16
MAX_EXPONENT = 15


def _check_range(result: Decimal, value: str) -> Decimal:
    if result and result.adjusted() > MAX_EXPONENT:
        raise ValueError(f"Numeric value out of range: {value}")
    return result


def decimal_from_str(value: str) -> Decimal:
    """Convert a numeric string into a ``Decimal``.

    The function strips any commas and handles both integer and float-like
    strings. It raises ``ValueError`` if conversion fails or if the value is
    not finite or has more than ``MAX_EXPONENT + 1`` integer digits.
    """
    try:
        cleaned = value.replace(",", "")
        result = Decimal(cleaned)
    except Exception as exc:
        raise ValueError(f"Invalid numeric value: {value}") from exc
    if not result.is_finite():
        raise ValueError(f"Invalid numeric value: {value}")
    return _check_range(result, value)


def parse_amount(value: str) -> Decimal:
    """Parse a monetary amount with optional suffixes.

    Accepts plain numbers ("500000"), thousands separators ("500,000") and
    shorthand with ``k``/``m`` suffixes (e.g. "500k" meaning 500 000).
    """
    value = value.strip().lower()
    factor = Decimal(1)
    if value.endswith("k"):
        factor = Decimal(1_000)
        value = value[:-1]
    elif value.endswith("m"):
        factor = Decimal(1_000_000)
        value = value[:-1]
    return _check_range(decimal_from_str(value) * factor, value)


def ceil_decimal(value: Decimal) -> Decimal:
    """Round ``value`` up to the nearest integer, keeping it a ``Decimal``."""
    return value.to_integral_value(rounding=ROUND_CEILING)


def floor_decimal(value: Decimal) -> Decimal:
    """Round ``value`` down to the nearest integer, keeping it a ``Decimal``."""
    return value.to_integral_value(rounding=ROUND_FLOOR)


def monthly_rate(interest: Decimal) -> Decimal:
    """Convert a nominal annual rate in percent to a monthly fraction."""
    return interest / Decimal(1200)
