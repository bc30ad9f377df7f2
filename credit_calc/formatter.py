"""Output helpers for the credit calculator.

This module renders a ``CalculationResult`` as plain text, JSON or CSV on
standard output. Monetary values are truncated to whole units for display
only; the engine never sees the truncated numbers.
"""

from __future__ import annotations

import csv
import json
import sys
from typing import Any, Dict, List

from .data_models import (
    GENERATE_SCHEDULE,
    SOLVE_PAYMENT,
    SOLVE_PERIODS,
    SOLVE_PRINCIPAL,
    CalculationResult,
)


def format_periods(periods: int) -> str:
    """Spell a number of months as years and months.

    Zero components are omitted, so 12 gives ``"1 year"``, 14 gives
    ``"1 year and 2 months"`` and 0 gives an empty string.
    """
    years, months = divmod(periods, 12)
    parts: List[str] = []
    if years > 1:
        parts.append(f"{years} years")
    elif years == 1:
        parts.append("1 year")
    if months > 1:
        parts.append(f"{months} months")
    elif months == 1:
        parts.append("1 month")
    return " and ".join(parts)


def print_text(result: CalculationResult) -> None:
    """Print the result in the classic human-readable form."""
    if result.operation == GENERATE_SCHEDULE:
        for entry in result.schedule:
            print(f"Month {entry.month}: payment is {int(entry.payment)}")
        print()
        print(f"Overpayment = {int(result.schedule.overpayment)}")
        return
    if result.operation == SOLVE_PERIODS:
        phrase = format_periods(result.periods)
        if phrase:
            print(f"It will take {phrase} to repay this loan!")
        else:
            print("This loan is already repaid!")
    elif result.operation == SOLVE_PRINCIPAL:
        print(f"Your loan principal = {int(result.principal)}!")
    elif result.operation == SOLVE_PAYMENT:
        print(f"Your annuity payment = {int(result.payment)}!")
    print(f"Overpayment = {int(result.overpayment)}")


def result_to_dict(result: CalculationResult) -> Dict[str, Any]:
    """Convert a result into a JSON-serialisable dictionary.

    For differentiated loans this consumes the schedule.
    """
    data: Dict[str, Any] = {
        "operation": result.operation,
        "principal": int(result.principal),
        "periods": result.periods,
    }
    if result.operation == GENERATE_SCHEDULE:
        data["schedule"] = [
            {"month": entry.month, "payment": int(entry.payment)} for entry in result.schedule
        ]
        data["overpayment"] = int(result.schedule.overpayment)
    else:
        data["payment"] = int(result.payment)
        data["overpayment"] = int(result.overpayment)
    return data


def print_json(result: CalculationResult) -> None:
    """Print the result as an indented JSON document."""
    print(json.dumps(result_to_dict(result), indent=2))


def print_csv(result: CalculationResult) -> None:
    """Print the result as CSV.

    Differentiated schedules produce one ``Month,Payment`` row per month
    followed by an ``Overpayment`` row; annuity results produce a single row
    with every value filled in.
    """
    writer = csv.writer(sys.stdout, lineterminator="\n")
    if result.operation == GENERATE_SCHEDULE:
        writer.writerow(["Month", "Payment"])
        for entry in result.schedule:
            writer.writerow([entry.month, int(entry.payment)])
        writer.writerow(["Overpayment", int(result.schedule.overpayment)])
        return
    writer.writerow(["Payment", "Principal", "Periods", "Overpayment"])
    writer.writerow(
        [int(result.payment), int(result.principal), result.periods, int(result.overpayment)]
    )
