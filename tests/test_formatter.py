"""Tests for rendering calculation results."""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from credit_calc.data_models import (
    GENERATE_SCHEDULE,
    SOLVE_PAYMENT,
    SOLVE_PERIODS,
    SOLVE_PRINCIPAL,
    CalculationResult,
)
from credit_calc.engine import DifferentiatedSchedule
from credit_calc.formatter import format_periods, print_csv, print_json, print_text


@pytest.mark.parametrize(
    "periods,expected",
    [
        (0, ""),
        (1, "1 month"),
        (11, "11 months"),
        (12, "1 year"),
        (13, "1 year and 1 month"),
        (14, "1 year and 2 months"),
        (24, "2 years"),
        (25, "2 years and 1 month"),
        (131, "10 years and 11 months"),
    ],
)
def test_format_periods(periods, expected):
    assert format_periods(periods) == expected


def annuity_result(operation: str, **overrides) -> CalculationResult:
    values = dict(
        operation=operation,
        principal=Decimal("1000000"),
        periods=60,
        payment=Decimal("21248"),
        overpayment=Decimal("274880"),
    )
    values.update(overrides)
    return CalculationResult(**values)


def diff_result() -> CalculationResult:
    return CalculationResult(
        operation=GENERATE_SCHEDULE,
        principal=Decimal("500000"),
        periods=8,
        schedule=DifferentiatedSchedule(Decimal("500000"), Decimal("7.8"), 8),
    )


class TestPrintText:
    def test_payment(self, capsys):
        print_text(annuity_result(SOLVE_PAYMENT))
        assert capsys.readouterr().out == "Your annuity payment = 21248!\nOverpayment = 274880\n"

    def test_principal_is_truncated(self, capsys):
        print_text(annuity_result(SOLVE_PRINCIPAL, principal=Decimal("800018.9")))
        assert capsys.readouterr().out.startswith("Your loan principal = 800018!\n")

    def test_periods(self, capsys):
        print_text(annuity_result(SOLVE_PERIODS, periods=24))
        assert capsys.readouterr().out.startswith("It will take 2 years to repay this loan!\n")

    def test_zero_periods(self, capsys):
        print_text(annuity_result(SOLVE_PERIODS, periods=0, overpayment=Decimal("0")))
        assert capsys.readouterr().out == "This loan is already repaid!\nOverpayment = 0\n"

    def test_overpayment_is_truncated(self, capsys):
        print_text(annuity_result(SOLVE_PAYMENT, overpayment=Decimal("274879.5")))
        assert capsys.readouterr().out.endswith("Overpayment = 274879\n")

    def test_schedule(self, capsys):
        print_text(diff_result())
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Month 1: payment is 65750"
        assert lines[7] == "Month 8: payment is 62907"
        assert lines[8] == ""
        assert lines[9] == "Overpayment = 14628"
        assert len(lines) == 10


class TestPrintJson:
    def test_annuity(self, capsys):
        print_json(annuity_result(SOLVE_PAYMENT))
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "operation": "payment",
            "principal": 1000000,
            "periods": 60,
            "payment": 21248,
            "overpayment": 274880,
        }

    def test_schedule(self, capsys):
        print_json(diff_result())
        data = json.loads(capsys.readouterr().out)
        assert data["operation"] == "schedule"
        assert len(data["schedule"]) == 8
        assert data["schedule"][0] == {"month": 1, "payment": 65750}
        assert data["overpayment"] == 14628


class TestPrintCsv:
    def test_annuity(self, capsys):
        print_csv(annuity_result(SOLVE_PAYMENT))
        assert capsys.readouterr().out == (
            "Payment,Principal,Periods,Overpayment\n21248,1000000,60,274880\n"
        )

    def test_schedule(self, capsys):
        print_csv(diff_result())
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Month,Payment"
        assert lines[1] == "1,65750"
        assert lines[8] == "8,62907"
        assert lines[9] == "Overpayment,14628"
        assert len(lines) == 10
