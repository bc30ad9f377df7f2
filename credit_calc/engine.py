"""Core calculation engine for the credit calculator.

This module implements the financial logic for both repayment schemes:

* annuity loans, where the monthly payment is constant. Given the interest
  rate and two of payment, principal and number of periods, the engine solves
  the annuity formula for the third value;
* differentiated loans, where the principal share is constant and the
  interest share shrinks with the balance, so each payment is lower than the
  one before.

Rounding directions are part of the contract: period counts and payments are
rounded up, principals are rounded down.
"""

from __future__ import annotations

import logging
from decimal import Decimal, Overflow
from typing import Iterator

from .data_models import (
    GENERATE_SCHEDULE,
    SOLVE_PAYMENT,
    SOLVE_PERIODS,
    SOLVE_PRINCIPAL,
    CalculationRequest,
    CalculationResult,
    ScheduleEntry,
)
from .exceptions import ComputationError, InvalidParameters
from .utils import ceil_decimal, floor_decimal, monthly_rate

logger = logging.getLogger(__name__)


def _growth_factor(rate: Decimal, periods: int) -> Decimal:
    """Return ``(1 + rate) ** periods``."""
    try:
        return (1 + rate) ** periods
    except Overflow as exc:
        raise ComputationError("Number of periods is too large") from exc


def solve_periods(payment: Decimal, principal: Decimal, interest: Decimal) -> int:
    """Return the number of months needed to repay ``principal``.

    The formula is:

        n = log(A / (A - i * P)) / log(1 + i)

    where ``A`` is the payment, ``P`` the principal and ``i`` the monthly
    rate. The result is rounded up. When the payment does not exceed the
    monthly interest the loan is never repaid and ``ComputationError`` is
    raised.
    """
    rate = monthly_rate(interest)
    if rate == 0:
        if payment == 0:
            raise ComputationError("Payment must be positive")
        return int(ceil_decimal(principal / payment))
    remainder = payment - rate * principal
    if remainder <= 0:
        raise ComputationError("Payment too small to cover interest")
    n = (payment / remainder).ln() / (1 + rate).ln()
    return int(ceil_decimal(n))


def solve_principal(payment: Decimal, periods: int, interest: Decimal) -> Decimal:
    """Return the principal that ``periods`` payments of ``payment`` repay.

        P = A * ((1 + i)^n - 1) / (i * (1 + i)^n)

    The result is rounded down. With a zero rate it is simply ``A * n``.
    """
    rate = monthly_rate(interest)
    if rate == 0:
        return floor_decimal(payment * periods)
    factor = _growth_factor(rate, periods)
    return floor_decimal(payment * (factor - 1) / (rate * factor))


def solve_payment(principal: Decimal, periods: int, interest: Decimal) -> Decimal:
    """Return the annuity (equal installment) monthly payment for a loan.

        A = P * i * (1 + i)^n / ((1 + i)^n - 1)

    The result is rounded up so the loan is repaid within ``periods``
    months. When the interest rate is zero, the payment is ``P / n``.
    """
    if periods <= 0:
        raise ComputationError("Number of periods must be positive")
    rate = monthly_rate(interest)
    if rate == 0:
        return ceil_decimal(principal / periods)
    factor = _growth_factor(rate, periods)
    return ceil_decimal(principal * rate * factor / (factor - 1))


def annuity_overpayment(payment: Decimal, periods: int, principal: Decimal) -> Decimal:
    """Return the total paid over the loan minus the principal."""
    return ceil_decimal(payment * periods) - principal


def differentiated_payments(
    principal: Decimal, interest: Decimal, periods: int
) -> Iterator[ScheduleEntry]:
    """Yield the payment due in each month of a differentiated loan.

    The principal share ``P / n`` is constant; the interest is charged on the
    balance left after the previous months' principal shares:

        D_m = P / n + i * (P - P * (m - 1) / n)

    Each payment is rounded up. Entries are produced in month order.
    """
    if periods <= 0:
        raise InvalidParameters()
    rate = monthly_rate(interest)
    share = principal / periods
    for month in range(1, periods + 1):
        due = share + rate * (principal - share * (month - 1))
        yield ScheduleEntry(month=month, payment=ceil_decimal(due))


class DifferentiatedSchedule:
    """A forward-only differentiated schedule that keeps a running total.

    Iterating the schedule yields ``ScheduleEntry`` objects one at a time and
    adds each payment to ``total``. The overpayment is known once every entry
    has been consumed.
    """

    def __init__(self, principal: Decimal, interest: Decimal, periods: int) -> None:
        if periods <= 0:
            raise InvalidParameters()
        self.principal = principal
        self.interest = interest
        self.periods = periods
        self.total = Decimal(0)
        self._started = False
        self._finished = False

    def __iter__(self) -> Iterator[ScheduleEntry]:
        if self._started:
            raise RuntimeError("Schedule has already been consumed")
        self._started = True
        return self._generate()

    def _generate(self) -> Iterator[ScheduleEntry]:
        for entry in differentiated_payments(self.principal, self.interest, self.periods):
            self.total += entry.payment
            yield entry
        self._finished = True

    @property
    def overpayment(self) -> Decimal:
        if not self._finished:
            raise RuntimeError("Overpayment is known only after the whole schedule is consumed")
        # total is already integral; the ceiling is kept for parity with the annuity figures
        return ceil_decimal(self.total - self.principal)


def calculate(request: CalculationRequest) -> CalculationResult:
    """Perform the calculation described by ``request``.

    For annuity operations the missing value is derived and the overpayment
    computed from the completed set of values. For differentiated loans the
    result carries a lazy ``DifferentiatedSchedule``.
    """
    operation = request.operation
    if operation == GENERATE_SCHEDULE:
        schedule = DifferentiatedSchedule(request.principal, request.interest, request.periods)
        logger.debug("Generating %d month differentiated schedule", request.periods)
        return CalculationResult(
            operation=operation,
            principal=request.principal,
            periods=request.periods,
            schedule=schedule,
        )

    payment = request.payment
    principal = request.principal
    periods = request.periods
    if operation == SOLVE_PERIODS:
        periods = solve_periods(payment, principal, request.interest)
    elif operation == SOLVE_PRINCIPAL:
        principal = solve_principal(payment, periods, request.interest)
    elif operation == SOLVE_PAYMENT:
        payment = solve_payment(principal, periods, request.interest)
    else:
        raise ValueError(f"Unknown operation: {operation}")
    logger.debug(
        "Solved %s: payment=%s principal=%s periods=%s", operation, payment, principal, periods
    )
    return CalculationResult(
        operation=operation,
        principal=principal,
        periods=periods,
        payment=payment,
        overpayment=annuity_overpayment(payment, periods, principal),
    )
