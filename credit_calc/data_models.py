"""Data models for the credit calculator.

This module defines dataclasses representing the values that flow through a
single calculation: the parameters supplied on the command line, the request
produced by the classifier, individual entries of a differentiated payment
schedule and the final result handed to the formatter. Missing parameters are
represented by ``None`` rather than by a magic negative number.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .engine import DifferentiatedSchedule

ANNUITY = "annuity"
DIFFERENTIATED = "diff"
METHODS = (ANNUITY, DIFFERENTIATED)

SOLVE_PERIODS = "periods"
SOLVE_PRINCIPAL = "principal"
SOLVE_PAYMENT = "payment"
GENERATE_SCHEDULE = "schedule"


@dataclass(frozen=True)
class LoanParameters:
    """Parameters of a loan as supplied by the user.

    Any of the numeric fields may be ``None`` when the user did not provide
    it. The classifier decides whether the combination of present and absent
    fields describes a calculation that can be performed.

    Attributes
    ----------
    payment: Optional[Decimal]
        The fixed monthly payment (annuity mode only).
    principal: Optional[Decimal]
        The loan principal.
    periods: Optional[int]
        The number of monthly payments.
    interest: Optional[Decimal]
        The nominal annual interest rate in percent (e.g. ``Decimal("7.8")``).
    method: str
        ``"annuity"`` or ``"diff"``. Any other value is rejected.
    """

    payment: Optional[Decimal] = None
    principal: Optional[Decimal] = None
    periods: Optional[int] = None
    interest: Optional[Decimal] = None
    method: str = ""


@dataclass(frozen=True)
class CalculationRequest:
    """A validated calculation resolved from ``LoanParameters``.

    ``operation`` names the value to derive: one of ``"periods"``,
    ``"principal"`` or ``"payment"`` for annuity loans, or ``"schedule"`` for
    differentiated loans. The field named by ``operation`` is always ``None``
    (and ``payment`` is ``None`` for schedules); every other field is set.
    """

    operation: str
    interest: Decimal
    payment: Optional[Decimal] = None
    principal: Optional[Decimal] = None
    periods: Optional[int] = None


@dataclass(frozen=True)
class ScheduleEntry:
    """One month of a differentiated payment schedule."""

    month: int
    payment: Decimal  # integral, rounded up


@dataclass
class CalculationResult:
    """The outcome of a calculation.

    For annuity operations ``payment``, ``principal`` and ``periods`` are all
    populated (the derived one included) and ``overpayment`` is known
    immediately. For differentiated loans ``schedule`` holds the lazily
    generated payments; the overpayment is read from the schedule once it has
    been consumed.
    """

    operation: str
    principal: Decimal
    periods: int
    payment: Optional[Decimal] = None
    overpayment: Optional[Decimal] = None
    schedule: Optional["DifferentiatedSchedule"] = None
