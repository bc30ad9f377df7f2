"""Classification of user parameters into a calculation request.

The classifier looks at which of payment, principal and periods were supplied
and decides what the calculator has to derive. It performs no arithmetic and
has no side effects; any combination that does not describe exactly one
calculation raises ``InvalidParameters``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Union

from .data_models import (
    ANNUITY,
    DIFFERENTIATED,
    GENERATE_SCHEDULE,
    SOLVE_PAYMENT,
    SOLVE_PERIODS,
    SOLVE_PRINCIPAL,
    CalculationRequest,
    LoanParameters,
)
from .exceptions import InvalidParameters

logger = logging.getLogger(__name__)


def _is_valid(value: Optional[Union[Decimal, int]]) -> bool:
    return value is not None and value >= 0


def _classify_annuity(params: LoanParameters) -> CalculationRequest:
    known = {
        SOLVE_PERIODS: params.periods,
        SOLVE_PRINCIPAL: params.principal,
        SOLVE_PAYMENT: params.payment,
    }
    missing = [name for name, value in known.items() if value is None]
    if len(missing) != 1:
        raise InvalidParameters()
    if not all(_is_valid(value) for name, value in known.items() if name not in missing):
        raise InvalidParameters()
    return CalculationRequest(
        operation=missing[0],
        interest=params.interest,
        payment=params.payment,
        principal=params.principal,
        periods=params.periods,
    )


def _classify_differentiated(params: LoanParameters) -> CalculationRequest:
    # the payment changes every month, so it can never be an input here
    if params.payment is not None:
        raise InvalidParameters()
    if not _is_valid(params.principal) or not _is_valid(params.periods):
        raise InvalidParameters()
    if params.periods == 0:
        raise InvalidParameters()
    return CalculationRequest(
        operation=GENERATE_SCHEDULE,
        interest=params.interest,
        principal=params.principal,
        periods=params.periods,
    )


def classify(params: LoanParameters) -> CalculationRequest:
    """Return the calculation described by ``params``.

    Raises
    ------
    InvalidParameters
        If the interest rate is missing or negative, the method is not
        recognised, or the present/absent fields do not select exactly one
        calculation.
    """
    if not _is_valid(params.interest):
        raise InvalidParameters()
    if params.method == ANNUITY:
        request = _classify_annuity(params)
    elif params.method == DIFFERENTIATED:
        request = _classify_differentiated(params)
    else:
        raise InvalidParameters()
    logger.debug("Classified %s loan as operation %r", params.method, request.operation)
    return request
