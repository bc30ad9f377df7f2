"""Command‑line interface for the credit calculator.

This module uses the ``click`` library to implement the ``credit-calc``
command. Given the interest rate and any two of payment, principal and number
of periods, it derives the third value for an annuity loan; given principal,
interest rate and periods it prints the monthly payments of a differentiated
loan. Invalid combinations print ``Incorrect parameters`` and exit with
status 1.
"""

from __future__ import annotations

import logging
from typing import Optional

import click

from .classifier import classify
from .data_models import LoanParameters
from .engine import calculate
from .exceptions import CalculatorError
from .formatter import print_csv, print_json, print_text
from .utils import decimal_from_str, parse_amount

logger = logging.getLogger(__name__)

RENDERERS = {
    "text": print_text,
    "json": print_json,
    "csv": print_csv,
}


class ClickEchoHandler(logging.Handler):
    """Logging handler writing records to stderr through ``click.echo``.

    The stream is looked up on every record, so output follows whatever
    stderr click is currently bound to.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool) -> None:
    """Route the package's log records to stderr.

    Only warnings are shown unless ``verbose`` is set, in which case debug
    records describing each calculation step are shown too.
    """
    package_logger = logging.getLogger("credit_calc")
    if not any(isinstance(h, ClickEchoHandler) for h in package_logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)
        package_logger.propagate = False
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _parse_optional_amount(value: Optional[str], name: str):
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint=f"'--{name}'")


def _parse_optional_rate(value: Optional[float]):
    if value is None:
        return None
    try:
        return decimal_from_str(str(value))
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="'--interest'")


def build_parameters_from_options(
    payment: Optional[str],
    principal: Optional[str],
    periods: Optional[int],
    interest: Optional[float],
    loan_type: str,
) -> LoanParameters:
    """Convert raw option values into an immutable ``LoanParameters``."""
    return LoanParameters(
        payment=_parse_optional_amount(payment, "payment"),
        principal=_parse_optional_amount(principal, "principal"),
        periods=periods,
        interest=_parse_optional_rate(interest),
        method=loan_type,
    )


@click.command()
@click.option("--payment", "payment", help="The fixed monthly payment (annuity only)")
@click.option("--principal", "principal", help="The loan principal")
@click.option("--periods", "periods", type=int, help="The number of months needed to repay the loan")
@click.option("--interest", "interest", type=float, help="The annual interest rate (percent)")
@click.option("--type", "loan_type", default="", help='The type of payment: "annuity" or "diff"')
@click.option(
    "--format",
    "output_format",
    type=click.Choice(sorted(RENDERERS)),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log calculation steps to stderr")
@click.pass_context
def cli(
    ctx: click.Context,
    payment: Optional[str],
    principal: Optional[str],
    periods: Optional[int],
    interest: Optional[float],
    loan_type: str,
    output_format: str,
    verbose: bool,
) -> None:
    """A command‑line calculator for annuity and differentiated loans.

    Examples:

        credit-calc --type annuity --principal 1000000 --periods 60 --interest 10

        credit-calc --type diff --principal 500k --periods 8 --interest 7.8
    """
    configure_logging(verbose)
    params = build_parameters_from_options(payment, principal, periods, interest, loan_type)
    try:
        result = calculate(classify(params))
        RENDERERS[output_format](result)
    except CalculatorError as exc:
        logger.debug("Calculation failed: %r", exc)
        click.echo(str(exc))
        ctx.exit(1)


if __name__ == "__main__":
    cli()
