"""Errors raised by the credit calculator.

Both error kinds derive from ``ValueError`` so callers that only care about
bad input can keep catching that.
"""


class CalculatorError(ValueError):
    """Base class for all calculator errors."""


class InvalidParameters(CalculatorError):
    """The supplied combination of parameters cannot be calculated."""

    def __init__(self, message: str = "Incorrect parameters") -> None:
        super().__init__(message)


class ComputationError(CalculatorError):
    """A formula has no meaningful result for the given inputs."""
