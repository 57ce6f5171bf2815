"""
Errors raised by the psychrometric formulas.

All of them subclass ValueError: the inputs are bad, and retrying with the
same inputs fails the same way.
"""


class PsychrometricError(ValueError):
    """Base class for every error raised by a psychrometric formula."""


class InvalidValueError(PsychrometricError):
    """An input is structurally invalid, e.g. a non-positive vapor pressure."""


class OutOfRangeError(PsychrometricError):
    """An input is valid but outside the range supported by the correlation."""


class ConvergenceError(PsychrometricError):
    """An iterative inverse calculation did not converge within its bound."""
