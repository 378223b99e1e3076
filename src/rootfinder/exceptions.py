"""Exception classes for the root finders."""

import math


class RootFinderError(Exception):
    """Base exception for root finding errors."""


class InvalidCoefficientError(RootFinderError, ValueError):
    """Raised when a coefficient is NaN or infinite."""

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Coefficient '{name}' must be a finite real number, got {value!r}")


def check_finite(**coefficients: float) -> None:
    """Raise InvalidCoefficientError for the first non-finite coefficient."""
    for name, value in coefficients.items():
        if not math.isfinite(value):
            raise InvalidCoefficientError(name, value)
