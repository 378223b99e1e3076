"""Polynomial evaluation and root verification.

Substitutes candidate roots back into a polynomial and reports the residual
|p(x)|. This is the check every returned root is expected to pass.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from rootfinder.algorithms.quadratic import Root
from rootfinder.data.tolerances import ACCEPTANCE_TOL


@dataclass(frozen=True, slots=True)
class RootCheck:
    """Result of substituting one root into its polynomial."""

    root: Root
    """Candidate root."""

    residual: float
    """Magnitude |p(root)|."""

    passed: bool
    """True if residual < tolerance."""


def evaluate_polynomial(coefficients: Sequence[float], x: Root) -> Root:
    """Evaluate a polynomial at ``x`` using Horner's scheme.

    Args:
        coefficients: Coefficients, highest degree first (a, b, c, ...).
        x: Point of evaluation, real or complex.

    Returns:
        p(x), complex if ``x`` is complex.

    Example:
        >>> evaluate_polynomial([1, -6, 11, -6], 2.0)
        0.0
    """
    value = np.polyval(np.asarray(coefficients, dtype=np.float64), x)
    if isinstance(x, complex):
        return complex(value)
    return float(np.real(value))


def verify_roots(
    coefficients: Sequence[float],
    roots: Sequence[Root],
    *,
    tolerance: float = ACCEPTANCE_TOL,
) -> list[RootCheck]:
    """Check that every root nearly zeroes the polynomial.

    Args:
        coefficients: Coefficients, highest degree first.
        roots: Candidate roots (as returned by the solvers).
        tolerance: Maximum accepted residual magnitude.

    Returns:
        One RootCheck per root, in input order.
    """
    checks = []
    for root in roots:
        residual = float(abs(evaluate_polynomial(coefficients, root)))
        checks.append(RootCheck(root=root, residual=residual, passed=residual < tolerance))
    return checks


__all__ = [
    "RootCheck",
    "evaluate_polynomial",
    "verify_roots",
]
