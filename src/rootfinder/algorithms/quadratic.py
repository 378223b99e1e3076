"""Closed-form solver for quadratic (and linear) equations.

Solves a·x² + b·x + c = 0 for real coefficients. A vanishing leading
coefficient collapses the problem to the linear equation b·x + c = 0.

Each distinct root is reported once: a double root appears a single time
in the result.

References:
- Press et al.: "Numerical Recipes" (3rd ed.), §5.6
"""

from __future__ import annotations

import logging
import math

from rootfinder.data.tolerances import is_negligible
from rootfinder.exceptions import check_finite

logger = logging.getLogger(__name__)

Root = complex | float
"""A root: ``complex`` in full mode, ``float`` in real-only mode."""


def as_root(x: float, real_only: bool) -> Root:
    """Wrap a real root for the requested output mode."""
    return float(x) if real_only else complex(x)


def solve_quadratic(
    a: float,
    b: float,
    c: float,
    *,
    real_only: bool = False,
) -> list[Root]:
    """Find the roots of a·x² + b·x + c = 0.

    Args:
        a: Quadratic coefficient.
        b: Linear coefficient.
        c: Constant term.
        real_only: Drop non-real roots and return plain floats.

    Returns:
        Zero to two roots. Empty when both ``a`` and ``b`` vanish, which
        covers the constant polynomial whether or not ``c`` is zero, and
        when ``real_only`` is set and the roots are a complex pair.

    Raises:
        InvalidCoefficientError: If any coefficient is NaN or infinite.

    Example:
        >>> solve_quadratic(1, 2, 5)
        [(-1+2j), (-1-2j)]
    """
    check_finite(a=a, b=b, c=c)

    if is_negligible(a):
        if is_negligible(b):
            logger.debug("quadratic: a and b vanish, no roots")
            return []
        logger.debug("quadratic: linear equation")
        return [as_root(-c / b, real_only)]

    D = b * b - 4 * a * c

    if is_negligible(D):
        logger.debug("quadratic: double root (D=%g)", D)
        return [as_root(-b / (2 * a), real_only)]

    if D > 0:
        logger.debug("quadratic: two real roots (D=%g)", D)
        sqrt_D = math.sqrt(D)
        x1 = (-b + sqrt_D) / (2 * a)
        x2 = (-b - sqrt_D) / (2 * a)
        return [as_root(x1, real_only), as_root(x2, real_only)]

    if real_only:
        logger.debug("quadratic: complex pair suppressed (D=%g)", D)
        return []

    logger.debug("quadratic: complex conjugate pair (D=%g)", D)
    re = -b / (2 * a)
    im = math.sqrt(-D) / (2 * a)
    return [complex(re, im), complex(re, -im)]


__all__ = [
    "Root",
    "as_root",
    "solve_quadratic",
]
