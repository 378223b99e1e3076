"""Closed-form solver for cubic equations.

Solves a·x³ + b·x² + c·x + d = 0 for real coefficients by reduction to the
depressed cubic t³ + p·t + q = 0 with x = t - b/(3a).

Branch selection on Δ = (q/2)² + (p/3)³:
- Δ ≈ 0, q ≈ 0: triple real root
- Δ ≈ 0: one single and one double real root
- Δ > 0: Cardano with real cube roots, one real root and a conjugate pair
- Δ < 0: trigonometric form, three distinct real roots

The trigonometric branch avoids the complex cube roots that make the
general Cardano formula fragile when Δ is close to zero.

References:
- Nickalls: "A new approach to solving the cubic", Math. Gazette 77 (1993)
- Press et al.: "Numerical Recipes" (3rd ed.), §5.6
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from rootfinder.algorithms.quadratic import Root, as_root, solve_quadratic
from rootfinder.data.tolerances import is_negligible
from rootfinder.exceptions import InvalidCoefficientError, check_finite

logger = logging.getLogger(__name__)

_SQRT3_HALF = math.sqrt(3) / 2


class CubicCase(Enum):
    """Root shapes of a cubic with a non-zero leading coefficient."""

    TRIPLE_ROOT = "triple_root"
    SINGLE_AND_DOUBLE = "single_and_double"
    ONE_REAL_TWO_COMPLEX = "one_real_two_complex"
    THREE_DISTINCT_REAL = "three_distinct_real"


@dataclass(frozen=True, slots=True)
class DepressedCubic:
    """Depressed form t³ + p·t + q = 0 of a normalized cubic."""

    shift: float
    """Offset such that x = t - shift (b/(3a) of the original cubic)."""

    p: float
    """Linear coefficient of the depressed cubic."""

    q: float
    """Constant term of the depressed cubic."""

    discriminant: float
    """Δ = (q/2)² + (p/3)³."""

    case: CubicCase
    """Root shape implied by Δ and q."""


def depress_cubic(a: float, b: float, c: float, d: float) -> DepressedCubic:
    """Normalize and depress a cubic, then classify its roots.

    Args:
        a: Cubic coefficient (must be non-zero).
        b: Quadratic coefficient.
        c: Linear coefficient.
        d: Constant term.

    Returns:
        DepressedCubic with p, q, Δ and the root shape.

    Raises:
        InvalidCoefficientError: If ``a`` is zero or any coefficient is
            NaN or infinite.
    """
    check_finite(a=a, b=b, c=c, d=d)
    if a == 0:
        raise InvalidCoefficientError("a", a)

    # Leading coefficient becomes 1: x³ + B·x² + C·x + E = 0
    B = b / a
    C = c / a
    E = d / a

    p = C - B * B / 3
    q = 2 * B * B * B / 27 - B * C / 3 + E
    # Multiply, not **: overflow must saturate to inf
    half_q = q / 2
    third_p = p / 3
    delta = half_q * half_q + third_p * third_p * third_p

    if is_negligible(delta):
        case = CubicCase.TRIPLE_ROOT if is_negligible(q) else CubicCase.SINGLE_AND_DOUBLE
    elif delta > 0:
        case = CubicCase.ONE_REAL_TWO_COMPLEX
    else:
        case = CubicCase.THREE_DISTINCT_REAL

    return DepressedCubic(shift=B / 3, p=p, q=q, discriminant=delta, case=case)


def solve_cubic(
    a: float,
    b: float,
    c: float,
    d: float,
    *,
    real_only: bool = False,
) -> list[Root]:
    """Find the roots of a·x³ + b·x² + c·x + d = 0.

    A zero cubic coefficient hands the whole problem to the quadratic
    solver. A zero constant term factors out x = 0 and solves the
    remaining quadratic.

    Args:
        a: Cubic coefficient.
        b: Quadratic coefficient.
        c: Linear coefficient.
        d: Constant term.
        real_only: Drop non-real roots and return plain floats.

    Returns:
        Zero to three roots, each distinct value once. Order is fixed per
        branch: single before double root; real root before the conjugate
        pair (positive imaginary part first); trigonometric roots by k.

    Raises:
        InvalidCoefficientError: If any coefficient is NaN or infinite.

    Example:
        >>> solve_cubic(1, -12, 48, -64, real_only=True)
        [4.0]
    """
    check_finite(a=a, b=b, c=c, d=d)

    if a == 0:
        logger.debug("cubic: a == 0, delegating to quadratic")
        return solve_quadratic(b, c, d, real_only=real_only)

    if d == 0:
        logger.debug("cubic: d == 0, factoring out x = 0")
        return [as_root(0.0, real_only), *solve_quadratic(a, b, c, real_only=real_only)]

    cubic = depress_cubic(a, b, c, d)
    shift, p, q = cubic.shift, cubic.p, cubic.q
    logger.debug(
        "cubic: %s (p=%g, q=%g, delta=%g)", cubic.case.value, p, q, cubic.discriminant
    )

    if cubic.case is CubicCase.TRIPLE_ROOT:
        return [as_root(-shift, real_only)]

    if cubic.case is CubicCase.SINGLE_AND_DOUBLE:
        u = float(np.cbrt(-q / 2))
        single = 2 * u - shift
        double = -u - shift
        return [as_root(single, real_only), as_root(double, real_only)]

    if cubic.case is CubicCase.ONE_REAL_TWO_COMPLEX:
        sqrt_delta = math.sqrt(cubic.discriminant)
        # Real (sign-preserving) cube roots, not principal complex ones
        u = float(np.cbrt(-q / 2 + sqrt_delta))
        v = float(np.cbrt(-q / 2 - sqrt_delta))
        real_root = u + v - shift

        if real_only:
            return [as_root(real_root, real_only)]

        re = -(u + v) / 2 - shift
        im = _SQRT3_HALF * (u - v)
        return [complex(real_root), complex(re, im), complex(re, -im)]

    # Three distinct real roots: p < 0 here, so r > 0
    r = math.sqrt(-p / 3)
    cos_arg = float(np.clip(-q / (2 * r * r * r), -1.0, 1.0))
    phi = math.acos(cos_arg)

    roots: list[Root] = []
    for k in range(3):
        angle = (phi + 2 * math.pi * k) / 3
        x = 2 * r * math.cos(angle) - shift
        roots.append(as_root(x, real_only))
    return roots


__all__ = [
    "CubicCase",
    "DepressedCubic",
    "depress_cubic",
    "solve_cubic",
]
