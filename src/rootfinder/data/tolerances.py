"""
Numeric Tolerances - Single Source of Truth

Both closed-form solvers classify their discriminants against the same
absolute epsilon. Keeping it here, and only here, stops the quadratic and
cubic branches from drifting to different notions of "zero".

References:
    - IEEE 754-2019 Standard for Floating-Point Arithmetic
    - Higham: "Accuracy and Stability of Numerical Algorithms" (2nd ed.), §1.5
"""

from dataclasses import dataclass
from enum import Enum


class ToleranceKind(Enum):
    """Named tolerances used across the package."""

    CLASSIFICATION = "classification"
    ACCEPTANCE = "acceptance"


@dataclass(frozen=True, slots=True)
class ToleranceSpec:
    """Description of a named tolerance."""

    kind: ToleranceKind
    value: float
    description: str


# =============================================================================
# TOLERANCES
# =============================================================================
# Classification epsilon sits a couple of orders above FP64 machine epsilon
# (2.22e-16) so that exact cancellations in b² - 4ac and (q/2)² + (p/3)³
# still land in the repeated-root branches.

CLASSIFICATION_EPS = 1e-14
ACCEPTANCE_TOL = 1e-5

_TOLERANCE_SPECS: dict[ToleranceKind, ToleranceSpec] = {
    ToleranceKind.CLASSIFICATION: ToleranceSpec(
        kind=ToleranceKind.CLASSIFICATION,
        value=CLASSIFICATION_EPS,
        description="Absolute zero test for coefficients and discriminants",
    ),
    ToleranceKind.ACCEPTANCE: ToleranceSpec(
        kind=ToleranceKind.ACCEPTANCE,
        value=ACCEPTANCE_TOL,
        description="Maximum |p(x)| for a returned root to count as verified",
    ),
}


# =============================================================================
# PUBLIC API
# =============================================================================


def get_spec(kind: ToleranceKind | str) -> ToleranceSpec:
    """
    Get the full description of a named tolerance.

    Args:
        kind: Tolerance kind (enum or string like 'classification')

    Returns:
        ToleranceSpec with value and description

    Raises:
        ValueError: If kind is unknown
    """
    if isinstance(kind, str):
        kind = _parse_kind(kind)
    return _TOLERANCE_SPECS[kind]


def get_tolerance(kind: ToleranceKind | str) -> float:
    """
    Get the value of a named tolerance.

    Example:
        >>> get_tolerance("classification")
        1e-14
    """
    return get_spec(kind).value


def list_tolerances() -> list[ToleranceSpec]:
    """List every tolerance in declaration order."""
    return [_TOLERANCE_SPECS[kind] for kind in ToleranceKind]


def is_negligible(value: float, eps: float = CLASSIFICATION_EPS) -> bool:
    """Return True if ``|value|`` is below ``eps`` (treated as zero)."""
    return abs(value) < eps


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _parse_kind(name: str) -> ToleranceKind:
    """Parse a string into a ToleranceKind enum."""
    normalized = name.lower().replace("-", "_").replace(" ", "_")

    for kind in ToleranceKind:
        if kind.value == normalized:
            return kind

    valid = [k.value for k in ToleranceKind]
    raise ValueError(f"Unknown tolerance kind: '{name}'. Valid: {valid}")
