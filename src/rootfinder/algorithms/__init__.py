"""Root finding algorithms module.

This module contains implementations of:
- Quadratic formula with linear fallback
- Depressed-cubic solver (Cardano and trigonometric branches)
- Polynomial evaluation for root verification
"""

from rootfinder.algorithms.cubic import (
    CubicCase,
    DepressedCubic,
    depress_cubic,
    solve_cubic,
)
from rootfinder.algorithms.evaluation import (
    RootCheck,
    evaluate_polynomial,
    verify_roots,
)
from rootfinder.algorithms.quadratic import (
    Root,
    solve_quadratic,
)

__all__ = [
    # Cubic
    "CubicCase",
    "DepressedCubic",
    "depress_cubic",
    "solve_cubic",
    # Evaluation
    "RootCheck",
    "evaluate_polynomial",
    "verify_roots",
    # Quadratic
    "Root",
    "solve_quadratic",
]
