"""RootFinder: Closed-form roots of quadratic and cubic polynomials."""

__version__ = "0.1.0"

from rootfinder.algorithms.cubic import solve_cubic
from rootfinder.algorithms.quadratic import Root, solve_quadratic
from rootfinder.exceptions import InvalidCoefficientError, RootFinderError

quadratic = solve_quadratic
cubic = solve_cubic

__all__ = [
    "__version__",
    "InvalidCoefficientError",
    "Root",
    "RootFinderError",
    "cubic",
    "quadratic",
    "solve_cubic",
    "solve_quadratic",
]
