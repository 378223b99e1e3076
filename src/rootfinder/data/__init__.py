"""Data module for shared numeric tolerances."""

from rootfinder.data.tolerances import (
    ACCEPTANCE_TOL,
    CLASSIFICATION_EPS,
    ToleranceKind,
    ToleranceSpec,
    get_spec,
    get_tolerance,
    is_negligible,
    list_tolerances,
)

__all__ = [
    "ACCEPTANCE_TOL",
    "CLASSIFICATION_EPS",
    "ToleranceKind",
    "ToleranceSpec",
    "get_spec",
    "get_tolerance",
    "is_negligible",
    "list_tolerances",
]
