#!/usr/bin/env python
"""Generate golden root files for integration testing.

Run this script to regenerate golden files after intentional algorithm changes.
Usage: python tests/integration/generate_golden.py
"""

import json
from pathlib import Path

from rootfinder.algorithms.cubic import solve_cubic

# Cases - MUST match the names used in test_known_polynomials.py
CASES: list[dict] = [
    {"name": "quadratic_complex_pair", "coefficients": [0, 1, 2, 5], "real_only": False},
    {"name": "quadratic_two_real", "coefficients": [0, 1, 0, -9], "real_only": False},
    {"name": "quadratic_double", "coefficients": [0, 1, -10, 25], "real_only": False},
    {"name": "three_distinct_real", "coefficients": [1, -6, 11, -6], "real_only": False},
    {"name": "triple_root", "coefficients": [1, -12, 48, -64], "real_only": False},
    {"name": "triple_root_at_two", "coefficients": [1, -6, 12, -8], "real_only": False},
    {"name": "single_and_double", "coefficients": [1, -7, 16, -12], "real_only": False},
    {"name": "one_real_two_complex", "coefficients": [1, -13, 67, -175], "real_only": False},
    {"name": "complex_pair_unit_leading", "coefficients": [1, 2, 3, 4], "real_only": False},
    {"name": "real_only_half", "coefficients": [32, -48, 48, -16], "real_only": True},
    {"name": "real_only_irrational", "coefficients": [80, -120, 75, -15], "real_only": True},
    {"name": "zero_constant_rational", "coefficients": [12, -18, 6, 0], "real_only": True},
    {"name": "zero_constant_irrational", "coefficients": [2, -6, 3, 0], "real_only": True},
]

GOLDEN_DIR = Path(__file__).parent / "golden"


def generate_case(case: dict) -> dict:
    """Solve one case and record its roots as [re, im] pairs."""
    roots = solve_cubic(*case["coefficients"], real_only=case["real_only"])
    return {
        **case,
        "roots": [[complex(r).real, complex(r).imag] for r in roots],
    }


def main() -> None:
    """Generate all golden files."""
    GOLDEN_DIR.mkdir(exist_ok=True)

    print("Generating known polynomial roots...")
    golden = [generate_case(case) for case in CASES]
    with open(GOLDEN_DIR / "known_roots.json", "w") as f:
        json.dump(golden, f, indent=2)
        f.write("\n")
    print(f"  Saved {len(golden)} cases")

    print(f"\nGolden files saved to {GOLDEN_DIR}")


if __name__ == "__main__":
    main()
