"""
Command-line interface for RootFinder.

Usage:
    rootfinder info                       Show the shared numeric tolerances
    rootfinder quadratic A B C            Solve a·x² + b·x + c = 0
    rootfinder cubic A B C D              Solve a·x³ + b·x² + c·x + d = 0
"""

import logging
from collections.abc import Sequence
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from rootfinder import __version__
from rootfinder.algorithms import (
    Root,
    solve_cubic,
    solve_quadratic,
    verify_roots,
)
from rootfinder.data import ACCEPTANCE_TOL, list_tolerances
from rootfinder.exceptions import InvalidCoefficientError

app = typer.Typer(
    name="rootfinder",
    help="Closed-form roots of quadratic and cubic polynomials",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

# Negative coefficients ("-6") would otherwise be parsed as unknown options
_SOLVE_SETTINGS = {"ignore_unknown_options": True}

RealOnlyOption = Annotated[
    bool,
    typer.Option("--real-only", "-r", help="Report real roots only."),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"rootfinder version {__version__}")
        raise typer.Exit()


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log solver branch decisions."),
    ] = False,
) -> None:
    """RootFinder - Closed-form polynomial roots."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()  # type: ignore[misc]
def info() -> None:
    """Display the tolerances shared by both solvers."""
    table = Table(title="Numeric Tolerances")

    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right")
    table.add_column("Used for")

    for spec in list_tolerances():
        table.add_row(spec.kind.value, f"{spec.value:.0e}", spec.description)

    console.print(table)


@app.command(context_settings=_SOLVE_SETTINGS)  # type: ignore[misc]
def quadratic(
    a: Annotated[float, typer.Argument(help="Coefficient of x²")],
    b: Annotated[float, typer.Argument(help="Coefficient of x")],
    c: Annotated[float, typer.Argument(help="Constant term")],
    real_only: RealOnlyOption = False,
) -> None:
    """Solve a·x² + b·x + c = 0."""
    coefficients = [a, b, c]
    try:
        roots = solve_quadratic(a, b, c, real_only=real_only)
    except InvalidCoefficientError as exc:
        err_console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(code=2) from exc
    _print_roots(coefficients, roots)


@app.command(context_settings=_SOLVE_SETTINGS)  # type: ignore[misc]
def cubic(
    a: Annotated[float, typer.Argument(help="Coefficient of x³")],
    b: Annotated[float, typer.Argument(help="Coefficient of x²")],
    c: Annotated[float, typer.Argument(help="Coefficient of x")],
    d: Annotated[float, typer.Argument(help="Constant term")],
    real_only: RealOnlyOption = False,
) -> None:
    """Solve a·x³ + b·x² + c·x + d = 0."""
    coefficients = [a, b, c, d]
    try:
        roots = solve_cubic(a, b, c, d, real_only=real_only)
    except InvalidCoefficientError as exc:
        err_console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(code=2) from exc
    _print_roots(coefficients, roots)


def format_root(root: Root) -> str:
    """Render a root as ``re`` or ``re ± im·i``."""
    if isinstance(root, complex):
        if root.imag == 0:
            return f"{root.real:.12g}"
        sign = "+" if root.imag > 0 else "-"
        return f"{root.real:.12g} {sign} {abs(root.imag):.12g}i"
    return f"{root:.12g}"


def _print_roots(coefficients: Sequence[float], roots: Sequence[Root]) -> None:
    """Print a table of roots with their residuals."""
    if not roots:
        console.print("[yellow]No roots[/] for the given coefficients.")
        return

    table = Table(title=f"Roots of {_format_polynomial(coefficients)}")
    table.add_column("#", justify="right")
    table.add_column("Root", style="cyan")
    table.add_column("|p(x)|", justify="right")
    table.add_column("Verified", justify="center")

    for i, check in enumerate(verify_roots(coefficients, roots), start=1):
        table.add_row(
            str(i),
            format_root(check.root),
            f"{check.residual:.2e}",
            "✓" if check.passed else "✗",
            style="" if check.passed else "red",
        )

    console.print(table)
    console.print(f"Acceptance tolerance: {ACCEPTANCE_TOL:.0e}")


def _format_polynomial(coefficients: Sequence[float]) -> str:
    """Render coefficients as a polynomial, highest degree first."""
    degree = len(coefficients) - 1
    terms = []
    for power, coef in zip(range(degree, -1, -1), coefficients, strict=True):
        if coef == 0:
            continue
        if power == 0:
            terms.append(f"{coef:g}")
        elif power == 1:
            terms.append(f"{coef:g}x")
        else:
            terms.append(f"{coef:g}x^{power}")
    return " + ".join(terms).replace("+ -", "- ") or "0"


if __name__ == "__main__":
    app()
