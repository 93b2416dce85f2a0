"""
Command-line interface for Real Numerics.

Usage:
    real-numerics info           Show available real formats
    real-numerics compare        Compare real format properties
    real-numerics eval           Evaluate a function in a given format
    real-numerics random         Draw values from a seeded PCG generator
"""

import logging
from collections.abc import Callable
from typing import Annotated, Any

import numpy as np
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from real_numerics import __version__
from real_numerics.algorithms import elementary
from real_numerics.algorithms.bits import reciprocal
from real_numerics.algorithms.gamma_sign import sign_gamma
from real_numerics.algorithms.power import pow_int, pow_real, root
from real_numerics.algorithms.real_type import Sign, get_real_type
from real_numerics.algorithms.trig_pi import cos_pi, sin_pi, tan_pi
from real_numerics.data import (
    RealFormat,
    get_spec,
    list_available_formats,
)
from real_numerics.random import PCG128Random

app = typer.Typer(
    name="real-numerics",
    help="Elementary functions over real floating-point formats",
    add_completion=False,
)
console = Console()
logger = logging.getLogger(__name__)

_UNARY_FUNCTIONS: dict[str, Callable[..., Any]] = {
    "cos_pi": cos_pi,
    "sin_pi": sin_pi,
    "tan_pi": tan_pi,
    "sign_gamma": sign_gamma,
    "reciprocal": reciprocal,
    **{
        name: getattr(elementary, name)
        for name in elementary.__all__
        if name not in ("atan2", "hypot")
    },
}
_BINARY_FUNCTIONS: dict[str, Callable[..., Any]] = {
    "atan2": elementary.atan2,
    "hypot": elementary.hypot,
}
_EXPONENT_FUNCTIONS = {"pow", "root"}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"real-numerics version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()  # type: ignore[misc]
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug output."),
    ] = False,
) -> None:
    """Real Numerics - elementary functions across floating-point formats."""
    setup_logging(verbose)


@app.command()  # type: ignore[misc]
def info() -> None:
    """Display information about available real formats."""
    table = Table(title="Available Real Formats")

    table.add_column("Format", style="cyan", no_wrap=True)
    table.add_column("Bits", justify="right")
    table.add_column("Precision", justify="right")
    table.add_column("ulp(1)", justify="right")
    table.add_column("Exponent range", justify="right")
    table.add_column("Split bits", justify="right")
    table.add_column("Available", justify="center")

    available = set(list_available_formats())

    for fmt in RealFormat:
        spec = get_spec(fmt)
        is_available = "✓" if fmt in available else "✗"
        style = "" if fmt in available else "dim"

        table.add_row(
            fmt.value.upper(),
            str(spec.bits),
            str(spec.significand_bits),
            f"{spec.ulp_of_one:.2e}",
            f"[{spec.min_exponent}, {spec.max_exponent}]",
            str(spec.exponent_split_bits),
            is_available,
            style=style,
        )

    console.print(table)

    if RealFormat.BF16 not in available:
        console.print(
            "\n[yellow]Note:[/] BF16 requires ml-dtypes package. "
            "Install with: [bold]pip install ml-dtypes[/]"
        )


@app.command()  # type: ignore[misc]
def compare(
    formats: Annotated[
        list[str] | None,
        typer.Argument(help="Formats to compare (e.g., fp32 fp64)"),
    ] = None,
) -> None:
    """Compare properties of real formats."""
    if formats is None:
        formats = ["fp16", "fp32", "fp64"]

    try:
        specs = [get_spec(f) for f in formats]
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from e

    table = Table(title="Real Format Comparison")

    table.add_column("Property", style="bold")
    for fmt in formats:
        table.add_column(fmt.upper(), justify="right")

    table.add_row("Bits", *[str(s.bits) for s in specs])
    table.add_row("Bytes", *[str(s.bytes) for s in specs])
    table.add_row("Radix", *[str(s.radix) for s in specs])
    table.add_row("Exponent bits", *[str(s.exponent_bits) for s in specs])
    table.add_row("Mantissa bits", *[str(s.mantissa_bits) for s in specs])
    table.add_row("Precision", *[str(s.significand_bits) for s in specs])
    table.add_row("ulp(1)", *[f"{s.ulp_of_one:.2e}" for s in specs])
    table.add_row("Split bits", *[str(s.exponent_split_bits) for s in specs])

    console.print(table)


@app.command(name="eval")  # type: ignore[misc]
def evaluate(
    function: Annotated[
        str,
        typer.Argument(help="Function name (e.g., cos_pi, pow, gamma)"),
    ],
    value: Annotated[
        str,
        typer.Argument(help="Argument x"),
    ],
    precision: Annotated[
        str,
        typer.Option("--format", "-f", help="Real format to evaluate in"),
    ] = "fp64",
    n: Annotated[
        int | None,
        typer.Option("--n", "-n", help="Integer exponent for pow and root"),
    ] = None,
    y: Annotated[
        str | None,
        typer.Option("--y", "-y", help="Real exponent for pow, second argument for atan2 and hypot"),
    ] = None,
) -> None:
    """Evaluate a function at x in the given format."""
    try:
        real = get_real_type(precision)
        x = _parse_value(value, real.format)
        result = _dispatch(function, x, real.format, n, y)
    except (ValueError, ImportError, TypeError, OverflowError) as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from e

    console.print(
        f"{function}({value}) \\[{real.format.value}] = [bold]{_render(result)}[/]"
    )


@app.command(name="random")  # type: ignore[misc]
def random_values(
    seed_low: Annotated[
        int | None,
        typer.Option("--seed", "-s", help="Low 64 bits of the seed"),
    ] = None,
    seed_high: Annotated[
        int,
        typer.Option("--seed-high", help="High 64 bits of the seed"),
    ] = 0,
    count: Annotated[
        int,
        typer.Option("--count", "-c", help="Number of values to draw"),
    ] = 5,
) -> None:
    """Draw unsigned 64-bit values from a PCG128 generator."""
    try:
        if seed_low is None:
            generator = PCG128Random()
        else:
            generator = PCG128Random(seed_low, seed_high)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from e

    for _ in range(count):
        console.print(f"0x{generator.next():016x}")


def _parse_value(text: str, fmt: RealFormat) -> Any:
    """Parse a decimal string; FP80 parses directly to keep its extra digits."""
    if fmt is RealFormat.FP80:
        return np.longdouble(text)
    return float(text)


def _dispatch(
    function: str,
    x: Any,
    fmt: RealFormat,
    n: int | None,
    y: str | None,
) -> Any:
    logger.debug("Evaluating %s(%r) in %s", function, x, fmt.value)
    if function in _EXPONENT_FUNCTIONS:
        if function == "pow" and y is not None:
            return pow_real(x, _parse_value(y, fmt), fmt)
        if n is None:
            raise ValueError(f"'{function}' needs an integer exponent: pass --n")
        return pow_int(x, n, fmt) if function == "pow" else root(x, n, fmt)

    if function in _BINARY_FUNCTIONS:
        if y is None:
            raise ValueError(f"'{function}' needs a second argument: pass --y")
        return _BINARY_FUNCTIONS[function](x, _parse_value(y, fmt), fmt)

    if function not in _UNARY_FUNCTIONS:
        valid = sorted([*_UNARY_FUNCTIONS, *_BINARY_FUNCTIONS, *_EXPONENT_FUNCTIONS])
        raise ValueError(f"Unknown function: '{function}'. Valid: {valid}")
    return _UNARY_FUNCTIONS[function](x, fmt)


def _render(result: Any) -> str:
    if isinstance(result, Sign):
        return result.value
    return str(result)


if __name__ == "__main__":
    app()
