"""Elementary functions of a real format.

Format-aware entry points for the native primitives. Each function rounds
its argument to the evaluation format (inferred from the value, or given by
``fmt``), calls the native binding of that format and rounds the result
back to it. Domain errors give NaN and overflow saturates; nothing raises.

Functions with reduction or splitting logic of their own live in
``trig_pi``, ``power`` and ``gamma_sign``.
"""

from __future__ import annotations

from typing import Any

from real_numerics.algorithms.power import pow_real
from real_numerics.algorithms.real_type import real_type_of
from real_numerics.data.real_formats import RealFormat

FormatArg = RealFormat | str | None


def _unary(name: str, x: Any, fmt: FormatArg) -> Any:
    real = real_type_of(x, fmt)
    function = getattr(real.native, name)
    return real.finish(function(real.coerce(x)))


def _binary(name: str, x: Any, y: Any, fmt: FormatArg) -> Any:
    real = real_type_of(x, fmt)
    function = getattr(real.native, name)
    return real.finish(function(real.coerce(x), real.coerce(y)))


# Trigonometric


def cos(x: Any, fmt: FormatArg = None) -> Any:
    """Cosine of x radians."""
    return _unary("cos", x, fmt)


def sin(x: Any, fmt: FormatArg = None) -> Any:
    """Sine of x radians."""
    return _unary("sin", x, fmt)


def tan(x: Any, fmt: FormatArg = None) -> Any:
    """Tangent of x radians."""
    return _unary("tan", x, fmt)


def acos(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("acos", x, fmt)


def asin(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("asin", x, fmt)


def atan(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("atan", x, fmt)


def atan2(y: Any, x: Any, fmt: FormatArg = None) -> Any:
    """Angle of the point (x, y), in (-π, π]."""
    return _binary("atan2", y, x, fmt)


# Hyperbolic


def cosh(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("cosh", x, fmt)


def sinh(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("sinh", x, fmt)


def tanh(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("tanh", x, fmt)


def acosh(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("acosh", x, fmt)


def asinh(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("asinh", x, fmt)


def atanh(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("atanh", x, fmt)


# Exponential and logarithmic


def exp(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("exp", x, fmt)


def expm1(x: Any, fmt: FormatArg = None) -> Any:
    """exp(x) - 1, accurate for x near zero."""
    return _unary("expm1", x, fmt)


def exp2(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("exp2", x, fmt)


def exp10(x: Any, fmt: FormatArg = None) -> Any:
    """
    10**x.

    Not every platform ships exp10, so this is pow(10, x), which is
    accurate but not always correctly rounded.
    """
    real = real_type_of(x, fmt)
    return pow_real(10.0, x, real.format)


def log(x: Any, fmt: FormatArg = None) -> Any:
    """Natural logarithm."""
    return _unary("log", x, fmt)


def log1p(x: Any, fmt: FormatArg = None) -> Any:
    """log(1 + x), accurate for x near zero."""
    return _unary("log1p", x, fmt)


def log2(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("log2", x, fmt)


def log10(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("log10", x, fmt)


# Algebraic


def sqrt(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("sqrt", x, fmt)


def cbrt(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("cbrt", x, fmt)


def hypot(x: Any, y: Any, fmt: FormatArg = None) -> Any:
    """sqrt(x**2 + y**2) without undue overflow or underflow."""
    return _binary("hypot", x, y, fmt)


# Error and gamma functions


def erf(x: Any, fmt: FormatArg = None) -> Any:
    return _unary("erf", x, fmt)


def erfc(x: Any, fmt: FormatArg = None) -> Any:
    """1 - erf(x), accurate for large x."""
    return _unary("erfc", x, fmt)


def gamma(x: Any, fmt: FormatArg = None) -> Any:
    """
    Γ(x).

    Γ(±0) is ±inf; negative integers and -inf give NaN.
    """
    return _unary("gamma", x, fmt)


def log_gamma(x: Any, fmt: FormatArg = None) -> Any:
    """
    log|Γ(x)|.

    Use ``sign_gamma`` for the sign. Poles give +inf.
    """
    return _unary("log_gamma", x, fmt)


__all__ = [
    "acos",
    "acosh",
    "asin",
    "asinh",
    "atan",
    "atan2",
    "atanh",
    "cbrt",
    "cos",
    "cosh",
    "erf",
    "erfc",
    "exp",
    "exp10",
    "exp2",
    "expm1",
    "gamma",
    "hypot",
    "log",
    "log10",
    "log1p",
    "log2",
    "log_gamma",
    "sin",
    "sinh",
    "sqrt",
    "tan",
    "tanh",
]
