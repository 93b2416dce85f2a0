"""Native transcendental binding.

Thin layer over the platform's math library: numpy ufuncs (which call the C
library's ``sinf``/``sin``/``sinl`` and friends for float32, float64 and
longdouble) and, for the functions numpy does not ship, Python's ``math``
module evaluated in float64.

Nothing here reduces or splits arguments. The binding only guarantees the
IEEE-754 calling convention the algorithms rely on:

- floating-point exceptions never surface as numpy ``RuntimeWarning``s,
- domain errors produce NaN, poles produce signed infinities and overflow
  saturates, where ``math`` would raise ``ValueError``/``OverflowError``.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import DTypeLike

Scalar = Any
"""A numpy floating scalar of the compute dtype."""


def _gamma(x: float) -> float:
    """tgamma with C library semantics."""
    if math.isnan(x):
        return x
    try:
        return math.gamma(x)
    except ValueError:
        # Pole at ±0 keeps the sign of zero; negative integers and -inf are NaN
        if x == 0:
            return math.copysign(math.inf, x)
        return math.nan
    except OverflowError:
        return math.copysign(math.inf, x)


def _log_gamma(x: float) -> float:
    """lgamma with C library semantics (sign of Γ discarded)."""
    if math.isnan(x):
        return x
    try:
        return math.lgamma(x)
    except (ValueError, OverflowError):
        # Poles and huge arguments
        return math.inf


class NativeFunctions:
    """Native primitives for one compute dtype.

    Every method takes and returns scalars of ``dtype``. Functions without a
    numpy ufunc are evaluated in float64 and rounded to ``dtype``; for
    longdouble this is best effort only.

    Example:
        >>> native = NativeFunctions(np.float32)
        >>> native.cbrt(np.float32(-8))
        np.float32(-2.0)
    """

    __slots__ = ("_dtype",)

    def __init__(self, dtype: DTypeLike) -> None:
        self._dtype = dtype

    @property
    def dtype(self) -> DTypeLike:
        """Scalar type the primitives operate on."""
        return self._dtype

    @np.errstate(all="ignore")
    def _via_float64(self, function: Callable[[float], float], x: Scalar) -> Scalar:
        return self._dtype(function(float(x)))

    # Trigonometric
    @np.errstate(all="ignore")
    def cos(self, x: Scalar) -> Scalar:
        return np.cos(x)

    @np.errstate(all="ignore")
    def sin(self, x: Scalar) -> Scalar:
        return np.sin(x)

    @np.errstate(all="ignore")
    def tan(self, x: Scalar) -> Scalar:
        return np.tan(x)

    @np.errstate(all="ignore")
    def acos(self, x: Scalar) -> Scalar:
        return np.arccos(x)

    @np.errstate(all="ignore")
    def asin(self, x: Scalar) -> Scalar:
        return np.arcsin(x)

    @np.errstate(all="ignore")
    def atan(self, x: Scalar) -> Scalar:
        return np.arctan(x)

    # Hyperbolic
    @np.errstate(all="ignore")
    def cosh(self, x: Scalar) -> Scalar:
        return np.cosh(x)

    @np.errstate(all="ignore")
    def sinh(self, x: Scalar) -> Scalar:
        return np.sinh(x)

    @np.errstate(all="ignore")
    def tanh(self, x: Scalar) -> Scalar:
        return np.tanh(x)

    @np.errstate(all="ignore")
    def acosh(self, x: Scalar) -> Scalar:
        return np.arccosh(x)

    @np.errstate(all="ignore")
    def asinh(self, x: Scalar) -> Scalar:
        return np.arcsinh(x)

    @np.errstate(all="ignore")
    def atanh(self, x: Scalar) -> Scalar:
        return np.arctanh(x)

    # Exponential and logarithmic
    @np.errstate(all="ignore")
    def exp(self, x: Scalar) -> Scalar:
        return np.exp(x)

    @np.errstate(all="ignore")
    def expm1(self, x: Scalar) -> Scalar:
        return np.expm1(x)

    @np.errstate(all="ignore")
    def exp2(self, x: Scalar) -> Scalar:
        return np.exp2(x)

    @np.errstate(all="ignore")
    def log(self, x: Scalar) -> Scalar:
        return np.log(x)

    @np.errstate(all="ignore")
    def log1p(self, x: Scalar) -> Scalar:
        return np.log1p(x)

    @np.errstate(all="ignore")
    def log2(self, x: Scalar) -> Scalar:
        return np.log2(x)

    @np.errstate(all="ignore")
    def log10(self, x: Scalar) -> Scalar:
        return np.log10(x)

    # Roots
    @np.errstate(all="ignore")
    def sqrt(self, x: Scalar) -> Scalar:
        return np.sqrt(x)

    @np.errstate(all="ignore")
    def cbrt(self, x: Scalar) -> Scalar:
        return np.cbrt(x)

    # Special functions (no numpy ufuncs)
    def erf(self, x: Scalar) -> Scalar:
        return self._via_float64(math.erf, x)

    def erfc(self, x: Scalar) -> Scalar:
        return self._via_float64(math.erfc, x)

    def gamma(self, x: Scalar) -> Scalar:
        return self._via_float64(_gamma, x)

    def log_gamma(self, x: Scalar) -> Scalar:
        return self._via_float64(_log_gamma, x)

    # Binary
    @np.errstate(all="ignore")
    def pow(self, x: Scalar, y: Scalar) -> Scalar:
        return np.power(x, y)

    @np.errstate(all="ignore")
    def hypot(self, x: Scalar, y: Scalar) -> Scalar:
        return np.hypot(x, y)

    @np.errstate(all="ignore")
    def atan2(self, y: Scalar, x: Scalar) -> Scalar:
        return np.arctan2(y, x)


__all__ = ["NativeFunctions"]
