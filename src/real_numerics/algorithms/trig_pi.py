"""Trigonometric functions of pi times x.

``cos_pi(x)``, ``sin_pi(x)`` and ``tan_pi(x)`` evaluate cos(πx), sin(πx) and
tan(πx) without forming πx, which loses all accuracy once x is large, and
without relying on platform ``cospi``/``sinpi``/``tanpi``.

Algorithm:
    1. Non-finite x gives NaN.
    2. Beyond radix/ulp (cos, tan) or 1/ulp (sin) every value is an even
       integer or an integer, and the result is known.
    3. Split x = n/2 + f with n = round_to_nearest_even(2x). For binary
       formats f = x - n/2 is exact and |f| <= 1/4.
    4. The low bits of n select a quadrant (or, for the π-periodic tangent,
       a sector) and an identity for a shift by a multiple of π/2.

References:
    - Muller: "Elementary Functions: Algorithms and Implementation" (3rd ed.), §11
    - IEEE 754-2019, §9.2 (cosPi, sinPi, tanPi)
"""

from __future__ import annotations

from typing import Any

import numpy as np

from real_numerics.algorithms.bits import low_word
from real_numerics.algorithms.real_type import RealType, RoundingRule, Scalar, real_type_of
from real_numerics.data.real_formats import RealFormat


def _split_half_integer(real: RealType, x: Scalar) -> tuple[Scalar, Scalar]:
    """Return (n, f) with x = n/2 + f and n integral."""
    # TODO: exactness of f has only been analyzed for binary radixes; decimal
    # formats need their own argument before they can use this reduction.
    n = real.rounded(2 * x, RoundingRule.TO_NEAREST_OR_EVEN)
    f = real.adding_product(x, -0.5, n)
    return n, f


@np.errstate(all="ignore")
def cos_pi(x: Any, fmt: RealFormat | str | None = None) -> Any:
    """
    cos(πx).

    Args:
        x: Real value (numpy floating scalar or Python float).
        fmt: Optional format to evaluate in; inferred from ``x`` if None.

    Returns:
        Scalar of the evaluation format.

    Example:
        >>> cos_pi(1e300)
        np.float64(1.0)
    """
    real = real_type_of(x, fmt)
    # Cosine is even
    value = real.magnitude(real.coerce(x))
    if not real.is_finite(value):
        return real.finish(real.nan)
    if value >= real.even_integer_threshold:
        return real.finish(real.one)

    n, f = _split_half_integer(real, value)
    # 2π-periodic: only the two least significant bits of n matter
    quadrant = low_word(real, n) & 0x3
    native = real.native
    if quadrant == 0:
        result = native.cos(real.pi * f)
    elif quadrant == 1:
        result = -native.sin(real.pi * f)
    elif quadrant == 2:
        result = -native.cos(real.pi * f)
    elif quadrant == 3:
        result = native.sin(real.pi * f)
    else:
        raise AssertionError(f"unreachable quadrant {quadrant}")
    return real.finish(result)


@np.errstate(all="ignore")
def sin_pi(x: Any, fmt: RealFormat | str | None = None) -> Any:
    """
    sin(πx).

    Integral x gives a zero with the sign of x.

    Example:
        >>> sin_pi(0.5)
        np.float64(1.0)
    """
    real = real_type_of(x, fmt)
    value = real.coerce(x)
    if not real.is_finite(value):
        return real.finish(real.nan)
    if real.magnitude(value) >= real.integer_threshold:
        return real.finish(real.with_sign_of(value, real.zero))

    n, f = _split_half_integer(real, value)
    quadrant = low_word(real, n) & 0x3
    if real.is_zero(f) and quadrant in (0, 2):
        return real.finish(real.with_sign_of(value, real.zero))

    native = real.native
    if quadrant == 0:
        result = native.sin(real.pi * f)
    elif quadrant == 1:
        result = native.cos(real.pi * f)
    elif quadrant == 2:
        result = -native.sin(real.pi * f)
    elif quadrant == 3:
        result = -native.cos(real.pi * f)
    else:
        raise AssertionError(f"unreachable quadrant {quadrant}")
    return real.finish(result)


@np.errstate(all="ignore")
def tan_pi(x: Any, fmt: RealFormat | str | None = None) -> Any:
    """
    tan(πx).

    Integral x gives a zero with the sign of x. Half-integral x is a pole;
    the dispatch yields -1/tan(±0), i.e. -inf for every pole.

    Example:
        >>> tan_pi(0.25)
        np.float64(0.9999999999999999)
    """
    real = real_type_of(x, fmt)
    value = real.coerce(x)
    if not real.is_finite(value):
        return real.finish(real.nan)
    if real.magnitude(value) >= real.even_integer_threshold:
        return real.finish(real.with_sign_of(value, real.zero))

    n, f = _split_half_integer(real, value)
    # π-periodic: only the least significant bit of n matters
    sector = low_word(real, n) & 0x1
    if real.is_zero(f) and sector == 0:
        return real.finish(real.with_sign_of(value, real.zero))

    native = real.native
    if sector == 0:
        result = native.tan(real.pi * f)
    elif sector == 1:
        result = -real.one / native.tan(real.pi * f)
    else:
        raise AssertionError(f"unreachable sector {sector}")
    return real.finish(result)


__all__ = ["cos_pi", "sin_pi", "tan_pi"]
