"""Integer and real powers, and n-th roots.

``pow_int(x, n)`` handles exponents that do not convert exactly to the
format evaluating ``pow``. Converting such an exponent would round it and can
flip its parity, which decides the sign of the result for negative ``x``
(e.g. float32(2**24 + 1) is 2**24, so (-1)**n would come out +1).

Instead the exponent is split as n = low + high:

- ``low`` holds the low ``exponent_split_bits`` bits of |n| with the sign of
  n, so it converts exactly and carries the parity of n,
- ``high`` is a multiple of 2**exponent_split_bits. Converting it may round,
  but rounding keeps it a multiple of two, and whenever it rounds the
  magnitude x**high has saturated anyway.

Both halves share the sign of n, so x**low and x**high move in the same
direction and their product saturates to a correctly signed infinity or
zero instead of forming inf * 0.

References:
    - IEEE 754-2019, §9.2.1 (pown, rootn special cases)
    - ISO C11, Annex F.10.4.4 (pow)
"""

from __future__ import annotations

import logging
import operator
from typing import Any

import numpy as np

from real_numerics.algorithms.real_type import RealType, Scalar, real_type_of
from real_numerics.data.real_formats import RealFormat

logger = logging.getLogger(__name__)

INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def split_exponent(n: int, bits: int) -> tuple[int, int]:
    """
    Split ``n`` into (low, high) with low + high == n.

    ``low`` is the low ``bits`` bits of |n| carrying the sign of n; ``high``
    is a multiple of 2**bits with the same sign as n (or zero).

    Example:
        >>> split_exponent(0x1000001, 24)
        (1, 16777216)
        >>> split_exponent(-0x1000001, 24)
        (-1, -16777216)
    """
    mask = (1 << bits) - 1
    low = abs(n) & mask
    if n < 0:
        low = -low
    return low, n - low


def _machine_integer(n: Any) -> int:
    try:
        n = operator.index(n)
    except TypeError:
        raise TypeError(
            f"Exponent must be an integer, got {type(n).__name__}"
        ) from None
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"Exponent {n} does not fit in a {INT_BITS}-bit integer")
    return n


def _pow_split(real: RealType, x: Scalar, n: int) -> Scalar:
    native = real.native
    if real.is_zero(x) or not real.is_finite(x):
        # Only the sign and parity of n matter for zeros and infinities
        small = 1 if n % 2 else 2
        return native.pow(x, real.from_int(small if n > 0 else -small))

    low, high = split_exponent(n, real.spec.exponent_split_bits)
    logger.debug(
        "Split exponent %d for %s into low=%d, high=%d",
        n,
        real.format.value,
        low,
        high,
    )
    return native.pow(x, real.from_int(low)) * native.pow(x, real.from_int(high))


@np.errstate(all="ignore")
def pow_int(x: Any, n: Any, fmt: RealFormat | str | None = None) -> Any:
    """
    x raised to the integer power n.

    Args:
        x: Real base.
        n: 64-bit integer exponent (Python or numpy integer).
        fmt: Optional format to evaluate in; inferred from ``x`` if None.

    Returns:
        Scalar of the evaluation format.

    Raises:
        TypeError: If ``n`` is not an integer
        OverflowError: If ``n`` is outside the 64-bit integer range

    Example:
        >>> pow_int(-1.0, 2**63 - 1)
        np.float64(-1.0)
        >>> pow_int(-0.0, -1)
        np.float64(-inf)
    """
    n = _machine_integer(n)
    real = real_type_of(x, fmt)
    value = real.coerce(x)

    exponent = real.exactly(n)
    if exponent is not None:
        return real.finish(real.native.pow(value, exponent))
    return real.finish(_pow_split(real, value, n))


@np.errstate(all="ignore")
def pow_real(x: Any, y: Any, fmt: RealFormat | str | None = None) -> Any:
    """
    x raised to the real power y, for x >= 0.

    Negative (or NaN) bases give NaN even when y is integral; use ``pow_int``
    for signed bases.

    Example:
        >>> pow_real(4.0, 0.5)
        np.float64(2.0)
    """
    real = real_type_of(x, fmt)
    base = real.coerce(x)
    if not base >= 0:
        return real.finish(real.nan)
    return real.finish(real.native.pow(base, real.coerce(y)))


def pow(x: Any, y: Any, fmt: RealFormat | str | None = None) -> Any:
    """
    x**y, dispatching on the type of the exponent.

    Integer exponents (``int`` or numpy integer, bool excluded) use
    ``pow_int``; every other exponent uses ``pow_real``.
    """
    if isinstance(y, (int, np.integer)) and not isinstance(y, bool):
        return pow_int(x, y, fmt)
    return pow_real(x, y, fmt)


@np.errstate(all="ignore")
def root(x: Any, n: Any, fmt: RealFormat | str | None = None) -> Any:
    """
    The real n-th root of x.

    Negative x has no real root for even n (NaN). n == 3 uses the native
    cube root. Other n use pow(|x|, 1/n) with the sign of x, which is not
    correctly rounded when n or 1/n is not exactly representable.

    Example:
        >>> root(-8.0, 3)
        np.float64(-2.0)
    """
    n = _machine_integer(n)
    real = real_type_of(x, fmt)
    value = real.coerce(x)
    if value < 0 and n % 2 == 0:
        return real.finish(real.nan)
    if n == 3:
        return real.finish(real.native.cbrt(value))
    # TODO: correctly rounded rootn for exponents whose reciprocal is inexact
    magnitude = real.native.pow(real.magnitude(value), real.one / real.from_int(n))
    return real.finish(real.with_sign_of(value, magnitude))


__all__ = [
    "INT_BITS",
    "INT_MAX",
    "INT_MIN",
    "pow",
    "pow_int",
    "pow_real",
    "root",
    "split_exponent",
]
