"""Bit-level primitives shared by the reduction and splitting algorithms.

- ``is_even``: parity of an integral floating-point value, for any radix
- ``low_word``: low 64 bits of the integer part of a finite value
- ``reciprocal``: 1/x, or None when rounding would leave no normal result
"""

from __future__ import annotations

from typing import Any

import numpy as np

from real_numerics.algorithms.real_type import (
    RealType,
    RoundingRule,
    Scalar,
    real_type_of,
)
from real_numerics.data.real_formats import RealFormat

_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


def is_even(real: RealType, x: Scalar) -> bool:
    """Parity of ``x``, which must already be an integral value.

    For binary formats x/2 is always exact, so ``x`` is even iff its half is
    integral. Other radixes fall back to ``_is_even_by_remainder``.
    """
    if real.radix == 2:
        half = x / 2
        return bool(half == real.rounded(half, RoundingRule.TOWARD_ZERO))
    return _is_even_by_remainder(real, x)


def _is_even_by_remainder(real: RealType, x: Scalar) -> bool:
    """Parity via x - 2*trunc(x/2) == 0, evaluated with a fused multiply-add.

    Valid for any radix. In a decimal format x/2 itself may round (with a one
    digit significand 7/2 rounds to 4), so only the remainder test is safe.
    Decimal formats are not implemented yet; this path is what they will use.
    """
    half = real.rounded(x / 2, RoundingRule.TOWARD_ZERO)
    return bool(real.adding_product(x, -2, half) == 0)


def low_word(real: RealType, x: Scalar) -> int:
    """Integer part of ``x`` reduced modulo 2**64, as an unsigned word.

    Raises:
        ValueError: If ``x`` is not finite
    """
    two_63 = np.ldexp(real.one, _WORD_BITS - 1)
    if abs(x) < two_63:
        # Two's complement reinterpretation of a signed 64-bit value
        return int(real.rounded(x, RoundingRule.DOWN)) & _WORD_MASK

    if not real.is_finite(x):
        raise ValueError(f"low word of a non-finite value: {x}")

    # For |x| >= 2**63 the remainder modulo 2**64 is exact and lies in [0, 2**64)
    two_64 = np.ldexp(real.one, _WORD_BITS)
    cleared = x - two_64 * real.rounded(x / two_64, RoundingRule.DOWN)
    return int(cleared) & _WORD_MASK


def reciprocal(x: Any, fmt: RealFormat | str | None = None) -> Any | None:
    """
    1/x when it is well defined in the format of ``x``.

    The reciprocal is returned if it is normal, or if ``x`` is zero or
    non-finite (giving a signed infinity, zero or NaN). Otherwise rounding
    produced a subnormal or overflowed, and None is returned.

    Example:
        >>> reciprocal(4.0)
        np.float64(0.25)
        >>> reciprocal(np.finfo(np.float64).max) is None
        True
    """
    real = real_type_of(x, fmt)
    value = real.coerce(x)
    with np.errstate(all="ignore"):
        result = real.finish(real.one / value)
    if real.is_normal(result) or real.is_zero(value) or not real.is_finite(value):
        return result
    return None


__all__ = ["is_even", "low_word", "reciprocal"]
