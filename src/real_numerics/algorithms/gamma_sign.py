"""Sign of the gamma function.

Γ(x) is positive for x > 0 and alternates in sign between consecutive
negative integers: it is negative on (-1, 0), positive on (-2, -1), and so
on. The sign therefore follows from the parity of trunc(x), without ever
evaluating Γ (which under- or overflows long before the sign stops being
meaningful).
"""

from __future__ import annotations

from typing import Any

from real_numerics.algorithms.bits import is_even
from real_numerics.algorithms.real_type import RoundingRule, Sign, real_type_of
from real_numerics.data.real_formats import RealFormat


def sign_gamma(x: Any, fmt: RealFormat | str | None = None) -> Sign:
    """
    Sign of Γ(x).

    Poles (zero and the negative integers) are assigned ``Sign.PLUS``, as is
    NaN.

    Example:
        >>> sign_gamma(-2.5)
        <Sign.MINUS: 'minus'>
        >>> sign_gamma(-4.0)
        <Sign.PLUS: 'plus'>
    """
    real = real_type_of(x, fmt)
    value = real.coerce(x)
    if value >= 0:
        return Sign.PLUS

    integral_part = real.rounded(value, RoundingRule.TOWARD_ZERO)
    if value == integral_part:
        return Sign.PLUS
    # On (k-1, k) for a non-positive integer k, Γ is negative iff k is even
    return Sign.MINUS if is_even(real, integral_part) else Sign.PLUS


__all__ = ["sign_gamma"]
