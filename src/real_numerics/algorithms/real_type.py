"""Capability trait for real floating-point formats.

A ``RealType`` bundles everything the generic algorithms may ask of a
format: radix and ulp, rounding to integral values, a fused multiply-add,
sign/magnitude decomposition, exact conversion of small integers and the
native transcendental binding. Algorithms are written once against this
interface; the per-format constants come from the format registry.

Values flowing through a ``RealType`` are numpy scalars of its compute dtype.
``coerce`` brings caller input into that representation (rounding it to the
storage format first) and ``finish`` rounds a result back to the storage
format. For FP32, FP64 and FP80 both dtypes coincide.

The fused multiply-add is evaluated exactly with rational arithmetic and
rounded once, in the manner of a software IEEE-754 implementation:

    round(x + a*b) = sign * M * 2^q,  M = round_half_even(|x + a*b| / 2^q)

where ``q`` is the quantum exponent of the result's binade, clamped at the
subnormal boundary.
"""

from __future__ import annotations

import logging
from enum import Enum
from fractions import Fraction
from functools import lru_cache
from typing import Any

import numpy as np

from real_numerics.algorithms.native import NativeFunctions
from real_numerics.data.real_formats import (
    RealFormat,
    format_of,
    get_compute_dtype,
    get_dtype,
    get_spec,
    is_promoted,
)

logger = logging.getLogger(__name__)

Scalar = Any
"""A numpy floating scalar of a RealType's compute dtype."""


class Sign(Enum):
    """Sign of a floating-point value."""

    PLUS = "plus"
    MINUS = "minus"


class RoundingRule(Enum):
    """Rules for rounding a value to an integral value."""

    TO_NEAREST_OR_EVEN = "toNearestOrEven"
    TOWARD_ZERO = "towardZero"
    DOWN = "down"
    UP = "up"


_ROUNDING_UFUNCS = {
    RoundingRule.TO_NEAREST_OR_EVEN: np.rint,
    RoundingRule.TOWARD_ZERO: np.trunc,
    RoundingRule.DOWN: np.floor,
    RoundingRule.UP: np.ceil,
}


class RealType:
    """Capabilities of one real floating-point format.

    Obtain instances through ``get_real_type`` or ``real_type_of``; they are
    immutable and shared.

    Example:
        >>> real = get_real_type("fp32")
        >>> real.rounded(real.coerce(2.5), RoundingRule.TO_NEAREST_OR_EVEN)
        np.float32(2.0)
        >>> real.exactly(2**24 + 1) is None
        True
    """

    __slots__ = (
        "format",
        "spec",
        "dtype",
        "compute_dtype",
        "native",
        "zero",
        "one",
        "nan",
        "infinity",
        "pi",
        "ulp_of_one",
        "least_normal_magnitude",
        "_compute_precision",
        "_compute_max_exponent",
        "_promoted",
    )

    def __init__(self, fmt: RealFormat | str) -> None:
        self.spec = get_spec(fmt)
        self.format = self.spec.format
        self.dtype = get_dtype(self.format)
        self.compute_dtype = get_compute_dtype(self.format)
        self.native = NativeFunctions(self.compute_dtype)
        self._promoted = is_promoted(self.format)

        finfo = np.finfo(self.compute_dtype)
        self._compute_precision = finfo.nmant + 1
        self._compute_max_exponent = finfo.maxexp - 1

        c = self.compute_dtype
        self.zero = c(0)
        self.one = c(1)
        self.nan = c(np.nan)
        self.infinity = c(np.inf)
        # acos(-1) is pi correctly rounded to the compute dtype
        self.pi = np.arccos(c(-1))
        self.ulp_of_one = c(self.spec.ulp_of_one)
        self.least_normal_magnitude = np.ldexp(self.one, self.spec.min_exponent)

        logger.debug(
            "Built RealType %s (storage %s, compute %s)",
            self.format.value,
            np.dtype(self.dtype).name,
            np.dtype(self.compute_dtype).name,
        )

    def __repr__(self) -> str:
        return f"RealType({self.format.value!r})"

    # -------------------------------------------------------------------------
    # Representation
    # -------------------------------------------------------------------------

    @property
    def radix(self) -> int:
        """Radix of the format."""
        return self.spec.radix

    @property
    def even_integer_threshold(self) -> Scalar:
        """radix / ulp: every finite value at least this large is an even integer."""
        return self.radix / self.ulp_of_one

    @property
    def integer_threshold(self) -> Scalar:
        """1 / ulp: every finite value at least this large is an integer."""
        return self.one / self.ulp_of_one

    def coerce(self, x: Any) -> Scalar:
        """Round ``x`` to the storage format and widen it to the compute dtype."""
        if self._promoted:
            with np.errstate(all="ignore"):
                return self.compute_dtype(float(self.dtype(x)))
        if isinstance(x, np.generic) and x.dtype == np.dtype(self.compute_dtype):
            return x
        return self.compute_dtype(x)

    def finish(self, x: Scalar) -> Any:
        """Round a compute-dtype result to the storage format."""
        if self._promoted:
            with np.errstate(all="ignore"):
                return self.dtype(x)
        return x

    # -------------------------------------------------------------------------
    # Classification, sign and magnitude
    # -------------------------------------------------------------------------

    def is_finite(self, x: Scalar) -> bool:
        return bool(np.isfinite(x))

    def is_zero(self, x: Scalar) -> bool:
        return bool(x == 0)

    def is_normal(self, x: Any) -> bool:
        """True for finite non-zero values of storage-format normal magnitude."""
        x = self.coerce(x)
        return self.is_finite(x) and bool(abs(x) >= self.least_normal_magnitude)

    def sign(self, x: Scalar) -> Sign:
        return Sign.MINUS if np.signbit(x) else Sign.PLUS

    def magnitude(self, x: Scalar) -> Scalar:
        return np.abs(x)

    def with_sign_of(self, sign_source: Scalar, magnitude: Scalar) -> Scalar:
        """``magnitude`` carrying the sign of ``sign_source``."""
        return np.copysign(magnitude, sign_source)

    # -------------------------------------------------------------------------
    # Rounding
    # -------------------------------------------------------------------------

    def rounded(self, x: Scalar, rule: RoundingRule) -> Scalar:
        """Round ``x`` to an integral value of the same format."""
        return _ROUNDING_UFUNCS[rule](x)

    def adding_product(self, x: Any, a: Any, b: Any) -> Scalar:
        """``x + a*b`` computed exactly and rounded once to the storage format."""
        x, a, b = self.coerce(x), self.coerce(a), self.coerce(b)
        if not (self.is_finite(x) and self.is_finite(a) and self.is_finite(b)):
            with np.errstate(all="ignore"):
                return x + a * b

        exact = _to_fraction(x) + _to_fraction(a) * _to_fraction(b)
        if exact == 0:
            # An exact zero sum is -0 only when both addends are -0
            product_negative = bool(np.signbit(a)) != bool(np.signbit(b))
            if x == 0 and np.signbit(x) and product_negative:
                return -self.zero
            return self.zero
        return self._round_fraction(exact)

    def _round_fraction(self, value: Fraction) -> Scalar:
        negative = value < 0
        value = abs(value)
        precision = self.spec.significand_bits

        # Binade: 2^exponent <= value < 2^(exponent + 1)
        exponent = value.numerator.bit_length() - value.denominator.bit_length()
        if value < Fraction(2) ** exponent:
            exponent -= 1

        quantum = max(exponent, self.spec.min_exponent) - (precision - 1)
        significand = round(value / Fraction(2) ** quantum)  # ties to even

        if significand.bit_length() - 1 + quantum > self.spec.max_exponent:
            result = self.infinity
        else:
            result = np.ldexp(self.compute_dtype(significand), quantum)
        return -result if negative else result

    # -------------------------------------------------------------------------
    # Integer conversion
    # -------------------------------------------------------------------------

    def exactly(self, n: int) -> Scalar | None:
        """``n`` as a compute-dtype value, or None if it does not convert exactly."""
        if n == 0:
            return self.zero
        magnitude = abs(n)
        trailing_zeros = (magnitude & -magnitude).bit_length() - 1
        if (magnitude >> trailing_zeros).bit_length() > self._compute_precision:
            return None
        if magnitude.bit_length() - 1 > self._compute_max_exponent:
            return None
        return self.from_int(n)

    def from_int(self, n: int) -> Scalar:
        """``n`` rounded to the compute dtype."""
        with np.errstate(all="ignore"):
            return self.compute_dtype(n)


def _to_fraction(x: Scalar) -> Fraction:
    numerator, denominator = x.as_integer_ratio()
    return Fraction(numerator, denominator)


@lru_cache(maxsize=None)
def _real_type(fmt: RealFormat) -> RealType:
    return RealType(fmt)


def get_real_type(fmt: RealFormat | str) -> RealType:
    """
    Get the shared RealType for a format.

    Args:
        fmt: Real format (enum or string like 'fp32')

    Raises:
        ValueError: If format is unknown or unsupported on this platform
        ImportError: If BF16 requested but ml_dtypes not installed
    """
    if isinstance(fmt, str):
        fmt = get_spec(fmt).format
    return _real_type(fmt)


def real_type_of(x: Any, fmt: RealFormat | str | None = None) -> RealType:
    """RealType for an explicit format, or inferred from the value's dtype."""
    if fmt is None:
        fmt = format_of(x)
    return get_real_type(fmt)


__all__ = [
    "RealType",
    "RoundingRule",
    "Sign",
    "get_real_type",
    "real_type_of",
]
