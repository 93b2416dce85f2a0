"""
Real Format Definitions - Single Source of Truth

This module defines all supported floating-point formats together with the
constants the generic algorithms are parameterized over: radix, significand
precision, exponent range and the exponent-split width used by integer
powers.

Narrow formats (FP16, BF16) are stored in their own dtype but evaluated in
float32, which is what numpy itself does for half precision ufuncs.

References:
    - IEEE 754-2019 Standard for Floating-Point Arithmetic
    - Muller et al.: "Handbook of Floating-Point Arithmetic" (2nd ed.), Ch. 2
    - Intel 64 and IA-32 Architectures SDM, Vol. 1, §4.2 (x87 extended format)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, cast

import numpy as np
from numpy.typing import DTypeLike

logger = logging.getLogger(__name__)

# Try to import ml_dtypes for bfloat16 support
try:
    import ml_dtypes

    HAS_ML_DTYPES = True
except ImportError:
    ml_dtypes = None  # type: ignore[assignment,unused-ignore]
    HAS_ML_DTYPES = False

# numpy.longdouble is the x87 80-bit format on x86 Linux/macOS only
HAS_FP80 = np.finfo(np.longdouble).nmant == 63


class RealFormat(Enum):
    """Supported real floating-point formats."""

    FP16 = "fp16"
    BF16 = "bf16"  # 8 exponent, 7 mantissa bits (float32 range)
    FP32 = "fp32"
    FP64 = "fp64"
    FP80 = "fp80"  # x87 extended, explicit integer bit


@dataclass(frozen=True, slots=True)
class RealFormatSpec:
    """Specification for a floating-point format."""

    format: RealFormat
    bits: int
    radix: int
    exponent_bits: int
    mantissa_bits: int  # Stored significand field, explicit bit included
    significand_bits: int  # Precision p, hidden bit included
    min_exponent: int  # Exponent of the smallest normal value
    max_exponent: int  # Exponent of the largest finite value
    exponent_split_bits: int  # Low bits of an integer exponent passed to pow

    @property
    def bytes(self) -> int:
        """Number of bytes for this format."""
        return self.bits // 8

    @property
    def ulp_of_one(self) -> float:
        """Distance from 1.0 to the next larger value."""
        return float(self.radix) ** (1 - self.significand_bits)


# =============================================================================
# FORMAT SPECIFICATIONS
# =============================================================================
# ulp(1) = radix^(1 - significand_bits)
# exponent_split_bits: precision of the dtype that evaluates pow, so that any
# integer below 2^exponent_split_bits converts to it exactly.

_FORMAT_SPECS: dict[RealFormat, RealFormatSpec] = {
    RealFormat.FP16: RealFormatSpec(
        format=RealFormat.FP16,
        bits=16,
        radix=2,
        exponent_bits=5,
        mantissa_bits=10,
        significand_bits=11,
        min_exponent=-14,
        max_exponent=15,
        exponent_split_bits=24,  # evaluated in float32
    ),
    RealFormat.BF16: RealFormatSpec(
        format=RealFormat.BF16,
        bits=16,
        radix=2,
        exponent_bits=8,
        mantissa_bits=7,
        significand_bits=8,
        min_exponent=-126,
        max_exponent=127,
        exponent_split_bits=24,  # evaluated in float32
    ),
    RealFormat.FP32: RealFormatSpec(
        format=RealFormat.FP32,
        bits=32,
        radix=2,
        exponent_bits=8,
        mantissa_bits=23,
        significand_bits=24,
        min_exponent=-126,
        max_exponent=127,
        exponent_split_bits=24,
    ),
    RealFormat.FP64: RealFormatSpec(
        format=RealFormat.FP64,
        bits=64,
        radix=2,
        exponent_bits=11,
        mantissa_bits=52,
        significand_bits=53,
        min_exponent=-1022,
        max_exponent=1023,
        exponent_split_bits=53,
    ),
    RealFormat.FP80: RealFormatSpec(
        format=RealFormat.FP80,
        bits=80,
        radix=2,
        exponent_bits=15,
        mantissa_bits=64,
        significand_bits=64,
        min_exponent=-16382,
        max_exponent=16383,
        exponent_split_bits=64,  # every 64-bit integer is exact
    ),
}

DEFAULT_FORMAT = RealFormat.FP64


# =============================================================================
# PUBLIC API
# =============================================================================


def get_spec(fmt: RealFormat | str) -> RealFormatSpec:
    """
    Get the full specification for a real format.

    Args:
        fmt: Real format (enum or string like 'fp32', 'FP16', 'bf-16')

    Returns:
        RealFormatSpec with all format properties

    Raises:
        ValueError: If format is unknown

    Example:
        >>> get_spec("fp32").significand_bits
        24
    """
    if isinstance(fmt, str):
        fmt = _parse_format(fmt)
    return _FORMAT_SPECS[fmt]


def get_dtype(fmt: RealFormat | str) -> DTypeLike:
    """
    Get the numpy scalar type that stores values of a format.

    Args:
        fmt: Real format

    Returns:
        Numpy scalar type

    Raises:
        ValueError: If format is unknown or not supported on this platform
        ImportError: If BF16 requested but ml_dtypes not installed

    Example:
        >>> get_dtype("fp32")
        <class 'numpy.float32'>
    """
    if isinstance(fmt, str):
        fmt = _parse_format(fmt)

    dtype_map: dict[RealFormat, Any] = {
        RealFormat.FP16: np.float16,
        RealFormat.FP32: np.float32,
        RealFormat.FP64: np.float64,
    }

    if fmt in dtype_map:
        return cast("DTypeLike", dtype_map[fmt])

    if fmt is RealFormat.FP80:
        if not HAS_FP80:
            raise ValueError(
                "Format 'fp80' is not supported on this platform: "
                f"numpy.longdouble has {np.finfo(np.longdouble).nmant} mantissa bits"
            )
        return cast("DTypeLike", np.longdouble)

    # BF16 requires ml_dtypes
    if not HAS_ML_DTYPES:
        raise ImportError(
            f"Format '{fmt.value}' requires ml_dtypes package. "
            "Install with: pip install ml-dtypes"
        )
    return cast("DTypeLike", ml_dtypes.bfloat16)


def get_compute_dtype(fmt: RealFormat | str) -> DTypeLike:
    """
    Get the numpy scalar type in which native functions of a format run.

    Narrow formats have no native transcendental implementations, so their
    values are widened (exactly) to float32 and the result rounded back.

    Example:
        >>> get_compute_dtype("fp16")
        <class 'numpy.float32'>
    """
    if isinstance(fmt, str):
        fmt = _parse_format(fmt)

    if fmt in (RealFormat.FP16, RealFormat.BF16):
        return cast("DTypeLike", np.float32)
    return get_dtype(fmt)


def is_promoted(fmt: RealFormat | str) -> bool:
    """True if the format is evaluated in a wider compute dtype."""
    if isinstance(fmt, str):
        fmt = _parse_format(fmt)
    return fmt in (RealFormat.FP16, RealFormat.BF16)


def format_of(value: Any) -> RealFormat:
    """
    Infer the real format of a scalar value.

    Python floats, ints and bools are treated as FP64.

    Raises:
        ValueError: If the value's dtype is not a supported real format

    Example:
        >>> format_of(np.float32(1.5))
        <RealFormat.FP32: 'fp32'>
    """
    if isinstance(value, (bool, int, float)):
        return DEFAULT_FORMAT

    dtype = np.dtype(getattr(value, "dtype", type(value)))
    for fmt in list_available_formats():
        if np.dtype(get_dtype(fmt)) == dtype:
            logger.debug("Resolved %s to format %s", dtype, fmt.value)
            return fmt

    valid = [f.value for f in list_available_formats()]
    raise ValueError(f"Unsupported real dtype: '{dtype}'. Valid formats: {valid}")


def list_available_formats() -> list[RealFormat]:
    """
    List all real formats available in current environment.

    BF16 is only available if ml_dtypes is installed, FP80 only where
    numpy.longdouble is the x87 extended format.

    Returns:
        List of available RealFormat values
    """
    available = [RealFormat.FP16, RealFormat.FP32, RealFormat.FP64]

    if HAS_ML_DTYPES:
        available.insert(1, RealFormat.BF16)
    if HAS_FP80:
        available.append(RealFormat.FP80)

    return available


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _parse_format(name: str) -> RealFormat:
    """Parse a string into a RealFormat enum."""
    normalized = name.lower().replace("-", "").replace("_", "").replace(" ", "")

    for fmt in RealFormat:
        if fmt.value == normalized:
            return fmt

    valid = [f.value for f in RealFormat]
    raise ValueError(f"Unknown real format: '{name}'. Valid: {valid}")
