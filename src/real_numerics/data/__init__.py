"""Data module for real format definitions."""

from real_numerics.data.real_formats import (
    DEFAULT_FORMAT,
    HAS_FP80,
    HAS_ML_DTYPES,
    RealFormat,
    RealFormatSpec,
    format_of,
    get_compute_dtype,
    get_dtype,
    get_spec,
    is_promoted,
    list_available_formats,
)

__all__ = [
    "DEFAULT_FORMAT",
    "HAS_FP80",
    "HAS_ML_DTYPES",
    "RealFormat",
    "RealFormatSpec",
    "format_of",
    "get_compute_dtype",
    "get_dtype",
    "get_spec",
    "is_promoted",
    "list_available_formats",
]
