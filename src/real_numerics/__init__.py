"""Real Numerics: elementary functions over real floating-point formats."""

__version__ = "0.1.0"

from real_numerics.algorithms import (
    RealType,
    RoundingRule,
    Sign,
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cbrt,
    cos,
    cos_pi,
    cosh,
    erf,
    erfc,
    exp,
    exp2,
    exp10,
    expm1,
    gamma,
    get_real_type,
    hypot,
    log,
    log1p,
    log2,
    log10,
    log_gamma,
    pow,
    pow_int,
    pow_real,
    reciprocal,
    root,
    sign_gamma,
    sin,
    sin_pi,
    sinh,
    sqrt,
    tan,
    tan_pi,
    tanh,
)
from real_numerics.data.real_formats import (
    RealFormat,
    get_dtype,
    get_spec,
    list_available_formats,
)
from real_numerics.random import PCG128Random

__all__ = [
    "__version__",
    # Formats
    "RealFormat",
    "RealType",
    "RoundingRule",
    "Sign",
    "get_dtype",
    "get_real_type",
    "get_spec",
    "list_available_formats",
    # Reduction and splitting
    "cos_pi",
    "sin_pi",
    "tan_pi",
    "pow",
    "pow_int",
    "pow_real",
    "reciprocal",
    "root",
    "sign_gamma",
    # Elementary functions
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
    # Random numbers
    "PCG128Random",
]
