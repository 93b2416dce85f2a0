"""Numerical algorithms module.

This module contains implementations of:
- The RealType capability trait and native transcendental binding
- Bit-level primitives (parity, low word, safe reciprocal)
- Trigonometric functions of πx via quadrant reduction
- Integer powers via exponent splitting, real powers and n-th roots
- The sign of the gamma function
- Format-aware elementary functions
"""

from real_numerics.algorithms.bits import is_even, low_word, reciprocal
from real_numerics.algorithms.elementary import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atan2,
    atanh,
    cbrt,
    cos,
    cosh,
    erf,
    erfc,
    exp,
    exp2,
    exp10,
    expm1,
    gamma,
    hypot,
    log,
    log1p,
    log2,
    log10,
    log_gamma,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)
from real_numerics.algorithms.gamma_sign import sign_gamma
from real_numerics.algorithms.native import NativeFunctions
from real_numerics.algorithms.power import (
    INT_MAX,
    INT_MIN,
    pow,
    pow_int,
    pow_real,
    root,
    split_exponent,
)
from real_numerics.algorithms.real_type import (
    RealType,
    RoundingRule,
    Sign,
    get_real_type,
    real_type_of,
)
from real_numerics.algorithms.trig_pi import cos_pi, sin_pi, tan_pi

__all__ = [
    # Capability trait
    "NativeFunctions",
    "RealType",
    "RoundingRule",
    "Sign",
    "get_real_type",
    "real_type_of",
    # Bit primitives
    "is_even",
    "low_word",
    "reciprocal",
    # Pi-relative trigonometry
    "cos_pi",
    "sin_pi",
    "tan_pi",
    # Powers and roots
    "INT_MAX",
    "INT_MIN",
    "pow",
    "pow_int",
    "pow_real",
    "root",
    "split_exponent",
    # Gamma sign
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
]
