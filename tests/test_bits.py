"""Tests for bit-level primitives."""

import numpy as np
import pytest

from real_numerics.algorithms.bits import (
    _is_even_by_remainder,
    is_even,
    low_word,
    reciprocal,
)
from real_numerics.algorithms.real_type import get_real_type

WORD = 2**64


class TestIsEven:
    """Tests for the parity of integral values."""

    @pytest.mark.parametrize(
        "x,expected",
        [
            (0.0, True),
            (-0.0, True),
            (2.0, True),
            (3.0, False),
            (-4.0, True),
            (-5.0, False),
            (2.0**53, True),
            (2.0**53 - 1, False),
            (1e300, True),
        ],
    )
    def test_fp64(self, x: float, expected: bool) -> None:
        real = get_real_type("fp64")
        assert is_even(real, real.coerce(x)) is expected

    @pytest.mark.parametrize(
        "x,expected",
        [(2.0**24 - 1, False), (2.0**24, True), (-(2.0**23) - 1, False)],
    )
    def test_fp32(self, x: float, expected: bool) -> None:
        real = get_real_type("fp32")
        assert is_even(real, real.coerce(x)) is expected

    @pytest.mark.parametrize("x", [0.0, 1.0, -1.0, 6.0, -7.0, 2.0**52 + 1, 2.0**60])
    def test_remainder_form_agrees(self, x: float) -> None:
        """The radix-independent remainder test gives the same parity."""
        real = get_real_type("fp64")
        value = real.coerce(x)
        assert _is_even_by_remainder(real, value) is is_even(real, value)


class TestLowWord:
    """Tests for the low 64 bits of the integer part."""

    @pytest.mark.parametrize(
        "x,expected",
        [
            (0.0, 0),
            (5.0, 5),
            (5.7, 5),
            (-1.0, WORD - 1),
            (-1.5, WORD - 2),
            (2.0**62, 2**62),
        ],
    )
    def test_small_values(self, x: float, expected: int) -> None:
        real = get_real_type("fp64")
        assert low_word(real, real.coerce(x)) == expected

    @pytest.mark.parametrize(
        "x,expected",
        [
            (2.0**63, 2**63),
            (-(2.0**63), 2**63),
            (2.0**64, 0),
            (2.0**64 + 4096, 4096),
            (-(2.0**64), 0),
            (-(2.0**64 + 4096), WORD - 4096),
            (3 * 2.0**64, 0),
            (1e300, 0),
        ],
    )
    def test_large_values(self, x: float, expected: int) -> None:
        real = get_real_type("fp64")
        assert low_word(real, real.coerce(x)) == expected

    def test_fp32_large_value(self) -> None:
        real = get_real_type("fp32")
        x = np.float32(2.0**64 + 2.0**41)
        assert low_word(real, x) == 2**41

    def test_result_is_unsigned_word(self) -> None:
        real = get_real_type("fp64")
        for x in (-1e18, -3.0, 1e18, 2.0**70 + 2.0**20):
            word = low_word(real, real.coerce(x))
            assert 0 <= word < WORD
            assert word == int(x) % WORD

    @pytest.mark.parametrize("x", [np.inf, -np.inf, np.nan])
    def test_non_finite_raises(self, x: float) -> None:
        real = get_real_type("fp64")
        with pytest.raises(ValueError, match="non-finite"):
            low_word(real, real.coerce(x))


class TestReciprocal:
    """Tests for the safe reciprocal."""

    def test_normal_result(self) -> None:
        assert reciprocal(4.0) == 0.25

    def test_keeps_format(self) -> None:
        result = reciprocal(np.float32(3.0))
        assert result is not None
        assert result.dtype == np.float32
        assert result == np.float32(1) / np.float32(3)

    @pytest.mark.parametrize(
        "x,expected",
        [(0.0, np.inf), (-0.0, -np.inf), (np.inf, 0.0), (-np.inf, -0.0)],
    )
    def test_zero_and_infinity(self, x: float, expected: float) -> None:
        result = reciprocal(x)
        assert result == expected
        assert np.signbit(result) == np.signbit(expected)

    def test_nan_propagates(self) -> None:
        result = reciprocal(np.nan)
        assert result is not None
        assert np.isnan(result)

    def test_subnormal_result_is_none(self) -> None:
        assert reciprocal(np.finfo(np.float64).max) is None

    def test_overflowing_result_is_none(self) -> None:
        assert reciprocal(2.0**-1074) is None

    def test_least_normal_is_invertible(self) -> None:
        assert reciprocal(np.finfo(np.float64).tiny) == 2.0**1022

    def test_fp16_uses_storage_range(self) -> None:
        """1/65504 is normal in float32 but subnormal in FP16."""
        assert reciprocal(np.float16(65504)) is None
        assert reciprocal(np.float16(2**-24)) is None
        half = reciprocal(np.float16(2))
        assert half is not None
        assert half.dtype == np.float16
        assert half == 0.5

    def test_explicit_format(self) -> None:
        result = reciprocal(3.0, "fp32")
        assert result is not None
        assert result.dtype == np.float32
