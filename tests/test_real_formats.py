"""Tests for real_formats module."""

import numpy as np
import pytest

from real_numerics.algorithms.real_type import get_real_type
from real_numerics.data.real_formats import (
    DEFAULT_FORMAT,
    HAS_FP80,
    HAS_ML_DTYPES,
    RealFormat,
    format_of,
    get_compute_dtype,
    get_dtype,
    get_spec,
    is_promoted,
    list_available_formats,
)


class TestRealFormat:
    """Tests for RealFormat enum."""

    def test_all_formats_defined(self) -> None:
        """Verify all expected formats exist."""
        expected = {"fp16", "bf16", "fp32", "fp64", "fp80"}
        actual = {f.value for f in RealFormat}
        assert actual == expected

    def test_format_values_lowercase(self) -> None:
        """Format values should be lowercase."""
        for fmt in RealFormat:
            assert fmt.value == fmt.value.lower()

    def test_default_is_fp64(self) -> None:
        assert DEFAULT_FORMAT is RealFormat.FP64


class TestGetSpec:
    """Tests for get_spec function."""

    @pytest.mark.parametrize(
        "fmt,expected_bits",
        [
            (RealFormat.FP64, 64),
            (RealFormat.FP32, 32),
            (RealFormat.FP16, 16),
            (RealFormat.BF16, 16),
            (RealFormat.FP80, 80),
            ("fp64", 64),
            ("FP32", 32),
            ("bf-16", 16),
            ("fp_80", 80),
        ],
    )
    def test_get_spec_bits(self, fmt: RealFormat | str, expected_bits: int) -> None:
        """Verify bit counts for each format."""
        spec = get_spec(fmt)
        assert spec.bits == expected_bits

    def test_ieee_interchange_layout(self) -> None:
        """Sign + exponent + stored significand should equal total bits."""
        for fmt in [RealFormat.FP16, RealFormat.BF16, RealFormat.FP32, RealFormat.FP64]:
            spec = get_spec(fmt)
            assert 1 + spec.exponent_bits + spec.mantissa_bits == spec.bits
            assert spec.significand_bits == spec.mantissa_bits + 1

    def test_fp80_has_explicit_integer_bit(self) -> None:
        """x87 extended stores its leading bit, so precision equals the field width."""
        spec = get_spec(RealFormat.FP80)
        assert 1 + spec.exponent_bits + spec.mantissa_bits == spec.bits
        assert spec.significand_bits == spec.mantissa_bits == 64

    def test_exponent_range_is_symmetric_around_bias(self) -> None:
        for fmt in RealFormat:
            spec = get_spec(fmt)
            assert spec.min_exponent == 1 - spec.max_exponent
            assert spec.max_exponent == 2 ** (spec.exponent_bits - 1) - 1

    def test_bytes_property(self) -> None:
        """Bytes should be bits / 8."""
        for fmt in RealFormat:
            spec = get_spec(fmt)
            assert spec.bytes == spec.bits // 8

    def test_all_formats_are_binary(self) -> None:
        for fmt in RealFormat:
            assert get_spec(fmt).radix == 2

    @pytest.mark.parametrize(
        "fmt,expected",
        [
            ("fp16", 2.0**-10),
            ("bf16", 2.0**-7),
            ("fp32", 2.0**-23),
            ("fp64", 2.0**-52),
        ],
    )
    def test_ulp_of_one(self, fmt: str, expected: float) -> None:
        assert get_spec(fmt).ulp_of_one == expected

    @pytest.mark.parametrize("fmt", ["fp16", "fp32", "fp64"])
    def test_real_type_uses_registry_ulp(self, fmt: str) -> None:
        assert get_real_type(fmt).ulp_of_one == get_spec(fmt).ulp_of_one

    def test_split_bits_match_compute_precision(self) -> None:
        """Integers below 2**split_bits must convert exactly to the compute dtype."""
        for fmt in [RealFormat.FP16, RealFormat.FP32, RealFormat.FP64]:
            spec = get_spec(fmt)
            compute = np.finfo(get_compute_dtype(fmt))
            assert spec.exponent_split_bits == compute.nmant + 1

    def test_spec_is_frozen(self) -> None:
        spec = get_spec("fp32")
        with pytest.raises(AttributeError):
            spec.bits = 64  # type: ignore[misc]

    def test_unknown_format_raises(self) -> None:
        """Unknown format should raise ValueError."""
        with pytest.raises(ValueError, match="Unknown real format"):
            get_spec("fp128")


class TestGetDtype:
    """Tests for get_dtype function."""

    def test_fp64_dtype(self) -> None:
        """FP64 should return float64."""
        assert get_dtype("fp64") == np.float64

    def test_fp32_dtype(self) -> None:
        """FP32 should return float32."""
        assert get_dtype("fp32") == np.float32

    def test_fp16_dtype(self) -> None:
        """FP16 should return float16."""
        assert get_dtype("fp16") == np.float16

    @pytest.mark.skipif(not HAS_ML_DTYPES, reason="ml_dtypes not installed")
    def test_bf16_dtype(self) -> None:
        """BF16 should return ml_dtypes type when available."""
        import ml_dtypes

        assert get_dtype("bf16") == ml_dtypes.bfloat16

    @pytest.mark.skipif(HAS_ML_DTYPES, reason="ml_dtypes is installed")
    def test_bf16_without_ml_dtypes_raises(self) -> None:
        with pytest.raises(ImportError, match="ml-dtypes"):
            get_dtype("bf16")

    @pytest.mark.skipif(not HAS_FP80, reason="longdouble is not x87 extended")
    def test_fp80_dtype(self) -> None:
        assert get_dtype("fp80") == np.longdouble

    @pytest.mark.skipif(HAS_FP80, reason="longdouble is x87 extended")
    def test_fp80_unavailable_raises(self) -> None:
        with pytest.raises(ValueError, match="not supported on this platform"):
            get_dtype("fp80")


class TestComputeDtype:
    """Tests for the compute dtype of promoted formats."""

    def test_fp16_computes_in_float32(self) -> None:
        assert get_compute_dtype("fp16") == np.float32
        assert is_promoted("fp16")

    @pytest.mark.skipif(not HAS_ML_DTYPES, reason="ml_dtypes not installed")
    def test_bf16_computes_in_float32(self) -> None:
        assert get_compute_dtype("bf16") == np.float32
        assert is_promoted(RealFormat.BF16)

    @pytest.mark.parametrize("fmt", ["fp32", "fp64"])
    def test_wide_formats_compute_in_storage_dtype(self, fmt: str) -> None:
        assert get_compute_dtype(fmt) == get_dtype(fmt)
        assert not is_promoted(fmt)


class TestFormatOf:
    """Tests for inferring a format from a value."""

    @pytest.mark.parametrize("value", [1.5, 3, True])
    def test_python_numbers_are_fp64(self, value: object) -> None:
        assert format_of(value) is RealFormat.FP64

    @pytest.mark.parametrize(
        "value,expected",
        [
            (np.float16(1), RealFormat.FP16),
            (np.float32(1), RealFormat.FP32),
            (np.float64(1), RealFormat.FP64),
        ],
    )
    def test_numpy_scalars(self, value: object, expected: RealFormat) -> None:
        assert format_of(value) is expected

    @pytest.mark.skipif(not HAS_ML_DTYPES, reason="ml_dtypes not installed")
    def test_bfloat16_scalar(self) -> None:
        import ml_dtypes

        assert format_of(ml_dtypes.bfloat16(1)) is RealFormat.BF16

    def test_unsupported_dtype_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported real dtype"):
            format_of(np.complex128(1))


class TestListAvailableFormats:
    """Tests for list_available_formats function."""

    def test_standard_formats_always_available(self) -> None:
        """FP16, FP32 and FP64 should always be available."""
        available = list_available_formats()
        assert RealFormat.FP64 in available
        assert RealFormat.FP32 in available
        assert RealFormat.FP16 in available

    def test_optional_formats_follow_platform(self) -> None:
        available = list_available_formats()
        assert (RealFormat.BF16 in available) == HAS_ML_DTYPES
        assert (RealFormat.FP80 in available) == HAS_FP80
