"""
Unit tests for src.motif_sdk.fixed_point module.

Tests cover:
- DecimalValue construction, arithmetic and ABI conversion
- make_decimal rounding to 4 fractional digits and exact 10**18 scaling
- make_decimal rejection of negative, non-finite and non-real inputs
"""

import decimal
from dataclasses import FrozenInstanceError

import pytest

from motif_sdk import (
    DecimalValue,
    InvalidNumberError,
    constants,
    decimal_one_hundred,
    make_decimal,
)

SCALE = constants.DECIMAL_SCALE

# ================================================================
# DecimalValue Tests
# ================================================================


class TestDecimalValue:
    """Tests for the scaled integer wrapper."""

    def test_wraps_scaled_integer(self) -> None:
        """Test the stored value is the scaled integer itself."""
        assert DecimalValue(10 * SCALE).value == 10 * SCALE

    def test_zero_is_allowed(self) -> None:
        """Test zero is a valid share."""
        assert DecimalValue(0).value == 0

    @pytest.mark.parametrize("bad", [-1, 1.5, "10", True, None])
    def test_rejects_non_int_or_negative(self, bad: object) -> None:
        """Test only non-negative ints are accepted."""
        with pytest.raises(InvalidNumberError):
            DecimalValue(bad)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        """Test DecimalValue is immutable."""
        value = DecimalValue(1)
        with pytest.raises(FrozenInstanceError):
            value.value = 2  # type: ignore[misc]

    def test_addition_and_subtraction(self) -> None:
        """Test arithmetic stays exact in the scaled domain."""
        a = DecimalValue(40 * SCALE)
        b = DecimalValue(60 * SCALE)
        assert (a + b) == decimal_one_hundred()
        assert (b - a).value == 20 * SCALE

    def test_subtraction_below_zero_raises(self) -> None:
        """Test results stay non-negative."""
        with pytest.raises(InvalidNumberError):
            DecimalValue(1) - DecimalValue(2)

    def test_ordering(self) -> None:
        """Test values compare by magnitude."""
        assert DecimalValue(1) < DecimalValue(2)

    def test_to_percent(self) -> None:
        """Test conversion back to an unscaled percentage."""
        assert DecimalValue(12_500_000_000_000_000_000).to_percent() == decimal.Decimal(
            "12.5"
        )

    def test_as_abi(self) -> None:
        """Test the D256 struct encoding is a single-field tuple."""
        assert DecimalValue(5).as_abi() == (5,)

    @pytest.mark.parametrize("raw", [(7,), [7], {"value": 7}, 7])
    def test_from_abi_accepts_web3_shapes(self, raw: object) -> None:
        """Test tuples, lists, mappings and bare ints decode."""
        assert DecimalValue.from_abi(raw) == DecimalValue(7)

    def test_from_abi_rejects_wrong_arity(self) -> None:
        """Test multi-field tuples are rejected."""
        with pytest.raises(InvalidNumberError):
            DecimalValue.from_abi((1, 2))


# ================================================================
# make_decimal Tests
# ================================================================


class TestMakeDecimal:
    """Tests for converting real percentages to DecimalValue."""

    def test_integer_input(self) -> None:
        """Test whole percentages scale exactly."""
        assert make_decimal(10).value == 10 * SCALE

    def test_fractional_input(self) -> None:
        """Test 12.5 scales to 12.5 * 10**18 exactly."""
        assert make_decimal(12.5).value == 12_500_000_000_000_000_000

    def test_rounds_to_four_places(self) -> None:
        """Test extra fractional digits are rounded away before scaling."""
        assert make_decimal(33.33333).value == 33_333_300_000_000_000_000

    def test_half_rounds_away_from_zero(self) -> None:
        """Test a tie at the fifth digit rounds up."""
        assert make_decimal(decimal.Decimal("0.00005")).value == 100_000_000_000_000
        assert make_decimal(decimal.Decimal("0.00004")).value == 0

    def test_float_noise_does_not_leak(self) -> None:
        """Test 0.1 + 0.2 becomes exactly 0.3 after rounding."""
        assert make_decimal(0.1 + 0.2).value == 300_000_000_000_000_000

    def test_one_hundred(self) -> None:
        """Test 100 equals the 100% constant."""
        assert make_decimal(100) == decimal_one_hundred()
        assert decimal_one_hundred().value == constants.ONE_HUNDRED_PERCENT

    def test_zero(self) -> None:
        """Test zero converts to zero."""
        assert make_decimal(0).value == 0

    @pytest.mark.parametrize(
        "bad", [-1, -0.5, float("nan"), float("inf"), float("-inf")]
    )
    def test_rejects_negative_and_non_finite(self, bad: float) -> None:
        """Test invalid numeric inputs raise InvalidNumberError."""
        with pytest.raises(InvalidNumberError):
            make_decimal(bad)

    @pytest.mark.parametrize("bad", [True, "10", None, [1]])
    def test_rejects_non_real(self, bad: object) -> None:
        """Test non-numeric inputs raise InvalidNumberError."""
        with pytest.raises(InvalidNumberError):
            make_decimal(bad)  # type: ignore[arg-type]

    def test_invalid_number_is_value_error(self) -> None:
        """Test InvalidNumberError can be caught as ValueError."""
        with pytest.raises(ValueError):
            make_decimal(-1)
