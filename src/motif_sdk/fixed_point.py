from __future__ import annotations

import decimal
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from . import constants as const
from .errors import InvalidNumberError

# Wide enough to hold any finite float exactly once rounded to 4 places and scaled.
_EXACT_PRECISION = 400

_PERCENT_QUANTUM = decimal.Decimal(1).scaleb(-const.PERCENT_PRECISION_PLACES)


@dataclass(frozen=True, slots=True, order=True)
class DecimalValue:
    """
    A non-negative fixed-point number stored as an integer scaled by 10**18.

    Mirrors the exchange contracts' `Decimal.D256` struct, e.g. 10% is
    `DecimalValue(10 * 10**18)`.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidNumberError(
                f"DecimalValue must wrap an int, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise InvalidNumberError(
                f"DecimalValue must be non-negative, got {self.value}"
            )

    def __add__(self, other: DecimalValue) -> DecimalValue:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return DecimalValue(self.value + other.value)

    def __sub__(self, other: DecimalValue) -> DecimalValue:
        if not isinstance(other, DecimalValue):
            return NotImplemented
        return DecimalValue(self.value - other.value)

    def to_percent(self) -> decimal.Decimal:
        """Return the unscaled value, e.g. `Decimal('12.5')` for 12.5%."""
        with decimal.localcontext() as ctx:
            ctx.prec = _EXACT_PRECISION
            return decimal.Decimal(self.value).scaleb(-const.DECIMAL_PLACES).normalize()

    def as_abi(self) -> tuple[int]:
        return (self.value,)

    @staticmethod
    def from_abi(value: object) -> DecimalValue:
        """
        Decode a `Decimal.D256` value as returned by web3.

        Accepts the `(value,)` tuple, a `{"value": ...}` mapping, or a bare int.
        """
        if isinstance(value, Mapping):
            value = value["value"]
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != 1:
                raise InvalidNumberError("Expected a single-field (value,) tuple")
            value = value[0]
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidNumberError(
                f"Decimal struct value must be an int, got {type(value).__name__}"
            )
        return DecimalValue(int(value))


def _to_exact_decimal(value: object) -> decimal.Decimal:
    if isinstance(value, bool):
        raise InvalidNumberError("Booleans are not numbers")
    if isinstance(value, decimal.Decimal):
        return value
    if isinstance(value, (int, float)):
        return decimal.Decimal(value)
    if isinstance(value, numbers.Real):
        return decimal.Decimal(float(value))
    raise InvalidNumberError(f"Expected a real number, got {type(value).__name__}")


def make_decimal(value: float | int | decimal.Decimal) -> DecimalValue:
    """
    Convert a real-valued percentage into a `DecimalValue`.

    The input is first rounded to 4 fractional digits (ties away from zero, applied
    to the exact binary value, as JavaScript's `toFixed(4)` does) and then scaled by
    10**18 in exact decimal arithmetic. `make_decimal(12.5).value == 12_500_000_000_000_000_000`.
    """
    exact = _to_exact_decimal(value)
    if not exact.is_finite():
        raise InvalidNumberError(f"Decimal input must be finite, got {value!r}")
    if exact < 0:
        raise InvalidNumberError(f"Decimal input must be non-negative, got {value!r}")

    with decimal.localcontext() as ctx:
        ctx.prec = _EXACT_PRECISION
        try:
            rounded = exact.quantize(_PERCENT_QUANTUM, rounding=decimal.ROUND_HALF_UP)
            scaled = rounded.scaleb(const.DECIMAL_PLACES)
        except decimal.InvalidOperation as e:
            raise InvalidNumberError(f"Decimal input is not representable: {value!r}") from e

    return DecimalValue(int(scaled))


def decimal_one_hundred() -> DecimalValue:
    """100% as a `DecimalValue`."""
    return DecimalValue(const.ONE_HUNDRED_PERCENT)
