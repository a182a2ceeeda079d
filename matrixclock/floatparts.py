"""Splitting a non-negative float into the parts printed in JSON.

A value is written as ``integral.decimal`` followed by ``e<exponent>`` when
the exponent is not zero.  Large and tiny values are first brought into
``[1, 10)`` by powers of ten.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Callable
from dataclasses import dataclass

POSITIVE_EXPONENTIATION_THRESHOLD = 1e7
NEGATIVE_EXPONENTIATION_THRESHOLD = 1e-5


def _single(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _rounding(double: bool) -> Callable[[float], float]:
    return float if double else _single


def _power_of_ten(exponent: int, double: bool) -> float:
    return _rounding(double)(float(f"1e{exponent}"))


def normalize(value: float, double: bool = True) -> tuple[float, int]:
    """Scale ``value`` by powers of ten; return it with the power removed."""
    rnd = _rounding(double)
    index = 8 if double else 5
    bit = 1 << index
    powers_of_10 = 0

    if value >= POSITIVE_EXPONENTIATION_THRESHOLD:
        while index >= 0:
            if value >= _power_of_ten(bit, double):
                value = rnd(value * _power_of_ten(-bit, double))
                powers_of_10 += bit
            bit >>= 1
            index -= 1

    if 0 < value <= NEGATIVE_EXPONENTIATION_THRESHOLD:
        while index >= 0:
            if value < _power_of_ten(1 - bit, double):
                value = rnd(value * _power_of_ten(bit, double))
                powers_of_10 -= bit
            bit >>= 1
            index -= 1

    return value, powers_of_10


@dataclass(frozen=True)
class FloatParts:
    """Digits of a float: ``integral``, ``decimal`` with ``decimal_places``
    digits, and a power-of-ten ``exponent``."""

    integral: int
    decimal: int
    exponent: int
    decimal_places: int

    @classmethod
    def from_float(cls, value: float, double: bool = True) -> FloatParts:
        """Split a finite non-negative value, in double or single precision."""
        if not math.isfinite(value) or value < 0:
            raise ValueError(f"expected a finite non-negative number, got {value!r}")
        rnd = _rounding(double)
        try:
            value = rnd(float(value))
        except OverflowError:
            raise ValueError(f"{value!r} does not fit in single precision") from None

        max_decimal_part = 1_000_000_000 if double else 1_000_000
        decimal_places = 9 if double else 6

        value, exponent = normalize(value, double)

        integral = int(value)
        tmp = integral
        while tmp >= 10:
            max_decimal_part //= 10
            decimal_places -= 1
            tmp //= 10

        remainder = rnd(rnd(value - integral) * max_decimal_part)
        decimal = int(remainder)
        remainder = rnd(remainder - decimal)

        decimal += int(remainder * 2)
        if decimal >= max_decimal_part:
            decimal = 0
            integral += 1
            if exponent and integral >= 10:
                exponent += 1
                integral = 1

        while decimal % 10 == 0 and decimal_places > 0:
            decimal //= 10
            decimal_places -= 1

        return cls(integral, decimal, exponent, decimal_places)