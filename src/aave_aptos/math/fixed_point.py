"""
Immutable fixed-point numbers.

A `FixedPointNumber` stores a signed integer `value` and a decimal-place count `scale`. The
number it represents is `value / 10**scale`. Precision beyond `scale` is never retained: parsing
and down-scaling truncate toward zero, and floats are rejected outright.

Decimal strings are rendered with exactly `scale` fractional digits. Trailing zeros are never
trimmed, so the rendering of a value is fully determined by its scale:

    >>> str(FixedPointNumber("1.5", 3))
    '1.500'
    >>> str(FixedPointNumber(5, 3))
    '0.005'
"""

import functools
import re
from decimal import Decimal
from fractions import Fraction
from typing import Any, Self

from aave_aptos.exceptions import AaveAptosTypeError, AaveAptosValueError
from aave_aptos.exceptions.math import DivisionByZero, InvalidDecimalLiteral
from aave_aptos.logging import logger
from aave_aptos.math.constants import BPS_DECIMALS, HALF_RAY, RAY, RAY_DECIMALS, WAD_DECIMALS
from aave_aptos.math.rounding import div_toward_zero

type FixedPointNumberValue = int | str | FixedPointNumber

_DECIMAL_LITERAL = re.compile(r"(?P<sign>[+-])?(?P<integer>\d+)(?:\.(?P<fraction>\d+))?", re.ASCII)


def parse_decimal_literal(literal: str, scale: int) -> int:
    """
    Convert a base-10 literal to an integer scaled by `10**scale`.

    Fraction digits beyond `scale` are truncated toward zero.
    """

    if not isinstance(literal, str) or (match := _DECIMAL_LITERAL.fullmatch(literal)) is None:
        raise InvalidDecimalLiteral(literal=str(literal))

    fraction = match["fraction"] or ""
    if len(fraction) > scale:
        logger.debug(f"Truncating {literal} to {scale} decimal places")
    fraction = fraction[:scale].ljust(scale, "0")

    magnitude = int(match["integer"] + fraction)
    return -magnitude if match["sign"] == "-" else magnitude


def format_scaled_integer(value: int, scale: int) -> str:
    """
    Render an integer scaled by `10**scale` as a decimal string with `scale` fractional digits.
    """

    digits = str(abs(value)).rjust(scale + 1, "0")
    sign = "-" if value < 0 else ""
    if scale == 0:
        return f"{sign}{digits}"
    return f"{sign}{digits[:-scale]}.{digits[-scale:]}"


def rescale_integer(value: int, from_scale: int, to_scale: int) -> int:
    """
    Move an integer from one scale to another. Down-scaling truncates toward zero.
    """

    if to_scale >= from_scale:
        return value * 10 ** (to_scale - from_scale)
    return div_toward_zero(value, 10 ** (from_scale - to_scale))


def _validate_scale(scale: Any) -> int:
    if isinstance(scale, bool) or not isinstance(scale, int):
        raise AaveAptosTypeError(message=f"Scale must be an integer, got {type(scale).__name__}.")
    if scale < 0:
        raise AaveAptosValueError(message=f"Scale must be non-negative, got {scale}.")
    return scale


@functools.total_ordering
class FixedPointNumber:
    """
    A signed fixed-point number with an explicit number of decimal places.

    The constructor accepts:
        - an `int`, interpreted as a raw value already scaled by `10**scale`
        - a `str` decimal literal such as "-12.5", scaled and truncated to `scale` places
        - another `FixedPointNumber`, rescaled to `scale`

    Instances compare and hash by the number they represent, so `FixedPointNumber(15, 1)` equals
    `FixedPointNumber(150, 2)`.
    """

    __slots__ = ("_scale", "_value")

    _value: int
    _scale: int

    def __init__(self, value: FixedPointNumberValue, scale: int) -> None:
        scale = _validate_scale(scale)

        match value:
            case bool():
                raise AaveAptosTypeError(message="Booleans are not fixed-point values.")
            case int():
                raw = value
            case str():
                raw = parse_decimal_literal(value, scale)
            case FixedPointNumber():
                raw = rescale_integer(value.value, value.scale, scale)
            case _:
                raise AaveAptosTypeError(
                    message=f"Cannot build a fixed-point number from {type(value).__name__}."
                )

        object.__setattr__(self, "_value", raw)
        object.__setattr__(self, "_scale", scale)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return FixedPointNumber, (self._value, self._scale)

    @property
    def value(self) -> int:
        return self._value

    @property
    def scale(self) -> int:
        return self._scale

    @classmethod
    def from_decimal_string(cls, literal: str, scale: int) -> "FixedPointNumber":
        if not isinstance(literal, str):
            raise InvalidDecimalLiteral(literal=str(literal))
        return FixedPointNumber(literal, scale)

    def to_decimal_string(self) -> str:
        return format_scaled_integer(self._value, self._scale)

    def to_decimal(self) -> Decimal:
        return Decimal(self.to_decimal_string())

    def to_fraction(self) -> Fraction:
        return Fraction(self._value, 10**self._scale)

    def rescale(self, scale: int) -> "FixedPointNumber":
        return FixedPointNumber(self, scale)

    def mul(self, multiplier: int) -> "FixedPointNumber":
        """
        Multiply by a plain integer, keeping the scale.
        """

        return FixedPointNumber(self._value * multiplier, self._scale)

    def scale_div(self, divisor: int) -> "FixedPointNumber":
        """
        Divide by a plain integer, keeping the scale and truncating toward zero.
        """

        if divisor == 0:
            raise DivisionByZero
        return FixedPointNumber(div_toward_zero(self._value, divisor), self._scale)

    def _aligned(self, other: "FixedPointNumber") -> tuple[int, int, int]:
        scale = max(self._scale, other._scale)
        return (
            rescale_integer(self._value, self._scale, scale),
            rescale_integer(other._value, other._scale, scale),
            scale,
        )

    def add(self, other: "FixedPointNumber") -> "FixedPointNumber":
        a, b, scale = self._aligned(other)
        return FixedPointNumber(a + b, scale)

    def sub(self, other: "FixedPointNumber") -> "FixedPointNumber":
        a, b, scale = self._aligned(other)
        return FixedPointNumber(a - b, scale)

    def __add__(self, other: object) -> "FixedPointNumber":
        if not isinstance(other, FixedPointNumber):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "FixedPointNumber":
        if not isinstance(other, FixedPointNumber):
            return NotImplemented
        return self.sub(other)

    def __neg__(self) -> "FixedPointNumber":
        return FixedPointNumber(-self._value, self._scale)

    def __abs__(self) -> "FixedPointNumber":
        return FixedPointNumber(abs(self._value), self._scale)

    def __bool__(self) -> bool:
        return self._value != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedPointNumber):
            return NotImplemented
        a, b, _ = self._aligned(other)
        return a == b

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedPointNumber):
            return NotImplemented
        a, b, _ = self._aligned(other)
        return a < b

    def __hash__(self) -> int:
        return hash(self.to_fraction())

    def __str__(self) -> str:
        return self.to_decimal_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value}, scale={self._scale})"


class _FixedScaleNumber(FixedPointNumber):
    __slots__ = ()

    DECIMALS: int

    def __init__(self, value: FixedPointNumberValue) -> None:
        super().__init__(value, self.DECIMALS)

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self._value,)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    @classmethod
    def from_fixed_point(cls, number: FixedPointNumber) -> Self:
        return cls(number)


class Wad(_FixedScaleNumber):
    __slots__ = ()
    DECIMALS = WAD_DECIMALS


class Ray(_FixedScaleNumber):
    __slots__ = ()
    DECIMALS = RAY_DECIMALS


class Bps(_FixedScaleNumber):
    __slots__ = ()
    DECIMALS = BPS_DECIMALS


RAY_ONE = Ray(RAY)
HALF_RAY_ONE = Ray(HALF_RAY)
