"""Integer division helpers shared by the fixed-point libraries."""

from aave_aptos.exceptions.math import DivisionByZero


def div_toward_zero(numerator: int, denominator: int) -> int:
    """
    Divide two integers, truncating the quotient toward zero.

    Python's `//` operator floors, which differs from truncation when exactly one operand is
    negative: `-7 // 2 == -4`, but `div_toward_zero(-7, 2) == -3`.
    """

    if denominator == 0:
        raise DivisionByZero
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def half(value: int) -> int:
    """
    Half of a value, truncated toward zero.
    """

    return div_toward_zero(value, 2)
