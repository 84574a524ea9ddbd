from aave_aptos.math.constants import HALF_PERCENTAGE, PERCENTAGE_FACTOR
from aave_aptos.math.rounding import div_toward_zero, half


def percent_mul(value: int, percentage: int) -> int:
    """
    Multiplies a value by a percentage expressed in basis points, rounding half up.
    """

    return div_toward_zero(value * percentage + HALF_PERCENTAGE, PERCENTAGE_FACTOR)


def percent_div(value: int, percentage: int) -> int:
    """
    Divides a value by a percentage expressed in basis points, rounding half up.
    """

    return div_toward_zero(value * PERCENTAGE_FACTOR + half(percentage), percentage)
