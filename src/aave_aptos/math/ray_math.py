"""
Ray arithmetic on `FixedPointNumber` operands.

Unlike the integer functions in `wad_ray_math`, these functions track the scale of their
operands. Multiplying two 27-decimal numbers gives a 27-decimal result; multiplying a 27-decimal
number by a 0-decimal number gives a 0-decimal result.
"""

from aave_aptos.exceptions import AaveAptosValueError
from aave_aptos.exceptions.math import DivisionByZero
from aave_aptos.math.constants import (
    HALF_RAY,
    HALF_WAD_RAY_RATIO,
    RAY,
    RAY_DECIMALS,
    WAD_RAY_RATIO,
)
from aave_aptos.math.fixed_point import RAY_ONE, FixedPointNumber
from aave_aptos.math.rounding import div_toward_zero, half

# The number of decimal places separating wad and ray
WAD_RAY_DECIMALS = 9


def ray_mul(a: FixedPointNumber, b: FixedPointNumber) -> FixedPointNumber:
    scale = max(a.scale + b.scale, RAY_DECIMALS)
    return FixedPointNumber(
        div_toward_zero(HALF_RAY + a.value * b.value, RAY),
        scale - RAY_DECIMALS,
    )


def ray_div(a: FixedPointNumber, b: FixedPointNumber) -> FixedPointNumber:
    if b.value == 0:
        raise DivisionByZero
    scale = max(a.scale + RAY_DECIMALS, b.scale)
    return FixedPointNumber(
        div_toward_zero(half(b.value) + a.value * RAY, b.value),
        scale - b.scale,
    )


def ray_to_wad(a: FixedPointNumber) -> FixedPointNumber:
    scale = max(a.scale, WAD_RAY_DECIMALS)
    return FixedPointNumber(
        div_toward_zero(HALF_WAD_RAY_RATIO + a.value, WAD_RAY_RATIO),
        scale - WAD_RAY_DECIMALS,
    )


def wad_to_ray(a: FixedPointNumber) -> FixedPointNumber:
    return FixedPointNumber(a.value * WAD_RAY_RATIO, a.scale + WAD_RAY_DECIMALS)


def ray_pow(a: FixedPointNumber, p: int) -> FixedPointNumber:
    """
    Raise a ray to an integer power using exponentiation by squaring.

    Each intermediate product is rounded by `ray_mul`, so the result matches a contract that
    performs the same sequence of multiplications.
    """

    if p < 0:
        raise AaveAptosValueError(message=f"Exponent must be non-negative, got {p}.")

    x = a
    z = x if p % 2 != 0 else RAY_ONE

    n = p // 2
    while n != 0:
        x = ray_mul(x, x)
        if n % 2 != 0:
            z = ray_mul(z, x)
        n //= 2

    return z


def binomial_approximated_ray_pow(a: FixedPointNumber, p: int) -> FixedPointNumber:
    """
    Approximate `(1 + a)^p` with the first four terms of the binomial expansion.

    Exact exponentiation is too expensive to run on-chain, so the protocol accrues compound
    interest with this approximation. Results are slightly below the exact value.
    """

    if p < 0:
        raise AaveAptosValueError(message=f"Exponent must be non-negative, got {p}.")
    if p == 0:
        return RAY_ONE

    exp_minus_one = p - 1
    exp_minus_two = p - 2 if p > 2 else 0

    base_power_two = ray_mul(a, a)
    base_power_three = ray_mul(base_power_two, a)

    first_term = a.mul(p)
    second_term = base_power_two.mul(exp_minus_one).mul(p).scale_div(2)
    third_term = base_power_three.mul(exp_minus_two).mul(exp_minus_one).mul(p).scale_div(6)

    return RAY_ONE + first_term + second_term + third_term
