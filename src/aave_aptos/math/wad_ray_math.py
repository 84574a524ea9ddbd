"""
Integer WAD (18 decimal) and RAY (27 decimal) fixed-point arithmetic.

Each operation adds a half-unit bias before dividing, which rounds results half away from zero
for non-negative inputs. The quotient is truncated toward zero, so negative inputs are biased
upward before truncation instead of being floored.
"""

from aave_aptos.math.constants import (
    HALF_PERCENTAGE,
    HALF_RAY,
    HALF_WAD,
    HALF_WAD_RAY_RATIO,
    PERCENTAGE_FACTOR,
    RAY,
    WAD,
    WAD_RAY_RATIO,
)
from aave_aptos.math.percentage_math import percent_div, percent_mul
from aave_aptos.math.rounding import div_toward_zero, half


def wad_mul(a: int, b: int) -> int:
    """
    Multiplies two wad, rounding half up to the nearest wad.
    """

    return div_toward_zero(HALF_WAD + a * b, WAD)


def wad_div(a: int, b: int) -> int:
    """
    Divides two wad, rounding half up to the nearest wad.
    """

    return div_toward_zero(half(b) + a * WAD, b)


def ray_mul(a: int, b: int) -> int:
    """
    Multiplies two ray, rounding half up to the nearest ray.
    """

    return div_toward_zero(HALF_RAY + a * b, RAY)


def ray_div(a: int, b: int) -> int:
    """
    Divides two ray, rounding half up to the nearest ray.
    """

    return div_toward_zero(half(b) + a * RAY, b)


def ray_to_wad(a: int) -> int:
    """
    Casts ray value down to wad, rounding half up to the nearest wad.

    The bias is half of WAD_RAY_RATIO, not half a wad, so that `ray_to_wad(wad_to_ray(a)) == a`.
    """

    return div_toward_zero(HALF_WAD_RAY_RATIO + a, WAD_RAY_RATIO)


def wad_to_ray(a: int) -> int:
    """
    Convert wad value up to ray.
    """

    return a * WAD_RAY_RATIO


def negated(a: int) -> int:
    return -a


class WadRayMath:
    """
    Namespace exposing the integer fixed-point operations and their constants as static methods.
    """

    @staticmethod
    def wad() -> int:
        return WAD

    @staticmethod
    def half_wad() -> int:
        return HALF_WAD

    @staticmethod
    def ray() -> int:
        return RAY

    @staticmethod
    def half_ray() -> int:
        return HALF_RAY

    @staticmethod
    def percentage_factor() -> int:
        return PERCENTAGE_FACTOR

    @staticmethod
    def half_percentage() -> int:
        return HALF_PERCENTAGE

    @staticmethod
    def wad_ray_ratio() -> int:
        return WAD_RAY_RATIO

    wad_mul = staticmethod(wad_mul)
    wad_div = staticmethod(wad_div)
    ray_mul = staticmethod(ray_mul)
    ray_div = staticmethod(ray_div)
    percent_mul = staticmethod(percent_mul)
    percent_div = staticmethod(percent_div)
    ray_to_wad = staticmethod(ray_to_wad)
    wad_to_ray = staticmethod(wad_to_ray)
    negated = staticmethod(negated)
