from aave_aptos.math import constants, percentage_math, ray_math, rates, token_math, wad_ray_math
from aave_aptos.math.constants import (
    BPS_DECIMALS,
    HALF_PERCENTAGE,
    HALF_RAY,
    HALF_WAD,
    HALF_WAD_RAY_RATIO,
    PERCENTAGE_FACTOR,
    RAY,
    RAY_DECIMALS,
    SECONDS_PER_YEAR,
    WAD,
    WAD_DECIMALS,
    WAD_RAY_RATIO,
)
from aave_aptos.math.fixed_point import HALF_RAY_ONE, RAY_ONE, Bps, FixedPointNumber, Ray, Wad
from aave_aptos.math.percentage_math import percent_div, percent_mul
from aave_aptos.math.rates import calculate_compounded_interest, calculate_compounded_rate
from aave_aptos.math.wad_ray_math import (
    WadRayMath,
    negated,
    ray_div,
    ray_mul,
    ray_to_wad,
    wad_div,
    wad_mul,
    wad_to_ray,
)

__all__ = (
    "BPS_DECIMALS",
    "HALF_PERCENTAGE",
    "HALF_RAY",
    "HALF_RAY_ONE",
    "HALF_WAD",
    "HALF_WAD_RAY_RATIO",
    "PERCENTAGE_FACTOR",
    "RAY",
    "RAY_DECIMALS",
    "RAY_ONE",
    "SECONDS_PER_YEAR",
    "WAD",
    "WAD_DECIMALS",
    "WAD_RAY_RATIO",
    "Bps",
    "FixedPointNumber",
    "Ray",
    "Wad",
    "WadRayMath",
    "calculate_compounded_interest",
    "calculate_compounded_rate",
    "constants",
    "negated",
    "percent_div",
    "percent_mul",
    "percentage_math",
    "ray_div",
    "ray_math",
    "ray_mul",
    "ray_to_wad",
    "rates",
    "token_math",
    "wad_div",
    "wad_mul",
    "wad_ray_math",
    "wad_to_ray",
)
