from .config import settings
from .logging import logger
from .version import __version__

# isort: split

from . import constants, exceptions, math, move, ui_pool_data
from .math import (
    HALF_PERCENTAGE,
    HALF_RAY,
    HALF_WAD,
    PERCENTAGE_FACTOR,
    RAY,
    WAD,
    WAD_RAY_RATIO,
    Bps,
    FixedPointNumber,
    Ray,
    Wad,
    WadRayMath,
    negated,
    percent_div,
    percent_mul,
    ray_div,
    ray_mul,
    ray_to_wad,
    wad_div,
    wad_mul,
    wad_to_ray,
)
from .move import MoveFunctionId, MoveModule, normalize_account_address
from .ui_pool_data import parse_reserves_data, parse_user_reserves_data

__all__ = (
    "HALF_PERCENTAGE",
    "HALF_RAY",
    "HALF_WAD",
    "PERCENTAGE_FACTOR",
    "RAY",
    "WAD",
    "WAD_RAY_RATIO",
    "Bps",
    "FixedPointNumber",
    "MoveFunctionId",
    "MoveModule",
    "Ray",
    "Wad",
    "WadRayMath",
    "__version__",
    "constants",
    "exceptions",
    "logger",
    "math",
    "move",
    "negated",
    "normalize_account_address",
    "parse_reserves_data",
    "parse_user_reserves_data",
    "percent_div",
    "percent_mul",
    "ray_div",
    "ray_mul",
    "ray_to_wad",
    "settings",
    "ui_pool_data",
    "wad_div",
    "wad_mul",
    "wad_to_ray",
)
