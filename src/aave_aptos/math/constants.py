"""Constants for the WadRayMath and PercentageMath libraries."""

# Wad: decimal numbers with 18 digits of precision
WAD_DECIMALS = 18
WAD = 10**WAD_DECIMALS
HALF_WAD = WAD // 2

# Ray: decimal numbers with 27 digits of precision
RAY_DECIMALS = 27
RAY = 10**RAY_DECIMALS
HALF_RAY = RAY // 2

# Ratio to convert between wad and ray
WAD_RAY_RATIO = 10 ** (RAY_DECIMALS - WAD_DECIMALS)
HALF_WAD_RAY_RATIO = WAD_RAY_RATIO // 2

# Percentage: decimal numbers with 4 digits of precision (100.00%)
BPS_DECIMALS = 4
PERCENTAGE_FACTOR = 10**BPS_DECIMALS
HALF_PERCENTAGE = PERCENTAGE_FACTOR // 2

SECONDS_PER_YEAR = 365 * 24 * 60 * 60
