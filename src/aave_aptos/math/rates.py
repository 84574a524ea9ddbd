import math
import time

from aave_aptos.exceptions import AaveAptosValueError
from aave_aptos.math.constants import SECONDS_PER_YEAR
from aave_aptos.math.fixed_point import RAY_ONE, FixedPointNumber
from aave_aptos.math.ray_math import binomial_approximated_ray_pow, ray_pow


def calculate_compounded_rate(
    rate: FixedPointNumber,
    duration: int | float = SECONDS_PER_YEAR,
) -> FixedPointNumber:
    """
    Calculate the compounded rate over a given duration.

    Args:
        rate: The annual rate, usually a ray
        duration: The duration in seconds, fractional seconds are discarded

    Returns:
        The rate accumulated over the duration, with per-second compounding, at the scale of the
        input rate
    """

    per_second = rate.scale_div(SECONDS_PER_YEAR) + RAY_ONE
    return ray_pow(per_second, math.floor(duration)) - RAY_ONE


def calculate_compounded_interest(
    rate: FixedPointNumber,
    last_update_timestamp: int,
    current_timestamp: int | None = None,
) -> FixedPointNumber:
    """
    Calculate the compounded interest factor accrued since the last update timestamp.

    Args:
        rate: The annual interest rate as a ray
        last_update_timestamp: The UNIX timestamp of the last reserve update
        current_timestamp: The UNIX timestamp to accrue to, defaults to the current time

    Returns:
        The cumulative interest factor as a ray, where `RAY_ONE` means no interest has accrued
    """

    if current_timestamp is None:
        current_timestamp = math.floor(time.time())

    time_delta = current_timestamp - last_update_timestamp
    if time_delta < 0:
        raise AaveAptosValueError(
            message=f"Timestamp {last_update_timestamp} is later than {current_timestamp}."
        )

    rate_per_second = rate.scale_div(SECONDS_PER_YEAR)
    return binomial_approximated_ray_pow(rate_per_second, time_delta)
