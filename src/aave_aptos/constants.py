__all__ = (
    "AAVE_REFERRAL",
    "MAX_BORROW_CAP",
    "MAX_SUPPLY_CAP",
    "MAX_UINT256",
    "MAX_UINT_AMOUNT",
    "MAX_UNBACKED_MINT_CAP",
    "ONE_ADDRESS",
    "ONE_OCTA",
    "ZERO_ADDRESS",
    "InterestRateMode",
)

import typing
from enum import IntEnum


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


MAX_UINT256 = _max_uint(256)

# APT has 8 decimal places, the smallest unit is an octa
ONE_OCTA = 10**8

MAX_UINT_AMOUNT = MAX_UINT256

# Reserve caps are stored in 36 bits of the reserve configuration bitmap
MAX_BORROW_CAP = _max_uint(36)
MAX_SUPPLY_CAP = _max_uint(36)
MAX_UNBACKED_MINT_CAP = _max_uint(36)

ZERO_ADDRESS = "0x0"
ONE_ADDRESS = "0x1"

AAVE_REFERRAL = 0


class InterestRateMode(IntEnum):
    NONE = 0
    VARIABLE = 2
