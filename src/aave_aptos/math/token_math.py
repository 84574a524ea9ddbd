"""
Conversions between scaled balances and token balances.

aTokens and variable debt tokens store balances divided by the reserve index at the time of each
mint or burn. Multiplying a scaled balance by the current index gives the token balance.
"""

from aave_aptos.math.wad_ray_math import ray_div, ray_mul


def get_balance(scaled_balance: int, index: int) -> int:
    """
    Calculate the token balance for a scaled balance at the given ray index.
    """

    return ray_mul(scaled_balance, index)


def get_scaled_amount(amount: int, index: int) -> int:
    """
    Calculate the scaled amount for a token amount at the given ray index.
    """

    return ray_div(amount, index)


def get_collateral_balance(scaled_balance: int, liquidity_index: int) -> int:
    return get_balance(scaled_balance, liquidity_index)


def get_debt_balance(scaled_balance: int, variable_borrow_index: int) -> int:
    return get_balance(scaled_balance, variable_borrow_index)
