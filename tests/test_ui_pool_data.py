import copy
from typing import Any

import pydantic
import pytest

from aave_aptos.exceptions import AaveAptosValueError
from aave_aptos.exceptions.move import InvalidAccountAddress, ViewResultError
from aave_aptos.math.fixed_point import FixedPointNumber, Ray
from aave_aptos.math.rates import calculate_compounded_rate
from aave_aptos.ui_pool_data import (
    AggregatedReserveData,
    parse_reserves_data,
    parse_user_reserves_data,
)

USDC_ADDRESS = "0xbae207659db88bea0cbead6da0ed00aac12edcdda169e591cd41c94180b46f3b"
A_TOKEN_ADDRESS = "0xabc"
VARIABLE_DEBT_TOKEN_ADDRESS = "0xdef"

RESERVE_ROW: dict[str, Any] = {
    "underlying_asset": USDC_ADDRESS.upper().replace("0X", "0x"),
    "name": "USDC",
    "symbol": "USDC",
    "decimals": 6,
    "base_ltv_as_collateral": "7500",
    "reserve_liquidation_threshold": "7800",
    "reserve_liquidation_bonus": "10500",
    "reserve_factor": "1000",
    "usage_as_collateral_enabled": True,
    "borrowing_enabled": True,
    "is_active": True,
    "is_frozen": False,
    "liquidity_index": "1050000000000000000000000000",
    "variable_borrow_index": "1100000000000000000000000000",
    "liquidity_rate": "0",
    "variable_borrow_rate": "50000000000000000000000000",
    "last_update_timestamp": "1730000000",
    "a_token_address": A_TOKEN_ADDRESS,
    "variable_debt_token_address": VARIABLE_DEBT_TOKEN_ADDRESS,
    "available_liquidity": "5000000000",
    "total_scaled_variable_debt": "1000000",
    "price_in_market_reference_currency": "100000000",
    "variable_rate_slope1": "40000000000000000000000000",
    "variable_rate_slope2": "600000000000000000000000000",
    "base_variable_borrow_rate": "0",
    "optimal_usage_ratio": "900000000000000000000000000",
    "is_paused": False,
    "is_siloed_borrowing": False,
    "accrued_to_treasury": "0",
    "isolation_mode_total_debt": "0",
    "flash_loan_enabled": True,
    "debt_ceiling": "0",
    "debt_ceiling_decimals": "2",
    "e_mode_category_id": 0,
    "borrow_cap": "0",
    "supply_cap": "0",
    "e_mode_ltv": 0,
    "e_mode_liquidation_threshold": 0,
    "e_mode_liquidation_bonus": 0,
    "e_mode_label": "",
    "borrowable_in_isolation": False,
    "deficit": "0",
    "virtual_underlying_balance": "0",
    "is_virtual_acc_active": False,
}

BASE_CURRENCY: dict[str, Any] = {
    "market_reference_currency_unit": "100000000",
    "market_reference_currency_price_in_usd": "100000000",
    "network_base_token_price_in_usd": "850000000",
    "network_base_token_price_decimals": 8,
}

USER_RESERVE_ROW: dict[str, Any] = {
    "underlying_asset": USDC_ADDRESS,
    "scaled_a_token_balance": "1000000",
    "usage_as_collateral_enabled_on_user": True,
    "scaled_variable_debt": "200",
    "decimals": 6,
}


@pytest.fixture
def reserve() -> AggregatedReserveData:
    return parse_reserves_data([[RESERVE_ROW], BASE_CURRENCY]).reserves_data[0]


def test_parse_reserves_data() -> None:
    reserves = parse_reserves_data([[RESERVE_ROW], BASE_CURRENCY])

    assert len(reserves.reserves_data) == 1
    reserve = reserves.reserves_data[0]
    assert reserve.underlying_asset == USDC_ADDRESS
    assert reserve.a_token_address == "0x" + "0" * 61 + "abc"
    assert reserve.decimals == 6
    assert reserve.liquidity_index == 1_050000000000000000000000000
    assert reserve.is_frozen is False
    assert reserve.e_mode_label == ""

    assert reserves.base_currency_data.network_base_token_price_in_usd == 850000000
    assert reserves.base_currency_data.network_base_token_price_decimals == 8


def test_reserve_lookup() -> None:
    reserves = parse_reserves_data([[RESERVE_ROW], BASE_CURRENCY])
    assert reserves.reserve(USDC_ADDRESS.removeprefix("0x")).symbol == "USDC"
    with pytest.raises(AaveAptosValueError):
        reserves.reserve("0x1")


def test_computed_reserve_values(reserve: AggregatedReserveData) -> None:
    assert reserve.supply_apy == FixedPointNumber(0, 27)
    assert reserve.variable_borrow_apy == calculate_compounded_rate(Ray("0.05"))
    assert reserve.variable_borrow_apy > Ray("0.05")
    assert reserve.total_variable_debt == 1_100_000


def test_reserve_models_are_frozen(reserve: AggregatedReserveData) -> None:
    with pytest.raises(pydantic.ValidationError):
        reserve.symbol = "USDT"  # type: ignore[misc]


def test_parse_user_reserves_data(reserve: AggregatedReserveData) -> None:
    user_reserves = parse_user_reserves_data([[USER_RESERVE_ROW], 0])

    assert user_reserves.user_emode_category_id == 0
    user_reserve = user_reserves.user_reserves[0]
    assert user_reserve.underlying_asset == USDC_ADDRESS
    assert user_reserve.scaled_a_token_balance == 1_000_000
    assert user_reserve.usage_as_collateral_enabled_on_user is True
    assert user_reserve.current_a_token_balance(reserve) == 1_050_000
    assert user_reserve.current_variable_debt(reserve) == 220


def test_user_reserve_asset_mismatch(reserve: AggregatedReserveData) -> None:
    row = copy.deepcopy(USER_RESERVE_ROW)
    row["underlying_asset"] = "0x1"
    user_reserve = parse_user_reserves_data([[row], 0]).user_reserves[0]

    with pytest.raises(AaveAptosValueError):
        user_reserve.current_a_token_balance(reserve)
    with pytest.raises(AaveAptosValueError):
        user_reserve.current_variable_debt(reserve)


@pytest.mark.parametrize("view_result", [[], [[RESERVE_ROW]], "data", None, {"a": 1}])
def test_malformed_view_result(view_result: Any) -> None:
    with pytest.raises(ViewResultError):
        parse_reserves_data(view_result)
    with pytest.raises(ViewResultError):
        parse_user_reserves_data(view_result)


def test_missing_reserve_field() -> None:
    row = copy.deepcopy(RESERVE_ROW)
    del row["liquidity_index"]
    with pytest.raises(ViewResultError):
        parse_reserves_data([[row], BASE_CURRENCY])


def test_invalid_reserve_integer() -> None:
    row = copy.deepcopy(RESERVE_ROW)
    row["liquidity_index"] = "1.05"
    with pytest.raises(ViewResultError):
        parse_reserves_data([[row], BASE_CURRENCY])


def test_invalid_reserve_address() -> None:
    row = copy.deepcopy(RESERVE_ROW)
    row["a_token_address"] = "not an address"
    with pytest.raises(InvalidAccountAddress):
        parse_reserves_data([[row], BASE_CURRENCY])


def test_invalid_user_emode_category() -> None:
    with pytest.raises(ViewResultError):
        parse_user_reserves_data([[USER_RESERVE_ROW], "one"])


@pytest.mark.parametrize("address", [{"inner": "0x1"}, ["0x1"], 1])
def test_non_string_reserve_address(address: Any) -> None:
    row = copy.deepcopy(RESERVE_ROW)
    row["underlying_asset"] = address
    with pytest.raises(ViewResultError):
        parse_reserves_data([[row], BASE_CURRENCY])


def test_non_string_user_reserve_address() -> None:
    row = copy.deepcopy(USER_RESERVE_ROW)
    row["underlying_asset"] = {"inner": USDC_ADDRESS}
    with pytest.raises(ViewResultError):
        parse_user_reserves_data([[row], 0])
