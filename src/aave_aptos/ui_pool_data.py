"""
Typed models for results returned by the `ui_pool_data_provider_v3` view functions.

The view functions return Move structs as JSON objects with snake_case keys. Integers wider than
32 bits arrive as decimal strings, and addresses arrive in whatever form the node chooses to
serialize them. The models here normalize both.
"""

from collections.abc import Sequence
from typing import Annotated, Any

import pydantic
from pydantic import BeforeValidator, ConfigDict

from aave_aptos.exceptions import AaveAptosValueError
from aave_aptos.exceptions.move import ViewResultError
from aave_aptos.logging import logger
from aave_aptos.math.constants import SECONDS_PER_YEAR
from aave_aptos.math.fixed_point import FixedPointNumber, Ray
from aave_aptos.math.rates import calculate_compounded_rate
from aave_aptos.math.token_math import get_collateral_balance, get_debt_balance
from aave_aptos.move import move_value_to_int, normalize_account_address


def _view_account_address(value: Any) -> str:
    if not isinstance(value, str):
        raise ViewResultError(message=f"Expected an account address, got {value!r}.")
    return normalize_account_address(value)


MoveInt = Annotated[int, BeforeValidator(move_value_to_int)]
AccountAddress = Annotated[str, BeforeValidator(_view_account_address)]


class _ViewModel(pydantic.BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class AggregatedReserveData(_ViewModel):
    underlying_asset: AccountAddress
    name: str
    symbol: str
    decimals: MoveInt
    base_ltv_as_collateral: MoveInt
    reserve_liquidation_threshold: MoveInt
    reserve_liquidation_bonus: MoveInt
    reserve_factor: MoveInt
    usage_as_collateral_enabled: bool
    borrowing_enabled: bool
    is_active: bool
    is_frozen: bool

    # base data
    liquidity_index: MoveInt
    variable_borrow_index: MoveInt
    liquidity_rate: MoveInt
    variable_borrow_rate: MoveInt
    last_update_timestamp: MoveInt
    a_token_address: AccountAddress
    variable_debt_token_address: AccountAddress

    available_liquidity: MoveInt
    total_scaled_variable_debt: MoveInt
    price_in_market_reference_currency: MoveInt
    variable_rate_slope1: MoveInt
    variable_rate_slope2: MoveInt
    base_variable_borrow_rate: MoveInt
    optimal_usage_ratio: MoveInt

    is_paused: bool
    is_siloed_borrowing: bool
    accrued_to_treasury: MoveInt
    isolation_mode_total_debt: MoveInt
    flash_loan_enabled: bool

    debt_ceiling: MoveInt
    debt_ceiling_decimals: MoveInt
    e_mode_category_id: MoveInt
    borrow_cap: MoveInt
    supply_cap: MoveInt

    # e-mode
    e_mode_ltv: MoveInt
    e_mode_liquidation_threshold: MoveInt
    e_mode_liquidation_bonus: MoveInt
    e_mode_label: str
    borrowable_in_isolation: bool

    # liquidation
    deficit: MoveInt
    virtual_underlying_balance: MoveInt
    is_virtual_acc_active: bool

    @property
    def supply_apy(self) -> FixedPointNumber:
        """
        The liquidity rate compounded per second over one year, as a ray.
        """

        return calculate_compounded_rate(Ray(self.liquidity_rate), SECONDS_PER_YEAR)

    @property
    def variable_borrow_apy(self) -> FixedPointNumber:
        """
        The variable borrow rate compounded per second over one year, as a ray.
        """

        return calculate_compounded_rate(Ray(self.variable_borrow_rate), SECONDS_PER_YEAR)

    @property
    def total_variable_debt(self) -> int:
        return get_debt_balance(self.total_scaled_variable_debt, self.variable_borrow_index)


class BaseCurrencyData(_ViewModel):
    market_reference_currency_unit: MoveInt
    market_reference_currency_price_in_usd: MoveInt
    network_base_token_price_in_usd: MoveInt
    network_base_token_price_decimals: MoveInt


class ReservesData(_ViewModel):
    reserves_data: list[AggregatedReserveData]
    base_currency_data: BaseCurrencyData

    def reserve(self, underlying_asset: str) -> AggregatedReserveData:
        asset = normalize_account_address(underlying_asset)
        for reserve in self.reserves_data:
            if reserve.underlying_asset == asset:
                return reserve
        raise AaveAptosValueError(message=f"No reserve found for asset {asset}.")


class UserReserveData(_ViewModel):
    underlying_asset: AccountAddress
    scaled_a_token_balance: MoveInt
    usage_as_collateral_enabled_on_user: bool
    scaled_variable_debt: MoveInt
    decimals: MoveInt

    def _check_reserve(self, reserve: AggregatedReserveData) -> None:
        if reserve.underlying_asset != self.underlying_asset:
            raise AaveAptosValueError(
                message=f"Reserve {reserve.underlying_asset} does not match user reserve "
                f"{self.underlying_asset}."
            )

    def current_a_token_balance(self, reserve: AggregatedReserveData) -> int:
        self._check_reserve(reserve)
        return get_collateral_balance(self.scaled_a_token_balance, reserve.liquidity_index)

    def current_variable_debt(self, reserve: AggregatedReserveData) -> int:
        self._check_reserve(reserve)
        return get_debt_balance(self.scaled_variable_debt, reserve.variable_borrow_index)


class UserReservesData(_ViewModel):
    user_reserves: list[UserReserveData]
    user_emode_category_id: MoveInt


def _unpack_view_result(view_result: Any, function_name: str) -> tuple[Any, Any]:
    if not isinstance(view_result, Sequence) or isinstance(view_result, str | bytes):
        raise ViewResultError(message=f"{function_name} returned {type(view_result).__name__}.")
    if len(view_result) < 2:  # noqa: PLR2004
        raise ViewResultError(
            message=f"{function_name} returned {len(view_result)} values, expected 2."
        )
    return view_result[0], view_result[1]


def parse_reserves_data(view_result: Sequence[Any]) -> ReservesData:
    """
    Decode the result of `get_reserves_data`, a pair of (reserve rows, base currency info).
    """

    rows, base_currency = _unpack_view_result(view_result, "get_reserves_data")
    try:
        reserves = ReservesData(
            reserves_data=rows,
            base_currency_data=base_currency,
        )
    except pydantic.ValidationError as exc:
        raise ViewResultError(message=f"Could not decode reserves data: {exc}") from exc

    logger.debug(f"Decoded {len(reserves.reserves_data)} reserves")
    return reserves


def parse_user_reserves_data(view_result: Sequence[Any]) -> UserReservesData:
    """
    Decode the result of `get_user_reserves_data`, a pair of (user reserve rows, e-mode id).
    """

    rows, emode_category_id = _unpack_view_result(view_result, "get_user_reserves_data")
    try:
        user_reserves = UserReservesData(
            user_reserves=rows,
            user_emode_category_id=emode_category_id,
        )
    except pydantic.ValidationError as exc:
        raise ViewResultError(message=f"Could not decode user reserves data: {exc}") from exc

    logger.debug(f"Decoded {len(user_reserves.user_reserves)} user reserves")
    return user_reserves
