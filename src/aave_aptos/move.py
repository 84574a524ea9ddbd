"""
Helpers for Move identifiers and values returned by Aptos view functions.
"""

import dataclasses
import functools
import re
from typing import Any, Self

from aave_aptos.exceptions import AaveAptosValueError
from aave_aptos.exceptions.move import InvalidAccountAddress, InvalidMoveFunctionId, ViewResultError

ACCOUNT_ADDRESS_LENGTH = 32
_ADDRESS_HEX_DIGITS = 2 * ACCOUNT_ADDRESS_LENGTH
_SPECIAL_ADDRESS_LIMIT = 0x10

_HEX_ADDRESS = re.compile(r"(0x)?[0-9a-fA-F]{1,64}")
_MOVE_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INTEGER = re.compile(r"-?\d+", re.ASCII)


def normalize_account_address(address: str) -> str:
    """
    Convert an account address to its canonical string form (AIP-40).

    Special addresses 0x0 through 0xf use the short form, e.g. "0x1". All other addresses are
    zero-padded to 64 lowercase hex digits.
    """

    if not isinstance(address, str):
        raise InvalidAccountAddress(address=repr(address))
    return _normalize_account_address(address)


@functools.lru_cache(maxsize=1024)
def _normalize_account_address(address: str) -> str:
    if _HEX_ADDRESS.fullmatch(address) is None:
        raise InvalidAccountAddress(address=address)

    as_int = int(address, 16)
    if as_int < _SPECIAL_ADDRESS_LIMIT:
        return f"0x{as_int:x}"
    return f"0x{as_int:0{_ADDRESS_HEX_DIGITS}x}"


def _validate_identifier(identifier: str, function_id: str) -> str:
    if _MOVE_IDENTIFIER.fullmatch(identifier) is None:
        raise InvalidMoveFunctionId(function_id=function_id)
    return identifier


@dataclasses.dataclass(slots=True, frozen=True)
class MoveFunctionId:
    """
    A fully-qualified Move function, rendered as `<address>::<module>::<function>`.
    """

    address: str
    module: str
    function: str

    def __post_init__(self) -> None:
        function_id = f"{self.address}::{self.module}::{self.function}"
        try:
            address = normalize_account_address(self.address)
        except InvalidAccountAddress as exc:
            raise InvalidMoveFunctionId(function_id=function_id) from exc
        _validate_identifier(self.module, function_id)
        _validate_identifier(self.function, function_id)
        object.__setattr__(self, "address", address)

    @classmethod
    def from_string(cls, function_id: str) -> Self:
        try:
            address, module, function = function_id.split("::")
        except (AttributeError, ValueError) as exc:
            raise InvalidMoveFunctionId(function_id=str(function_id)) from exc
        return cls(address=address, module=module, function=function)

    def __str__(self) -> str:
        return f"{self.address}::{self.module}::{self.function}"


@dataclasses.dataclass(slots=True, frozen=True)
class MoveModule:
    """
    A Move module published at an account address.
    """

    address: str
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", normalize_account_address(self.address))
        if _MOVE_IDENTIFIER.fullmatch(self.name) is None:
            raise InvalidMoveFunctionId(function_id=f"{self.address}::{self.name}")

    def function(self, name: str) -> MoveFunctionId:
        return MoveFunctionId(address=self.address, module=self.name, function=name)


def move_value_to_int(value: Any) -> int:
    """
    Convert a Move integer returned by a view function to a Python `int`.

    The REST API returns u8, u16 and u32 values as JSON numbers and u64, u128 and u256 values as
    decimal strings.
    """

    match value:
        case bool():
            raise ViewResultError(message=f"Expected an integer, got boolean {value}.")
        case int():
            return value
        case str() if _INTEGER.fullmatch(value):
            return int(value)
        case _:
            raise ViewResultError(message=f"Expected an integer, got {value!r}.")


def string_to_bytes(data: str) -> bytes:
    return data.encode("utf-8")


def bytes_to_string(data: bytes) -> str:
    return data.decode("utf-8")


def string_to_hex(data: str) -> str:
    """
    Encode a UTF-8 string as a 0x-prefixed hex string, e.g. "hello" -> "0x68656c6c6f".
    """

    return "0x" + string_to_bytes(data).hex()


def hex_to_bytes(hex_string: str) -> bytes:
    hex_string = hex_string.removeprefix("0x")
    try:
        return bytes.fromhex(hex_string)
    except ValueError as exc:
        raise AaveAptosValueError(message=f"{hex_string!r} is not a hex string.") from exc
