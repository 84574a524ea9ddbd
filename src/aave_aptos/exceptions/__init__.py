from aave_aptos.exceptions.base import AaveAptosError, AaveAptosTypeError, AaveAptosValueError
from aave_aptos.exceptions.math import DivisionByZero, InvalidDecimalLiteral, MathError
from aave_aptos.exceptions.move import (
    InvalidAccountAddress,
    InvalidMoveFunctionId,
    MoveError,
    ViewResultError,
)

from . import math, move

__all__ = (
    "AaveAptosError",
    "AaveAptosTypeError",
    "AaveAptosValueError",
    "DivisionByZero",
    "InvalidAccountAddress",
    "InvalidDecimalLiteral",
    "InvalidMoveFunctionId",
    "MathError",
    "MoveError",
    "ViewResultError",
    "math",
    "move",
)
