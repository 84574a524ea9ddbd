from typing import Any

from aave_aptos.exceptions.base import AaveAptosError

"""
Exceptions defined here are raised by classes and functions in the `math` module.
"""


class MathError(AaveAptosError):
    """
    Exception raised inside fixed-point math helpers.
    """


class DivisionByZero(MathError):
    """
    Raised when a fixed-point division is attempted with a zero divisor.
    """

    def __init__(self, message: str = "Division by zero.") -> None:
        self.message = message
        super().__init__(message=message)

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.message,)


class InvalidDecimalLiteral(MathError):
    """
    Raised when a string cannot be parsed as a base-10 decimal literal.
    """

    def __init__(self, literal: str) -> None:
        self.literal = literal
        super().__init__(message=f"Invalid decimal literal {literal!r}.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.literal,)
