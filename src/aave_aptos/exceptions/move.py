from typing import Any

from aave_aptos.exceptions.base import AaveAptosError

"""
Exceptions defined here are raised while handling Move identifiers and view function results.
"""


class MoveError(AaveAptosError):
    """
    Exception raised inside Move helpers.
    """


class InvalidAccountAddress(MoveError):
    def __init__(self, address: str) -> None:
        """
        Raised when a string is not a valid Aptos account address.
        """

        self.address = address
        super().__init__(message=f"{address!r} is not a valid account address.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.address,)


class InvalidMoveFunctionId(MoveError):
    """
    Raised when a string is not a fully-qualified `<address>::<module>::<function>` identifier.
    """

    def __init__(self, function_id: str) -> None:
        self.function_id = function_id
        super().__init__(message=f"{function_id!r} is not a valid Move function identifier.")

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.function_id,)


class ViewResultError(MoveError):
    """
    Raised when a view function result does not have the expected shape.
    """
