import math
from fractions import Fraction

import hypothesis
import hypothesis.strategies
import pytest

from aave_aptos.exceptions.math import DivisionByZero
from aave_aptos.math.rounding import div_toward_zero, half


def test_div_toward_zero() -> None:
    assert div_toward_zero(7, 2) == 3
    assert div_toward_zero(-7, 2) == -3
    assert div_toward_zero(7, -2) == -3
    assert div_toward_zero(-7, -2) == 3
    assert div_toward_zero(0, -2) == 0


def test_div_toward_zero_by_zero() -> None:
    with pytest.raises(DivisionByZero):
        div_toward_zero(1, 0)


def test_half() -> None:
    assert half(5) == 2
    assert half(-5) == -2
    assert half(0) == 0


@hypothesis.given(
    numerator=hypothesis.strategies.integers(),
    denominator=hypothesis.strategies.integers().filter(lambda x: x != 0),
)
def test_div_toward_zero_fuzzing(numerator: int, denominator: int) -> None:
    assert div_toward_zero(numerator, denominator) == math.trunc(Fraction(numerator, denominator))
