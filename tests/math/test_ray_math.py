import pytest

from aave_aptos.exceptions import AaveAptosValueError
from aave_aptos.exceptions.math import DivisionByZero
from aave_aptos.math.fixed_point import RAY_ONE, FixedPointNumber, Ray, Wad
from aave_aptos.math.ray_math import (
    binomial_approximated_ray_pow,
    ray_div,
    ray_mul,
    ray_pow,
    ray_to_wad,
    wad_to_ray,
)


def test_ray_mul() -> None:
    result = ray_mul(Ray("1.5"), Ray("2"))
    assert result == Ray("3")
    assert result.scale == 27


def test_ray_mul_tracks_scale() -> None:
    result = ray_mul(FixedPointNumber(10, 0), Ray("0.5"))
    assert result.scale == 0
    assert result.value == 5


def test_ray_div() -> None:
    result = ray_div(Ray("3"), Ray("2"))
    assert result == Ray("1.5")
    assert result.scale == 27


def test_ray_div_by_zero() -> None:
    with pytest.raises(DivisionByZero):
        ray_div(Ray("3"), Ray(0))


def test_ray_to_wad() -> None:
    result = ray_to_wad(Ray("1.5"))
    assert result == Wad("1.5")
    assert result.scale == 18


def test_wad_to_ray() -> None:
    result = wad_to_ray(Wad("2"))
    assert result == Ray("2")
    assert result.scale == 27


def test_ray_pow() -> None:
    assert ray_pow(Ray("2"), 10) == Ray("1024")
    assert ray_pow(Ray("1.5"), 1) == Ray("1.5")
    assert ray_pow(Ray("1.1"), 3) == Ray("1.331")
    assert ray_pow(Ray("1.1"), 0) == RAY_ONE
    assert ray_pow(Ray(0), 0) == RAY_ONE


def test_ray_pow_negative_exponent() -> None:
    with pytest.raises(AaveAptosValueError):
        ray_pow(Ray("1.1"), -1)


def test_binomial_approximated_ray_pow() -> None:
    assert binomial_approximated_ray_pow(Ray("0.1"), 0) == RAY_ONE
    assert binomial_approximated_ray_pow(Ray("0.1"), 1) == Ray("1.1")
    assert binomial_approximated_ray_pow(Ray("0.1"), 2) == Ray("1.21")
    assert binomial_approximated_ray_pow(Ray("0.1"), 3) == Ray("1.331")


def test_binomial_approximation_is_below_exact_power() -> None:
    rate = Ray("0.0000001")
    approximated = binomial_approximated_ray_pow(rate, 1000)
    exact = ray_pow(RAY_ONE + rate, 1000)
    assert approximated < exact
    assert exact - approximated < Ray("0.000000000001")


def test_binomial_approximation_negative_exponent() -> None:
    with pytest.raises(AaveAptosValueError):
        binomial_approximated_ray_pow(Ray("0.1"), -2)
