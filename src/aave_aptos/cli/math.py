from collections.abc import Callable

import click

from aave_aptos.cli import cli
from aave_aptos.exceptions import AaveAptosError
from aave_aptos.math import (
    percent_div,
    percent_mul,
    ray_div,
    ray_mul,
    ray_to_wad,
    wad_div,
    wad_mul,
    wad_to_ray,
)


# Accept negative operands without treating them as options
_SIGNED_OPERANDS = {"ignore_unknown_options": True}


def _echo_result(operation: Callable[..., int], *args: int) -> None:
    try:
        result = operation(*args)
    except AaveAptosError as exc:
        raise click.ClickException(exc.message or type(exc).__name__) from exc
    click.echo(result)


@cli.group()
def math() -> None:
    """
    Integer wad, ray and percentage arithmetic
    """


@math.command("wad-mul", context_settings=_SIGNED_OPERANDS)
@click.argument("a", type=int)
@click.argument("b", type=int)
def math_wad_mul(a: int, b: int) -> None:
    """
    Multiply two wads.
    """

    _echo_result(wad_mul, a, b)


@math.command("wad-div", context_settings=_SIGNED_OPERANDS)
@click.argument("a", type=int)
@click.argument("b", type=int)
def math_wad_div(a: int, b: int) -> None:
    """
    Divide two wads.
    """

    _echo_result(wad_div, a, b)


@math.command("ray-mul", context_settings=_SIGNED_OPERANDS)
@click.argument("a", type=int)
@click.argument("b", type=int)
def math_ray_mul(a: int, b: int) -> None:
    """
    Multiply two rays.
    """

    _echo_result(ray_mul, a, b)


@math.command("ray-div", context_settings=_SIGNED_OPERANDS)
@click.argument("a", type=int)
@click.argument("b", type=int)
def math_ray_div(a: int, b: int) -> None:
    """
    Divide two rays.
    """

    _echo_result(ray_div, a, b)


@math.command("percent-mul", context_settings=_SIGNED_OPERANDS)
@click.argument("value", type=int)
@click.argument("bps", type=int)
def math_percent_mul(value: int, bps: int) -> None:
    """
    Multiply a value by a percentage in basis points.
    """

    _echo_result(percent_mul, value, bps)


@math.command("percent-div", context_settings=_SIGNED_OPERANDS)
@click.argument("value", type=int)
@click.argument("bps", type=int)
def math_percent_div(value: int, bps: int) -> None:
    """
    Divide a value by a percentage in basis points.
    """

    _echo_result(percent_div, value, bps)


@math.command("ray-to-wad", context_settings=_SIGNED_OPERANDS)
@click.argument("a", type=int)
def math_ray_to_wad(a: int) -> None:
    """
    Convert a ray to a wad.
    """

    _echo_result(ray_to_wad, a)


@math.command("wad-to-ray", context_settings=_SIGNED_OPERANDS)
@click.argument("a", type=int)
def math_wad_to_ray(a: int) -> None:
    """
    Convert a wad to a ray.
    """

    _echo_result(wad_to_ray, a)
