import click

from aave_aptos.cli import cli
from aave_aptos.config import settings
from aave_aptos.exceptions import AaveAptosError
from aave_aptos.math import SECONDS_PER_YEAR, FixedPointNumber, Ray, calculate_compounded_rate

_DECIMALS_HELP = "Number of decimal places (default from config)"
_SIGNED_OPERANDS = {"ignore_unknown_options": True}


@cli.command("format", context_settings=_SIGNED_OPERANDS)
@click.argument("raw", type=int)
@click.option("--decimals", type=click.IntRange(min=0), default=None, help=_DECIMALS_HELP)
def format_raw(raw: int, decimals: int | None) -> None:
    """
    Render a raw scaled integer as a decimal string.
    """

    click.echo(
        FixedPointNumber(
            raw,
            settings.display_decimals if decimals is None else decimals,
        ).to_decimal_string()
    )


@cli.command("parse", context_settings=_SIGNED_OPERANDS)
@click.argument("literal", type=str)
@click.option("--decimals", type=click.IntRange(min=0), default=None, help=_DECIMALS_HELP)
def parse_literal(literal: str, decimals: int | None) -> None:
    """
    Convert a decimal string to a raw scaled integer.
    """

    try:
        number = FixedPointNumber(
            literal,
            settings.display_decimals if decimals is None else decimals,
        )
    except AaveAptosError as exc:
        raise click.ClickException(exc.message or type(exc).__name__) from exc
    click.echo(number.value)


@cli.command("apy")
@click.argument("rate", type=int)
def apy(rate: int) -> None:
    """
    Compound an annual ray rate per second over one year.
    """

    click.echo(calculate_compounded_rate(Ray(rate), SECONDS_PER_YEAR).to_decimal_string())
