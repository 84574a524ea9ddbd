from typing import Literal

import click
import tomlkit

from aave_aptos.cli import cli
from aave_aptos.config import CONFIG_FILE, save_config_to_file, settings


@cli.group()
def config() -> None:
    """
    Configuration commands
    """


@config.command("show")
@click.option(
    "--json",
    "output_format",
    flag_value="json",
    type=str,
    help="Show configuration in JSON format",
)
@click.option(
    "--toml",
    "output_format",
    flag_value="toml",
    type=str,
    help="Show configuration in TOML format (default)",
    default=True,
)
def config_show(output_format: Literal["json", "toml"]) -> None:
    match output_format:
        case "json":
            click.echo(settings.model_dump_json(indent=2))
        case "toml":
            click.echo(tomlkit.dumps(settings.model_dump()))


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def config_init(*, force: bool) -> None:
    """
    Write the active configuration to the configuration file.
    """

    if CONFIG_FILE.exists() and not force:
        raise click.ClickException(
            f"A configuration file already exists at {CONFIG_FILE}. Use --force to overwrite it."
        )
    save_config_to_file(settings, CONFIG_FILE)
    click.echo(f"Wrote configuration to {CONFIG_FILE}")
