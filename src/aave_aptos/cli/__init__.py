import click

from aave_aptos.version import __version__


@click.group()
@click.version_option(version=__version__)
def cli() -> None: ...


from . import config, fixed_point, math  # noqa: F401, E402
