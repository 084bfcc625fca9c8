"""
naverapi CLI - Naver Cloud Platform API clients
"""

from typing import Optional

import click

from naverapi import __version__

from .commands import config, geocode, mail, sms
from .service_helpers import configure


@click.group()
@click.version_option(version=__version__, prog_name="naverapi")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Configuration file (default: search the standard locations)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log requests and responses")
def cli(config_path: Optional[str], verbose: bool) -> None:
    """naverapi - Naver Cloud geocoding, mail and SMS from the command line

    Use 'naverapi COMMAND --help' for more information on a command.
    """
    configure(config_path=config_path, verbose=verbose)


# Register command groups
cli.add_command(config)
cli.add_command(geocode)
cli.add_command(mail)
cli.add_command(sms)


if __name__ == "__main__":
    cli()
