"""Configuration management commands."""

import click
from rich.markup import escape

from naverapi.core.config import SECTIONS

# Values never printed in clear
_SECRET_KEYS = {"client_secret", "secret_key"}


@click.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    from naverapi.cli.console import console
    from naverapi.cli.service_helpers import handle_result, services

    config_obj = handle_result(services.config.get_config())

    console.print("\n[bold]Current Configuration[/bold]")
    if config_obj._source:
        console.print(f"[dim]Source: {escape(config_obj._source)}[/dim]\n")
    else:
        console.print("[dim]Source: defaults (no config file found)[/dim]\n")

    for section_name in SECTIONS:
        section = getattr(config_obj, section_name, {})
        if section:
            console.print(f"[bold blue]\\[{section_name}][/bold blue]")
            for key, value in section.items():
                if key in _SECRET_KEYS and value:
                    value = "********"
                console.print(f"  {escape(str(key))} = {escape(str(value))}")
            console.print()


@config.command("init")
@click.argument("output", default="naverapi.toml", required=False)
@click.option("--force", "-f", is_flag=True, help="Overwrite existing file")
def config_init(output: str, force: bool) -> None:
    """Create a default configuration file at OUTPUT (default: ./naverapi.toml)."""
    from naverapi.cli.console import print_error, print_success
    from naverapi.cli.service_helpers import services

    result = services.config.create_default_config(output, force=force)

    if not result.success:
        print_error(result.error)
        if "already exists" in result.error:
            click.echo("Use --force to overwrite.")
        raise SystemExit(1)

    print_success(f"Created configuration file: {result.data}")


@config.command("path")
def config_path() -> None:
    """Show configuration file search paths."""
    from naverapi.cli.service_helpers import handle_result, services

    active = handle_result(services.config.get_config())._source
    locations = handle_result(services.config.get_config_locations())

    click.echo("Files are searched in order (first found wins):\n")
    for location in locations:
        marker = "*" if active and location == active else " "
        click.echo(f" {marker} {location}")
