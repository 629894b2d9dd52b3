import dataclasses

import click

from gardenctl.cli.ensure import Ensure
from gardenctl.cli.output import machine_output, user_output
from gardenctl.core.context import GardenctlContext, GlobalConfigNotFound
from gardenctl.core.global_config import GlobalConfig, parse_output_format, save_global_config

CONFIG_KEYS = ("output", "gardens")


def _parse_gardens(value: str) -> list[str]:
    """Parse a comma separated list of garden names, dropping blanks."""
    return [name.strip() for name in value.split(",") if name.strip()]


def _update_global_config_field(current_config: GlobalConfig, key: str, value: str) -> GlobalConfig:
    """Update a single field in GlobalConfig and return a new instance.

    Raises:
        SystemExit: If the key or value is invalid
    """
    match key:
        case "output":
            try:
                output = parse_output_format(value)
            except ValueError as e:
                user_output(click.style("Error: ", fg="red") + str(e))
                raise SystemExit(1) from e
            return dataclasses.replace(current_config, output=output)
        case "gardens":
            return dataclasses.replace(current_config, gardens=_parse_gardens(value))
        case _:
            user_output(click.style("Error: ", fg="red") + f"Invalid config key: {key}")
            raise SystemExit(1)


@click.group("config")
def config_group() -> None:
    """Manage gardenctl configuration."""


@config_group.command("view")
@click.pass_obj
def config_view(ctx: GardenctlContext) -> None:
    """Print configuration keys and values."""
    click.echo(click.style("Global configuration:", bold=True))
    if isinstance(ctx.global_config, GlobalConfigNotFound):
        click.echo(f"  (not configured - {ctx.config_path} does not exist)")
        return

    click.echo(f"  output={ctx.global_config.output}")
    if ctx.global_config.gardens:
        click.echo(f"  gardens={','.join(ctx.global_config.gardens)}")
    else:
        click.echo("  gardens=")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: GardenctlContext, key: str) -> None:
    """Print the value of a given configuration key."""
    Ensure.invariant(key in CONFIG_KEYS, f"Invalid config key: {key}")
    config = ctx.global_config
    if isinstance(config, GlobalConfigNotFound):
        config = GlobalConfig()

    match key:
        case "output":
            machine_output(config.output)
        case "gardens":
            for name in config.gardens:
                machine_output(name)


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: GardenctlContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key.

    Creates the config file if it does not exist yet. Gardens are given as a
    comma separated list.
    """
    current = ctx.global_config
    if isinstance(current, GlobalConfigNotFound):
        current = GlobalConfig()

    new_config = _update_global_config_field(current, key, value)
    save_global_config(new_config, ctx.config_path)
    user_output(f"Set {key}={value}")
