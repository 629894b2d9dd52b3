import logging
import os

import click

from gardenctl.cli.commands.config import config_group
from gardenctl.cli.commands.target import new_target_group
from gardenctl.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


def configure_logging(debug: bool) -> None:
    """Enable debug logging for --debug or when GCTL_DEBUG is set."""
    if debug or os.getenv("GCTL_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)
        # basicConfig is a no-op when the root logger already has handlers
        logging.getLogger("gardenctl").setLevel(logging.DEBUG)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gardenctl")
@click.option("--debug", is_flag=True, help="Print debug logs to stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Target and inspect Gardener gardens, projects, seeds and shoots."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)


cli.add_command(config_group)
cli.add_command(new_target_group())


def main() -> None:
    """CLI entry point used by the `gardenctl` console script."""
    cli()
