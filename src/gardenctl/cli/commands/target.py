"""Target commands.

Each command owns its own TargetFlags instance: the flags are bound when the
command is built and filled in by click while the command line is parsed.
"""

import logging

import click

from gardenctl.cli.ensure import Ensure
from gardenctl.cli.json_output import TargetResponse, emit_json, emit_yaml
from gardenctl.cli.output import machine_output, user_output
from gardenctl.core.context import GardenctlContext
from gardenctl.core.global_config import OUTPUT_FORMATS
from gardenctl.target.target import Target
from gardenctl.target.target_flags import new_target_flags

logger = logging.getLogger(__name__)


def _emit_target(target: Target, output_format: str) -> None:
    match output_format:
        case "json":
            emit_json(TargetResponse.from_target(target).to_output_dict())
        case "yaml":
            emit_yaml(TargetResponse.from_target(target).to_output_dict())
        case _:
            machine_output(str(target))


def new_target_view_cmd() -> click.Command:
    """Build the `target view` command with its own target flags."""
    target_flags = new_target_flags("", "", "", "", False)

    @click.command("view")
    @click.option(
        "-o",
        "--output",
        "output_format",
        type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
        default=None,
        help="Output format (defaults to the configured output format).",
    )
    @click.pass_obj
    def view_cmd(ctx: GardenctlContext, output_format: str | None) -> None:
        """Print the target selected by the given flags."""
        Ensure.target_valid(target_flags)

        target = target_flags.to_target()
        resolved_format = output_format or ctx.output_format
        logger.debug("Viewing target %r as %s", target, resolved_format)
        _emit_target(target, resolved_format)

    target_flags.add_flags(view_cmd)
    return view_cmd


def new_target_check_cmd() -> click.Command:
    """Build the `target check` command with its own target flags."""
    target_flags = new_target_flags("", "", "", "", False)

    @click.command("check")
    def check_cmd() -> None:
        """Check whether the given flags select a valid target."""
        Ensure.target_valid(target_flags)
        user_output(click.style("Target is valid: ", fg="green") + str(target_flags.to_target()))

    target_flags.add_flags(check_cmd)
    return check_cmd


def new_target_group() -> click.Group:
    """Build the `target` command group."""

    @click.group("target")
    def target_group() -> None:
        """Select gardens, projects, seeds and shoots."""
        pass

    target_group.add_command(new_target_view_cmd())
    target_group.add_command(new_target_check_cmd())
    return target_group
