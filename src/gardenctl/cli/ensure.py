"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

import click

from gardenctl.cli.output import user_output
from gardenctl.target.target_flags import TargetFlags


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def target_valid(target_flags: TargetFlags) -> None:
        """Ensure the target flags form a usable target, otherwise exit with the reason.

        The boolean check comes first; the detailed reason is only computed
        for the error message.

        Raises:
            SystemExit: If no flags were given or the target is invalid
        """
        Ensure.invariant(
            not target_flags.is_empty(),
            "No target flags given - use --garden together with --project, --seed or --shoot",
        )
        if target_flags.is_target_valid():
            return

        if target_flags.garden_name() == "":
            reason = "a garden must be specified"
        else:
            reason = target_flags.to_target().validation_error() or "unknown reason"
        user_output(click.style("Error: ", fg="red") + f"Invalid target: {reason}")
        raise SystemExit(1)
