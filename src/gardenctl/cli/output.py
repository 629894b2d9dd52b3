"""Output utilities for CLI commands with clear intent.

Human-readable messages go to stderr so that data written to stdout stays
machine-parseable.
"""

import click


def user_output(message: str = "") -> None:
    """Print a message meant for the user (stderr)."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Print data meant for scripts and pipes (stdout)."""
    click.echo(message)
