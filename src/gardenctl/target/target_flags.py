"""Target selection flags.

TargetFlags binds the --garden, --project, --seed, --shoot and --control-plane
options to a click command. Parsed values are written back into the flags object
by option callbacks, so the command body reads them through the accessors rather
than through keyword arguments.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import click

from gardenctl.target.target import Target, new_target

logger = logging.getLogger(__name__)


class TargetFlags(ABC):
    """Target selection flags of a command."""

    @abstractmethod
    def garden_name(self) -> str:
        """Return the value tied to the --garden flag."""
        ...

    @abstractmethod
    def project_name(self) -> str:
        """Return the value tied to the --project flag."""
        ...

    @abstractmethod
    def seed_name(self) -> str:
        """Return the value tied to the --seed flag."""
        ...

    @abstractmethod
    def shoot_name(self) -> str:
        """Return the value tied to the --shoot flag."""
        ...

    @abstractmethod
    def control_plane(self) -> bool:
        """Return the value tied to the --control-plane flag."""
        ...

    @abstractmethod
    def add_flags(self, command: click.Command) -> None:
        """Bind all target flags to the given command."""
        ...

    @abstractmethod
    def add_garden_flag(self, command: click.Command) -> None:
        """Bind the --garden flag to the given command."""
        ...

    @abstractmethod
    def add_project_flag(self, command: click.Command) -> None:
        """Bind the --project flag to the given command."""
        ...

    @abstractmethod
    def add_seed_flag(self, command: click.Command) -> None:
        """Bind the --seed flag to the given command."""
        ...

    @abstractmethod
    def add_shoot_flag(self, command: click.Command) -> None:
        """Bind the --shoot flag to the given command."""
        ...

    @abstractmethod
    def add_control_plane_flag(self, command: click.Command) -> None:
        """Bind the --control-plane flag to the given command."""
        ...

    @abstractmethod
    def to_target(self) -> Target:
        """Convert the flags to a target."""
        ...

    @abstractmethod
    def is_target_valid(self) -> bool:
        """Return True if the given flags are enough to form a meaningful target.

        A garden is always required. Everything beyond that is decided by
        Target.validate(): for example, project and seed cannot both be given,
        and --control-plane needs a shoot. Use to_target().validate() to get
        the reason a target is rejected.
        """
        ...

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if no target flags were given."""
        ...


def new_target_flags(
    garden: str, project: str, seed: str, shoot: str, control_plane: bool
) -> TargetFlags:
    """Create target flags with the given initial values."""
    return _TargetFlagsImpl(
        garden_name=garden,
        project_name=project,
        seed_name=seed,
        shoot_name=shoot,
        control_plane=control_plane,
    )


class _TargetFlagsImpl(TargetFlags):
    def __init__(
        self,
        *,
        garden_name: str,
        project_name: str,
        seed_name: str,
        shoot_name: str,
        control_plane: bool,
    ) -> None:
        self._garden_name = garden_name
        self._project_name = project_name
        self._seed_name = seed_name
        self._shoot_name = shoot_name
        self._control_plane = control_plane

    def garden_name(self) -> str:
        return self._garden_name

    def project_name(self) -> str:
        return self._project_name

    def seed_name(self) -> str:
        return self._seed_name

    def shoot_name(self) -> str:
        return self._shoot_name

    def control_plane(self) -> bool:
        return self._control_plane

    def add_flags(self, command: click.Command) -> None:
        self.add_garden_flag(command)
        self.add_project_flag(command)
        self.add_seed_flag(command)
        self.add_shoot_flag(command)
        self.add_control_plane_flag(command)

    def add_garden_flag(self, command: click.Command) -> None:
        self._bind_string(command, "garden", "_garden_name", "target the given garden cluster")

    def add_project_flag(self, command: click.Command) -> None:
        self._bind_string(command, "project", "_project_name", "target the given project")

    def add_seed_flag(self, command: click.Command) -> None:
        self._bind_string(command, "seed", "_seed_name", "target the given seed cluster")

    def add_shoot_flag(self, command: click.Command) -> None:
        self._bind_string(command, "shoot", "_shoot_name", "target the given shoot cluster")

    def add_control_plane_flag(self, command: click.Command) -> None:
        def store(ctx: click.Context, param: click.Parameter, value: Any) -> None:
            self._control_plane = bool(value)

        # Default is the current value, so registration never changes the field.
        # The value is optional: bare --control-plane means true, and
        # --control-plane=false turns it off.
        command.params.append(
            click.Option(
                ["--control-plane"],
                type=click.BOOL,
                is_flag=False,
                flag_value=True,
                default=self._control_plane,
                expose_value=False,
                callback=store,
                help="target control plane of shoot, use together with shoot argument",
            )
        )

    def _bind_string(self, command: click.Command, flag: str, attr: str, help_text: str) -> None:
        def store(ctx: click.Context, param: click.Parameter, value: Any) -> None:
            setattr(self, attr, "" if value is None else str(value))

        # Registering a flag writes its default into the bound field
        setattr(self, attr, "")
        command.params.append(
            click.Option(
                [f"--{flag}"],
                type=str,
                default="",
                expose_value=False,
                callback=store,
                help=help_text,
            )
        )

    def to_target(self) -> Target:
        return new_target(
            self._garden_name, self._project_name, self._seed_name, self._shoot_name
        ).with_control_plane(self._control_plane)

    def is_empty(self) -> bool:
        return (
            self._garden_name == ""
            and self._project_name == ""
            and self._seed_name == ""
            and self._shoot_name == ""
            and not self._control_plane
        )

    def is_target_valid(self) -> bool:
        # garden name is always required for a complete set of flags
        if self._garden_name == "":
            logger.debug("Target flags invalid: no garden given")
            return False

        message = self.to_target().validation_error()
        if message is not None:
            logger.debug("Target flags invalid: %s", message)
            return False
        return True
