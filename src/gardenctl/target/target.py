"""Target value type.

A Target is the resolved selection of a garden, optionally narrowed down to a
project or seed, a shoot, and the shoot's control plane. Targets are immutable;
the with_* methods return modified copies so they can be chained.
"""

import dataclasses
from dataclasses import dataclass


class TargetValidationError(ValueError):
    """Raised when a target combines selections that cannot be resolved."""


@dataclass(frozen=True)
class Target:
    """Immutable target selection.

    Empty strings mean "not selected".
    """

    garden_name: str = ""
    project_name: str = ""
    seed_name: str = ""
    shoot_name: str = ""
    control_plane: bool = False

    def with_garden_name(self, name: str) -> "Target":
        return dataclasses.replace(self, garden_name=name)

    def with_project_name(self, name: str) -> "Target":
        return dataclasses.replace(self, project_name=name)

    def with_seed_name(self, name: str) -> "Target":
        return dataclasses.replace(self, seed_name=name)

    def with_shoot_name(self, name: str) -> "Target":
        return dataclasses.replace(self, shoot_name=name)

    def with_control_plane(self, control_plane: bool) -> "Target":
        return dataclasses.replace(self, control_plane=control_plane)

    def validation_error(self) -> str | None:
        """Check the target for structural correctness.

        Does not connect to any cluster, so names are never resolved here.

        Returns:
            Message describing the first violated rule, or None if the target is valid
        """
        if self.project_name and self.seed_name:
            return "seed and project must not be configured at the same time"

        if self.control_plane and not self.shoot_name:
            return "the control plane flag requires a shoot to be targeted"

        return None

    def validate(self) -> None:
        """Validate the target.

        Raises:
            TargetValidationError: If the target is structurally invalid
        """
        message = self.validation_error()
        if message is not None:
            raise TargetValidationError(message)

    def is_empty(self) -> bool:
        return (
            not self.garden_name
            and not self.project_name
            and not self.seed_name
            and not self.shoot_name
            and not self.control_plane
        )

    def __str__(self) -> str:
        parts = [
            name
            for name in (self.garden_name, self.project_name, self.seed_name, self.shoot_name)
            if name
        ]
        path = "/".join(parts)
        if self.control_plane:
            return f"{path} (control plane)"
        return path


def new_target(garden: str, project: str, seed: str, shoot: str) -> Target:
    """Create a target from the four names, with the control plane unselected."""
    return Target(garden_name=garden, project_name=project, seed_name=seed, shoot_name=shoot)
