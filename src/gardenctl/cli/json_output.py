"""JSON and YAML output utilities for machine-parseable command output."""

import json
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from gardenctl.cli.output import machine_output
from gardenctl.target.target import Target


class TargetResponse(BaseModel):
    """Pydantic model for a target in JSON/YAML responses.

    Attributes use the CLI flag names; unset names are None.
    """

    model_config = ConfigDict(strict=True)

    garden: str | None = None
    project: str | None = None
    seed: str | None = None
    shoot: str | None = None
    control_plane: bool = Field(default=False, serialization_alias="controlPlane")

    @classmethod
    def from_target(cls, target: Target) -> "TargetResponse":
        return cls(
            garden=target.garden_name or None,
            project=target.project_name or None,
            seed=target.seed_name or None,
            shoot=target.shoot_name or None,
            control_plane=target.control_plane,
        )

    def to_output_dict(self) -> dict[str, Any]:
        """Dump with camelCase control plane key and unset names dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption."""
    machine_output(json.dumps(data, indent=2))


def emit_yaml(data: dict[str, Any]) -> None:
    """Output YAML data to stdout for machine consumption."""
    machine_output(yaml.safe_dump(data, sort_keys=False).rstrip("\n"))
