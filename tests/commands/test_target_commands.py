"""Tests for the target command group."""

import json
from pathlib import Path

import yaml
from click.testing import CliRunner

from gardenctl.cli.cli import cli
from gardenctl.cli.commands.target import new_target_view_cmd
from gardenctl.core.context import GardenctlContext, GlobalConfigNotFound
from gardenctl.core.global_config import GlobalConfig


def _context(tmp_path: Path, output: str = "text") -> GardenctlContext:
    return GardenctlContext(
        global_config=GlobalConfig(output=output, gardens=["landscape"]),
        config_path=tmp_path / "config.toml",
        debug=False,
    )


def test_view_prints_target_path(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["target", "view", "--garden", "landscape", "--project", "dev", "--shoot", "api"],
        obj=_context(tmp_path),
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "landscape/dev/api"


def test_view_json_output(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["target", "view", "--garden=landscape", "--seed=aws", "--shoot=api", "-o", "json"],
        obj=_context(tmp_path),
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "garden": "landscape",
        "seed": "aws",
        "shoot": "api",
        "controlPlane": False,
    }


def test_view_uses_configured_output_format(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["target", "view", "--garden", "landscape", "--shoot", "api", "--control-plane"],
        obj=_context(tmp_path, output="yaml"),
    )

    assert result.exit_code == 0, result.output
    assert yaml.safe_load(result.stdout) == {
        "garden": "landscape",
        "shoot": "api",
        "controlPlane": True,
    }


def test_view_without_config_defaults_to_text(tmp_path: Path) -> None:
    runner = CliRunner()
    ctx = GardenctlContext(
        global_config=GlobalConfigNotFound(), config_path=tmp_path / "config.toml", debug=False
    )

    result = runner.invoke(cli, ["target", "view", "--garden", "landscape"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "landscape"


def test_view_without_flags_fails(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["target", "view"], obj=_context(tmp_path))

    assert result.exit_code == 1
    assert "No target flags given" in result.output


def test_view_without_garden_fails(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli, ["target", "view", "--seed", "aws", "--shoot", "api"], obj=_context(tmp_path)
    )

    assert result.exit_code == 1
    assert "a garden must be specified" in result.output


def test_view_with_project_and_seed_fails(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["target", "view", "--garden", "landscape", "--project", "dev", "--seed", "aws"],
        obj=_context(tmp_path),
    )

    assert result.exit_code == 1
    assert "seed and project must not be configured at the same time" in result.output


def test_view_does_not_leak_flags_between_invocations(tmp_path: Path) -> None:
    runner = CliRunner()
    command = new_target_view_cmd()

    first = runner.invoke(
        command, ["--garden", "landscape", "--shoot", "api"], obj=_context(tmp_path)
    )
    second = runner.invoke(command, ["--garden", "other"], obj=_context(tmp_path))

    assert first.stdout.strip() == "landscape/api"
    assert second.stdout.strip() == "other"


def test_check_accepts_valid_target(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["target", "check", "--garden", "landscape", "--seed", "aws"],
        obj=_context(tmp_path),
    )

    assert result.exit_code == 0, result.output
    assert "Target is valid" in result.output


def test_check_rejects_control_plane_without_shoot(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["target", "check", "--garden", "landscape", "--control-plane"],
        obj=_context(tmp_path),
    )

    assert result.exit_code == 1
    assert "requires a shoot" in result.output


def test_target_help_lists_flags(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["target", "view", "-h"], obj=_context(tmp_path))

    assert result.exit_code == 0
    assert "--garden" in result.output
    assert "target the given shoot cluster" in result.output
    assert "--control-plane" in result.output


def test_view_output_option_is_case_insensitive(tmp_path: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["target", "view", "--garden", "landscape", "-o", "JSON"],
        obj=_context(tmp_path),
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {"garden": "landscape", "controlPlane": False}
