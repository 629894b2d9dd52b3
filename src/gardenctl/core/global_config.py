"""Global configuration data structures and loading.

Provides immutable global config data loaded from $GCTL_HOME/config.toml
(~/.garden/config.toml when GCTL_HOME is unset).
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

import tomlkit

OUTPUT_FORMATS = ("text", "json", "yaml")


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in GardenctlContext.
    """

    output: str = "text"
    gardens: list[str] = field(default_factory=list)


def global_config_path() -> Path:
    """Get the path to the global config file.

    Returns:
        Path to config file (for error messages and debugging)
    """
    home = os.getenv("GCTL_HOME")
    if home:
        return Path(home).expanduser() / "config.toml"
    return Path.home() / ".garden" / "config.toml"


def global_config_exists(path: Path | None = None) -> bool:
    config_path = path if path is not None else global_config_path()
    return config_path.exists()


def parse_output_format(value: str) -> str:
    """Normalize an output format name.

    Raises:
        ValueError: If the format is not one of text, json or yaml
    """
    normalized = value.strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid output format '{value}'. Must be one of: {', '.join(OUTPUT_FORMATS)}"
        )
    return normalized


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config from config.toml.

    Args:
        path: Config file path (defaults to global_config_path())

    Returns:
        GlobalConfig instance with loaded values

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config values are malformed
    """
    config_path = path if path is not None else global_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Global config not found at {config_path}")

    data = tomllib.loads(config_path.read_text(encoding="utf-8"))

    output = parse_output_format(str(data.get("output", "text")))

    gardens = data.get("gardens", [])
    if not isinstance(gardens, list):
        raise ValueError(f"'gardens' must be a list of names in {config_path}")

    return GlobalConfig(output=output, gardens=[str(name) for name in gardens])


def save_global_config(config: GlobalConfig, path: Path | None = None) -> None:
    """Save global config, preserving formatting of an existing file.

    Creates the config directory if it doesn't exist.
    """
    config_path = path if path is not None else global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.exists():
        doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global gardenctl configuration"))

    doc["output"] = config.output
    doc["gardens"] = list(config.gardens)

    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
