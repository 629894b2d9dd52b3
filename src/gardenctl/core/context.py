"""Application context with dependency injection."""

import logging
from dataclasses import dataclass
from pathlib import Path

from gardenctl.core.global_config import (
    GlobalConfig,
    global_config_exists,
    global_config_path,
    load_global_config,
)

logger = logging.getLogger(__name__)


class GlobalConfigNotFound:
    """Sentinel value indicating global config file was not found."""

    pass


@dataclass(frozen=True)
class GardenctlContext:
    """Immutable context holding everything a gardenctl command needs.

    Created at CLI entry point and threaded through the application.

    Note: global_config is either a valid GlobalConfig or GlobalConfigNotFound.
    Use isinstance(ctx.global_config, GlobalConfigNotFound) to check if config is missing.
    """

    global_config: GlobalConfig | GlobalConfigNotFound
    config_path: Path
    debug: bool

    @property
    def output_format(self) -> str:
        """Configured output format, falling back to text without a config."""
        if isinstance(self.global_config, GlobalConfigNotFound):
            return "text"
        return self.global_config.output


def create_context(*, debug: bool, config_path: Path | None = None) -> GardenctlContext:
    """Create production context.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    path = config_path if config_path is not None else global_config_path()

    global_config: GlobalConfig | GlobalConfigNotFound
    if global_config_exists(path):
        global_config = load_global_config(path)
        logger.debug("Loaded global config from %s", path)
    else:
        global_config = GlobalConfigNotFound()
        logger.debug("No global config at %s, using defaults", path)

    return GardenctlContext(global_config=global_config, config_path=path, debug=debug)
