"""Configuration loading for entry points (CLI and server)."""

import os
import sys
from pathlib import Path
from typing import NoReturn

from folio.exceptions import ConfigError

from ._models import Config

STRICT_ENV_VAR = "FOLIO_STRICT_CONFIG"


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)  # noqa: T201
    sys.exit(1)


def safe_load_config(
    *,
    config_path: Path | None = None,
    project_root: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> tuple[Config, str | None]:
    """Load configuration, degrading to defaults on error.

    A broken configuration prints a warning to stderr and yields the default
    configuration together with the error message. With
    ``FOLIO_STRICT_CONFIG=1`` it exits with status 1 instead. An explicit
    `config_path` that does not exist always exits.

    Args:
        config_path: Explicit config file (``--config``); replaces discovery.
        project_root: Project directory (``--project-root``).
        cli_overrides: Values layered above everything else.

    Returns:
        The configuration and the load error message, or None on success.
    """
    if config_path is not None and not config_path.exists():
        _fail(f"Config file not found: {config_path}")

    try:
        if config_path is not None:
            return Config.from_file(config_path, cli_overrides=cli_overrides), None
        return Config.load(
            project_root=project_root,
            include_cli=cli_overrides is not None,
            cli_overrides=cli_overrides,
        ), None
    except (ConfigError, OSError) as e:
        if os.environ.get(STRICT_ENV_VAR, "0") == "1":
            _fail(str(e))
        print(f"Warning: Failed to load config: {e}", file=sys.stderr)  # noqa: T201
        return Config(), str(e)
