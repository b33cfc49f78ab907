"""Locating configuration files.

A folio project is the nearest directory, searching upward, holding a
``folio.toml`` file. Per-user settings live in the platform config directory.
"""

from pathlib import Path
from typing import Any

import platformdirs

from ._defaults import DEFAULT_CONFIG
from ._models._source import ConfigSource, SourceKind

PROJECT_CONFIG_NAME = "folio.toml"


def find_project_root(start: Path | None = None) -> Path | None:
    """Return the nearest directory at or above `start` holding ``folio.toml``.

    `start` defaults to the working directory. Returns None when no such
    directory exists.
    """
    here = (start or Path.cwd()).resolve()
    for candidate in (here, *here.parents):
        if (candidate / PROJECT_CONFIG_NAME).is_file():
            return candidate
    return None


def get_user_config_path() -> Path:
    """Return the per-user config file path (``~/.config/folio/config.toml`` on Linux)."""
    return platformdirs.user_config_path("folio") / "config.toml"


def _file_source(kind: SourceKind, path: Path) -> ConfigSource:
    try:
        exists = path.is_file()
    except OSError:
        exists = False
    return ConfigSource(kind, path=path, exists=exists)


def discover_sources(
    project_root: Path | None = None,
    *,
    include_env: bool = True,
    include_cli: bool = False,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """List the configuration layers, highest precedence first.

    File layers are listed whether or not the file exists; check
    ``ConfigSource.exists``. Environment values are read later, when the
    layer is loaded.

    Args:
        project_root: Project directory. Searched for when None.
        include_env: Include the environment layer.
        include_cli: Include the CLI override layer.
        cli_overrides: Values of the CLI layer.
    """
    root = project_root if project_root else find_project_root()

    sources: list[ConfigSource] = []
    if include_cli:
        overrides = cli_overrides or {}
        sources.append(ConfigSource(SourceKind.CLI, exists=bool(overrides), values=overrides))
    if include_env:
        sources.append(ConfigSource(SourceKind.ENV))
    if root:
        sources.append(_file_source(SourceKind.PROJECT, root / PROJECT_CONFIG_NAME))
    sources.append(_file_source(SourceKind.USER, get_user_config_path()))
    sources.append(ConfigSource(SourceKind.DEFAULT, values=DEFAULT_CONFIG))
    return sources
