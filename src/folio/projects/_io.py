"""Loading project cards from YAML or TOML data files."""

import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from folio.exceptions import ProjectDataError

from ._catalog import DEFAULT_PROJECTS
from ._models import ProjectCard

if TYPE_CHECKING:
    from folio.config import Config

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
TOML_SUFFIXES = frozenset({".toml"})


def _read_data_file(path: Path) -> Any:  # pyright: ignore[reportExplicitAny]
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES | TOML_SUFFIXES:
        msg = f"Unsupported project file type '{path.suffix}' (use .yaml, .yml or .toml)"
        raise ProjectDataError(msg, path=path)

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"Project file {path} is not valid UTF-8: {e}"
        raise ProjectDataError(msg, path=path) from e

    try:
        if suffix in TOML_SUFFIXES:
            return tomllib.loads(content)
        return yaml.safe_load(content)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as e:
        msg = f"Failed to parse project file {path}: {e}"
        raise ProjectDataError(msg, path=path) from e


def _first_error(error: ValidationError) -> str:
    details = error.errors()[0]
    location = ".".join(str(part) for part in details.get("loc", ()))
    message = details.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def load_projects(path: Path) -> tuple[ProjectCard, ...]:
    """Load project cards from a data file.

    The file's top level must hold a ``projects`` list. Each entry maps onto
    ProjectCard fields (``title``, ``description``, ``image_path``,
    ``alt_text``, ``links``); each link has ``label``, ``url`` and an optional
    ``external`` flag. Card order follows the file.

    Args:
        path: Path to a .yaml, .yml or .toml file.

    Returns:
        The cards in declared order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ProjectDataError: If the file cannot be parsed or a card is invalid.
    """
    data = _read_data_file(path)

    entries = data.get("projects") if isinstance(data, dict) else None
    if not isinstance(entries, list):
        msg = f"Project file {path} must contain a 'projects' list"
        raise ProjectDataError(msg, path=path)

    cards: list[ProjectCard] = []
    for index, entry in enumerate(entries):
        try:
            cards.append(ProjectCard.model_validate(entry))
        except ValidationError as e:
            msg = f"Invalid project at index {index} in {path}: {_first_error(e)}"
            raise ProjectDataError(msg, path=path, index=index) from e

    return tuple(cards)


def resolve_projects(
    config: "Config | None" = None,  # noqa: UP037
) -> tuple[ProjectCard, ...]:
    """Return the configured project cards.

    Uses ``projects.file`` when set (relative paths resolve against the
    config root), otherwise the built-in cards.
    """
    if config is None:
        return DEFAULT_PROJECTS

    path = config.resolve_path(config.projects.file)
    if path is None:
        return DEFAULT_PROJECTS
    return load_projects(path)
