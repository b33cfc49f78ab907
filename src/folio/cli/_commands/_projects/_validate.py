# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""Validate a project data file."""

from pathlib import Path
from typing import Annotated

from cyclopts import Parameter

from folio.cli._context import CLIContext
from folio.exceptions import ProjectDataError
from folio.projects import DEFAULT_PROJECTS, load_projects

from .._shared import ExitCode, exit_with_error, project_error_code
from ._app import app


@app.command(name="validate")
def validate_projects(
    file: Annotated[
        Path | None,
        Parameter(help="Project data file. Defaults to the configured projects.file."),
    ] = None,
) -> None:
    """Check that a project data file loads and every card is valid.

    Exit codes: 0 valid, 1 unreadable file, 2 invalid card, 3 file not found.

    Args:
        file: Project data file. Defaults to the configured projects.file.
    """
    ctx = CLIContext.get_current()
    logger = ctx.command_logger("projects.validate")

    path = file if file is not None else ctx.config.resolve_path(ctx.config.projects.file)
    if path is None:
        print(f"Built-in projects are valid ({len(DEFAULT_PROJECTS)} cards)")
        return

    try:
        cards = load_projects(path)
    except FileNotFoundError:
        exit_with_error(f"Projects file not found: {path}", ExitCode.NOT_FOUND)
    except ProjectDataError as e:
        if logger is not None:
            logger.warning("projects_invalid", path=str(path), index=e.index, error=str(e))
        exit_with_error(str(e), project_error_code(e))
    except OSError as e:
        exit_with_error(f"Failed to read {path}: {e}", ExitCode.LOAD_ERROR)

    if logger is not None:
        logger.info("projects_valid", path=str(path), cards=len(cards))
    print(f"{path} is valid ({len(cards)} cards)")
