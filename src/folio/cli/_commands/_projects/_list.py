# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
"""List the resolved project cards."""

from typing import Annotated

from cyclopts import Parameter

from folio.cli._context import CLIContext, OutputFormat
from folio.exceptions import ProjectDataError
from folio.projects import ProjectCard, resolve_projects

from .._shared import (
    ExitCode,
    exit_with_error,
    format_table,
    project_error_code,
    render_data,
)
from ._app import app

LIST_FORMATS = (OutputFormat.TABLE, OutputFormat.JSON, OutputFormat.YAML)


def _cards_table(cards: tuple[ProjectCard, ...]) -> str:
    rows = [
        [str(position), card.title, card.image_path, ", ".join(link.label for link in card.links)]
        for position, card in enumerate(cards, start=1)
    ]
    return format_table(["#", "Title", "Image", "Links"], rows)


@app.command(name="list")
def list_projects(
    *,
    format: Annotated[  # noqa: A002
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (table, json, yaml)."),
    ] = OutputFormat.TABLE,
) -> None:
    """List the project cards shown on the projects page, in page order.

    Args:
        format: Output format (table, json, yaml).
    """
    ctx = CLIContext.get_current()

    try:
        cards = resolve_projects(ctx.config)
    except FileNotFoundError as e:
        exit_with_error(f"Projects file not found: {e.filename}", ExitCode.NOT_FOUND)
    except ProjectDataError as e:
        exit_with_error(str(e), project_error_code(e))
    except OSError as e:
        exit_with_error(f"Failed to read projects file: {e}", ExitCode.LOAD_ERROR)

    output = render_data(
        {"projects": [card.model_dump(mode="json") for card in cards]},
        format,
        supported=LIST_FORMATS,
        table=lambda: _cards_table(cards),
    )
    print(output.rstrip())
