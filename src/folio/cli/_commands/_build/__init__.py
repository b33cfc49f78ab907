# pyright: reportUnusedCallResult=false
"""Static site build command."""

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter

from folio.cli._context import CLIContext
from folio.exceptions import BuildError, ProjectDataError
from folio.site import build_site

from .._shared import ExitCode, exit_with_error, project_error_code

app = App(name="build", help="Render the site to static HTML", help_on_error=True)


@app.default
def build(
    *,
    output: Annotated[
        Path,
        Parameter(name=["--output", "-o"], help="Directory to write the site to."),
    ] = Path("public"),
) -> None:
    """Render the projects page (and static files) into a directory.

    Args:
        output: Directory to write the site to.
    """
    ctx = CLIContext.get_current()
    logger = ctx.command_logger("build")

    try:
        written = build_site(output, config=ctx.config, logger=logger)
    except FileNotFoundError as e:
        exit_with_error(f"Projects file not found: {e.filename}", ExitCode.NOT_FOUND)
    except ProjectDataError as e:
        exit_with_error(str(e), project_error_code(e))
    except BuildError as e:
        if logger is not None:
            logger.error("build_failed", path=str(e.path), error=str(e))
        exit_with_error(str(e), ExitCode.IO_ERROR)
    except OSError as e:
        exit_with_error(f"Failed to read projects file: {e}", ExitCode.LOAD_ERROR)

    if not ctx.quiet:
        for path in written:
            print(path)
    if ctx.verbose:
        print(f"Wrote {len(written)} file(s) to {output}")
