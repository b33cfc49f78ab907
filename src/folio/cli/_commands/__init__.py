"""Folio CLI commands."""
# pyright: reportUnusedCallResult=false

from typing import TYPE_CHECKING

from ._build import app as build_app
from ._config import app as config_app
from ._projects import app as projects_app
from ._serve import app as serve_app
from ._shared import ExitCode, exit_with_error

if TYPE_CHECKING:
    from cyclopts import App

__all__ = [
    "ExitCode",
    "build_app",
    "config_app",
    "exit_with_error",
    "projects_app",
    "register_commands",
    "serve_app",
]


def register_commands(app: "App") -> None:  # noqa: UP037
    app.command(build_app)
    app.command(config_app)
    app.command(projects_app)
    app.command(serve_app)

    @app.command(name="--prefix")
    def _prefix() -> None:  # pyright: ignore[reportUnusedFunction]
        """Show folio's install path."""
        from folio.utils import get_package_dir

        print(get_package_dir())
