"""The command-line interface for folio."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from folio.config import TEXT_KEYS, ConfigError, parse_cli_overrides

from ._commands import ExitCode, exit_with_error, register_commands
from ._context import CLIContext

APP_HELP = "Render and serve a portfolio projects page."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the folio CLI.

    Run it through ``app.meta`` so the global options are parsed and the
    configuration is loaded before a subcommand runs.
    """
    app = App(
        name="folio",
        help=APP_HELP,
        help_on_error=True,
        console=console or Console(),
        error_console=error_console or Console(stderr=True),
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _launch(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Print extra detail")] = False,
        quiet: Annotated[bool, Parameter(help="Print only essential output")] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Use this config file instead of discovery")
        ] = None,
        project_root: Annotated[
            Path | None,
            Parameter(name="--project-root", help="Directory holding folio.toml"),
        ] = None,
        overrides: Annotated[
            list[str] | None,
            Parameter(name="--set", help="Override a setting, e.g. site.title=Notes"),
        ] = None,
    ) -> None:
        """Run a folio command.

        Args:
            tokens: The subcommand and its arguments.
            verbose: Print extra detail.
            quiet: Print only essential output.
            config: Use this config file instead of discovering one.
            project_root: Directory holding folio.toml.
            overrides: KEY=VALUE settings layered above every other source.
        """
        try:
            cli_overrides = (
                parse_cli_overrides(overrides, text_keys=TEXT_KEYS) if overrides else None
            )
        except ConfigError as e:
            exit_with_error(str(e), ExitCode.VALIDATION_ERROR)

        ctx = CLIContext.startup(
            verbose=verbose,
            quiet=quiet,
            config_path=config,
            project_root=project_root,
            cli_overrides=cli_overrides,
        )
        with ctx.activate():
            app(tokens)

    register_commands(app)
    return app


def main() -> None:
    """Entry point of the ``folio`` script."""
    create_app().meta()


if __name__ == "__main__":
    main()
