# pyright: reportUnusedCallResult=false
"""Configuration commands."""

from typing import Annotated

from cyclopts import App, Parameter

from folio.cli._context import CLIContext, OutputFormat

from .._shared import ExitCode, exit_with_error, render_data

app = App(name="config", help="Inspect folio configuration", help_on_error=True)

_MISSING = object()

SHOW_FORMATS = (OutputFormat.TOML, OutputFormat.JSON, OutputFormat.YAML)


@app.command(name="show")
def show_config(
    *,
    format: Annotated[  # noqa: A002
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json, yaml)."),
    ] = OutputFormat.TOML,
) -> None:
    """Print the merged configuration.

    Exits with status 1 when the configuration failed to load.

    Args:
        format: Output format (toml, json, yaml).
    """
    ctx = CLIContext.get_current()
    if ctx.config_error is not None:
        exit_with_error(ctx.config_error, ExitCode.LOAD_ERROR)

    print(render_data(ctx.config.to_dict(), format, supported=SHOW_FORMATS).rstrip())


@app.command(name="sources")
def show_sources() -> None:
    """List configuration layers, highest precedence first."""
    for source in CLIContext.get_current().config.sources:
        print(source.label)


@app.command(name="get")
def get_value(
    key: str,
    /,
    *,
    format: Annotated[  # noqa: A002
        OutputFormat,
        Parameter(name=["--format", "-f"], help="Output format (toml, json, yaml)."),
    ] = OutputFormat.TOML,
) -> None:
    """Print one configuration value.

    Scalars are printed as-is; tables use the requested format. Exits with
    status 3 when the key does not exist.

    Args:
        key: Dotted key, e.g. site.title.
        format: Output format for tables (toml, json, yaml).
    """
    ctx = CLIContext.get_current()
    if ctx.config_error is not None:
        exit_with_error(ctx.config_error, ExitCode.LOAD_ERROR)

    value = ctx.config.get(key, _MISSING)
    if value is _MISSING:
        exit_with_error(f"Key '{key}' not found", ExitCode.NOT_FOUND)

    if isinstance(value, dict):
        print(render_data(value, format, supported=SHOW_FORMATS).rstrip())
    else:
        print(value)
