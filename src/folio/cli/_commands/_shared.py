# pyright: reportExplicitAny=false
"""Helpers shared by folio commands: exit codes, output formats and errors."""

from collections.abc import Callable, Collection
from enum import IntEnum
from typing import Any, Never

from rich.console import Console
from rich.markup import escape

from folio.cli._context import OutputFormat
from folio.exceptions import ProjectDataError

FormattableData = dict[str, Any]


class ExitCode(IntEnum):
    """Process exit codes for folio commands."""

    SUCCESS = 0
    LOAD_ERROR = 1
    VALIDATION_ERROR = 2
    NOT_FOUND = 3
    IO_ERROR = 4
    INTERNAL_ERROR = 5


def format_json(data: FormattableData, *, indent: bool = True) -> str:
    import orjson

    return orjson.dumps(data, option=orjson.OPT_INDENT_2 if indent else 0).decode()


def format_yaml(data: FormattableData) -> str:
    import yaml

    return yaml.safe_dump(data, allow_unicode=True, sort_keys=False)


def format_toml(data: FormattableData) -> str:
    import tomli_w

    return tomli_w.dumps(data)


def format_table(headers: list[str], rows: list[list[str]]) -> str:
    """Render rows as a Markdown table."""
    from pytablewriter import MarkdownTableWriter

    return MarkdownTableWriter(headers=headers, value_matrix=rows, margin=1).dumps()


DATA_FORMATTERS: dict[OutputFormat, Callable[[FormattableData], str]] = {
    OutputFormat.TOML: format_toml,
    OutputFormat.JSON: format_json,
    OutputFormat.YAML: format_yaml,
}


def render_data(
    data: FormattableData,
    output_format: OutputFormat,
    *,
    supported: Collection[OutputFormat],
    table: Callable[[], str] | None = None,
) -> str:
    """Render command output in the requested format.

    Args:
        data: Structured output, used by the TOML, JSON and YAML formats.
        output_format: Requested format.
        supported: Formats the command offers.
        table: Builds the table rendering, for commands offering it.

    Raises:
        SystemExit: With VALIDATION_ERROR when the format is not offered.
    """
    if output_format in supported:
        if output_format is OutputFormat.TABLE and table is not None:
            return table()
        if output_format in DATA_FORMATTERS:
            return DATA_FORMATTERS[output_format](data)

    offered = ", ".join(fmt.value for fmt in supported)
    exit_with_error(
        f"Unsupported format '{output_format}' (use {offered})",
        ExitCode.VALIDATION_ERROR,
    )


def get_error_console() -> Console:
    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print ``Error: <message>`` to stderr and exit with `code`.

    The message is printed literally; Rich markup in it is escaped.
    """
    (console or get_error_console()).print(
        f"[red]Error:[/red] {escape(message)}", highlight=False
    )
    raise SystemExit(code)


def project_error_code(error: ProjectDataError) -> ExitCode:
    """LOAD_ERROR for an unreadable project file, VALIDATION_ERROR for a bad card."""
    return ExitCode.LOAD_ERROR if error.index is None else ExitCode.VALIDATION_ERROR
