"""Structured file logging.

Folio logs to files only, never to the terminal. Each logger built here is
a standalone structlog logger; global structlog configuration is untouched,
so the CLI and the server can write to different files in one process.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

from ._paths import get_cli_log_file, get_server_log_file

if TYPE_CHECKING:
    from collections.abc import Callable

    from structlog.typing import FilteringBoundLogger, Processor

LogFormatType = Literal["json", "text"]

DEBUG_ENV_VAR = "FOLIO_DEBUG"


def _log_level_from_string(level: str) -> int:
    # FOLIO_DEBUG overrides the configured level; unknown names mean INFO
    if os.environ.get(DEBUG_ENV_VAR):
        return logging.DEBUG
    return logging.getLevelNamesMapping().get(level.upper(), logging.INFO)


def _processors(log_format: LogFormatType) -> "list[Processor]":  # noqa: UP037
    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "text":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return processors


def create_logger(
    log_file_path: str | Path,
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger appending to `log_file_path`.

    Args:
        log_file_path: Log file. Missing parent directories are created.
        level: Lowest level written (debug, info, warning, error).
        log_format: ``json`` writes one object per line; ``text`` writes
            ``timestamp [level] event key=value`` lines.
    """
    path = Path(log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLogger(path.open("a", encoding="utf-8")),
            processors=_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(_log_level_from_string(level)),
            context_class=dict,
        ),
    )


def _component_logger(
    default_file: "Callable[[], Path]",  # noqa: UP037
    log_file: str,
    level: str,
    log_format: LogFormatType,
    **context: str,
) -> "FilteringBoundLogger":  # noqa: UP037
    logger = create_logger(log_file or default_file(), level=level, log_format=log_format)
    bound = {key: value for key, value in context.items() if value}
    return logger.bind(**bound) if bound else logger


def create_cli_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create the CLI logger.

    Writes to `log_file`, or ``cli.log`` in the user log directory when
    empty. A non-empty `command` is bound to every entry.
    """
    return _component_logger(
        get_cli_log_file, log_file, level, log_format, command=command
    )


def create_server_logger(
    *,
    level: str = "info",
    log_format: LogFormatType = "json",
    log_file: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create the server logger, defaulting to ``server.log``; entries carry ``component=server``."""
    return _component_logger(
        get_server_log_file, log_file, level, log_format, component="server"
    )
