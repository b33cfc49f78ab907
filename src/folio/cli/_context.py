# pyright: reportUnusedCallResult=false
"""Per-invocation CLI state.

The meta command builds one CLIContext from the global options and activates
it for the duration of the subcommand; commands read it with
`CLIContext.get_current()`.
"""

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from folio.config import Config, safe_load_config
from folio.utils import create_cli_logger


class OutputFormat(StrEnum):
    TOML = "toml"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"


_active: contextvars.ContextVar["CLIContext | None"] = contextvars.ContextVar(
    "folio_cli_context", default=None
)


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global options and loaded configuration for one CLI invocation.

    Attributes:
        config: Loaded configuration (defaults when loading failed).
        verbose: Print extra detail.
        quiet: Print only what a command must print.
        project_root: ``--project-root`` as given.
        config_path: ``--config`` as given.
        cli_overrides: Values from ``--set``, or None when none were given.
        config_error: Why configuration failed to load, if it did.
        logger: File logger for commands; None outside a CLI run.
    """

    config: Config = field(default_factory=Config, repr=False)
    verbose: bool = False
    quiet: bool = False
    project_root: Path | None = None
    config_path: Path | None = None
    cli_overrides: dict[str, object] | None = None
    config_error: str | None = None
    logger: FilteringBoundLogger | None = field(default=None, repr=False)

    @classmethod
    def startup(
        cls,
        *,
        verbose: bool = False,
        quiet: bool = False,
        config_path: Path | None = None,
        project_root: Path | None = None,
        cli_overrides: dict[str, object] | None = None,
    ) -> "CLIContext":
        """Load configuration and open the CLI log for a new invocation.

        Exits with status 1 when `config_path` does not exist or when
        configuration is broken and ``FOLIO_STRICT_CONFIG=1``.
        """
        config, config_error = safe_load_config(
            config_path=config_path, project_root=project_root, cli_overrides=cli_overrides
        )
        logger = create_cli_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,  # type: ignore[arg-type]
            log_file=config.logging.file,
        )
        return cls(
            config=config,
            verbose=verbose,
            quiet=quiet,
            project_root=project_root,
            config_path=config_path,
            cli_overrides=cli_overrides,
            config_error=config_error,
            logger=logger,
        )

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Return the active context, or a default one when none is active."""
        return _active.get() or cls()

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        _active.set(ctx)

    @classmethod
    def reset(cls) -> None:
        _active.set(None)

    @contextmanager
    def activate(self) -> Iterator["CLIContext"]:
        """Make this the current context until the block exits."""
        token = _active.set(self)
        try:
            yield self
        finally:
            _active.reset(token)

    def command_logger(self, command: str) -> FilteringBoundLogger | None:
        """Return the logger bound to `command`, or None without a logger."""
        return self.logger.bind(command=command) if self.logger is not None else None
