from collections.abc import Callable

import pytest
from rich.console import Console

from folio.cli import create_app

CliRunner = Callable[..., int]


@pytest.fixture
def folio_cli(console: Console) -> CliRunner:
    """Create the CLI app for testing.

    Returns a callable that runs the CLI through its meta app (so global
    options and configuration loading apply) and returns the exit code.
    """

    app = create_app(console=console, error_console=console)

    def _run(*args: str) -> int:
        """Run CLI app and return exit code (0 if no SystemExit)."""

        try:
            app.meta(list(args))
        except SystemExit as e:
            if e.code is None:
                return 0
            return e.code if isinstance(e.code, int) else 1
        else:
            return 0

    return _run
