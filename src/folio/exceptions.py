"""Folio exceptions."""

from pathlib import Path
from typing import Any


class FolioError(Exception):
    """Base class of every error folio raises on purpose."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(FolioError):
    """The configuration could not be used."""


class ConfigLoadError(ConfigError):
    """A configuration file could not be read as TOML.

    Attributes:
        path: The file.
        line: 1-based line of the syntax error, when known.
        column: 1-based column of the syntax error, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """A configuration value has the wrong type or is out of range.

    Attributes:
        key: Dotted key of the value, e.g. ``site.language``.
        value: The rejected value.
        expected: What would have been accepted.
        source: The layer or file the value came from, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source


# =============================================================================
# Content and output
# =============================================================================


class ProjectDataError(FolioError, ValueError):
    """A project data file cannot be loaded or holds an invalid card.

    Attributes:
        path: The data file.
        index: Position of the offending card, or None when the file as a
            whole is unreadable.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        index: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path | None = path
        self.index: int | None = index


class BuildError(FolioError):
    """A file of the static site could not be written.

    Attributes:
        path: The output file.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = path
