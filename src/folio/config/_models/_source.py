"""Configuration source descriptors."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path


class SourceKind(StrEnum):
    """Where a configuration layer comes from, highest precedence first."""

    CLI = "cli"
    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """One layer of configuration.

    File layers (project, user) carry the file path; `exists` records whether
    the file was present when sources were discovered. `values` holds what the
    layer contributed once loaded.
    """

    kind: SourceKind
    path: Path | None = None
    exists: bool = True
    values: Mapping[str, object] = field(default_factory=dict)

    @property
    def label(self) -> str:
        """Describe the layer as ``kind: location``, noting missing files."""
        location = str(self.path) if self.path is not None else "-"
        suffix = "" if self.exists else " (missing)"
        return f"{self.kind.value}: {location}{suffix}"
