# pyright: reportExplicitAny=false, reportAny=false
"""The merged configuration object."""

from collections.abc import Iterable
from dataclasses import replace
from functools import reduce
from pathlib import Path
from typing import Any, ClassVar, Self

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from folio.config._defaults import DEFAULT_CONFIG
from folio.config._loader import copy_value, deep_merge, parse_env_vars, read_toml_file
from folio.config._models._logging import LoggingConfig
from folio.config._models._projects import ProjectsConfig
from folio.config._models._sections import TEXT_KEYS
from folio.config._models._site import SiteConfig
from folio.config._models._source import ConfigSource, SourceKind

_MISSING = object()


class Config(BaseModel):
    """Merged folio configuration.

    The sections are validated models. The raw merged mapping, the layers it
    was merged from and the directory that relative paths resolve against are
    kept alongside them. `Config()` holds the defaults; build anything else
    with `from_dict`, `from_file` or `load`. Instances are immutable.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    projects: ProjectsConfig = Field(default_factory=ProjectsConfig)

    _raw: dict[str, Any] = PrivateAttr(default_factory=lambda: copy_value(DEFAULT_CONFIG))
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())
    _root: Path | None = PrivateAttr(default=None)

    @classmethod
    def _build(
        cls,
        merged: dict[str, Any],
        *,
        sources: Iterable[ConfigSource] = (),
        root: Path | None = None,
        origin: str | None = None,
    ) -> Self:
        from folio.config._validation import (  # noqa: PLC0415
            issues_from_error,
            raise_if_validation_errors,
        )

        try:
            config = cls.model_validate(merged)
        except ValidationError as e:
            raise_if_validation_errors(issues_from_error(e, source=origin))
            raise

        config._raw = merged
        config._sources = tuple(sources)
        config._root = root
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, root: Path | None = None) -> Self:
        """Create configuration from `data` merged over the defaults.

        Raises:
            ConfigValidationError: If a value is invalid.
        """
        return cls._build(deep_merge(DEFAULT_CONFIG, data), root=root)

    @classmethod
    def from_file(cls, path: Path, *, cli_overrides: dict[str, Any] | None = None) -> Self:
        """Load configuration from one TOML file merged over the defaults.

        Relative paths in the file resolve against the file's directory.
        `cli_overrides`, when given, are layered above the file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file is not valid TOML.
            ConfigValidationError: If a value is invalid.
        """
        data = read_toml_file(path)
        sources = [ConfigSource(SourceKind.PROJECT, path=path, values=data)]
        merged = deep_merge(DEFAULT_CONFIG, data)
        if cli_overrides is not None:
            sources.insert(
                0, ConfigSource(SourceKind.CLI, exists=bool(cli_overrides), values=cli_overrides)
            )
            merged = deep_merge(merged, cli_overrides)
        return cls._build(
            merged,
            sources=sources,
            root=path.resolve().parent,
            origin=str(path),
        )

    @classmethod
    def load(
        cls,
        *,
        project_root: Path | None = None,
        include_env: bool = True,
        include_cli: bool = False,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Discover every configuration layer and merge them.

        Layers merge lowest precedence first: defaults, user file, project
        ``folio.toml``, ``FOLIO_*`` environment variables, CLI overrides.

        Args:
            project_root: Directory holding ``folio.toml``. Searched for
                upward from the working directory when None.
            include_env: Read ``FOLIO_<SECTION>__<KEY>`` variables.
            include_cli: Apply `cli_overrides`.
            cli_overrides: Nested mapping of override values.

        Raises:
            ConfigLoadError: If a config file is not valid TOML.
            ConfigValidationError: If any layer holds an invalid value.
        """
        from folio.config._discovery import (  # noqa: PLC0415
            discover_sources,
            find_project_root,
        )

        root = project_root if project_root else find_project_root()
        discovered = discover_sources(
            project_root=root,
            include_env=include_env,
            include_cli=include_cli,
            cli_overrides=cli_overrides,
        )

        layers = [_load_layer(source) for source in reversed(discovered)]
        merged = reduce(deep_merge, (dict(layer.values) for layer in layers), {})

        return cls._build(
            merged,
            sources=reversed(layers),
            root=root.resolve() if root else None,
        )

    @property
    def sources(self) -> list[ConfigSource]:
        """Layers this configuration was merged from, highest precedence first."""
        return list(self._sources)

    @property
    def root(self) -> Path | None:
        return self._root

    def resolve_path(self, value: str) -> Path | None:
        """Resolve a path setting.

        Empty means unset and gives None. Absolute paths are returned as is;
        relative ones are joined onto the config root, or the working
        directory when there is none.
        """
        if not value:
            return None
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return (self._root or Path.cwd()) / path

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a raw value by dotted key, e.g. ``config.get("site.title")``."""
        node: Any = self._raw
        for part in key.split("."):
            node = node.get(part, _MISSING) if isinstance(node, dict) else _MISSING
            if node is _MISSING:
                return default
        return node

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the merged configuration."""
        return deep_merge({}, self._raw)

    def to_toml(self) -> str:
        return tomli_w.dumps(self.to_dict())


def _load_layer(source: ConfigSource) -> ConfigSource:
    from folio.config._validation import (  # noqa: PLC0415
        raise_if_validation_errors,
        validate_config,
    )

    match source.kind:
        case SourceKind.DEFAULT | SourceKind.CLI:
            return source
        case SourceKind.ENV:
            return replace(source, values=parse_env_vars(text_keys=TEXT_KEYS))
        case _ if source.path is not None and source.exists:
            values = read_toml_file(source.path)
            raise_if_validation_errors(
                validate_config(values, source=source.kind.value), source=str(source.path)
            )
            return replace(source, values=values)
        case _:
            return source
