"""Folio configuration.

Settings come from layered TOML files (user, then project ``folio.toml``),
``FOLIO_<SECTION>__<KEY>`` environment variables and CLI overrides, merged
over built-in defaults and validated into typed sections.

Example:
    >>> from folio.config import Config
    >>> Config.from_dict({"site": {"title": "Notes"}}).site.title
    'Notes'
"""

from folio.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._defaults import DEFAULT_CONFIG
from ._discovery import (
    PROJECT_CONFIG_NAME,
    discover_sources,
    find_project_root,
    get_user_config_path,
)
from ._load import safe_load_config
from ._loader import (
    deep_merge,
    parse_cli_overrides,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    set_nested_key,
)
from ._models import (
    SECTIONS,
    TEXT_KEYS,
    Config,
    ConfigSource,
    LogFormat,
    LoggingConfig,
    LogLevel,
    ProjectsConfig,
    SiteConfig,
    SourceKind,
)
from ._validation import ValidationIssue, validate_config

__all__ = [
    "DEFAULT_CONFIG",
    "PROJECT_CONFIG_NAME",
    "SECTIONS",
    "TEXT_KEYS",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ProjectsConfig",
    "SiteConfig",
    "SourceKind",
    "ValidationIssue",
    "deep_merge",
    "discover_sources",
    "find_project_root",
    "get_user_config_path",
    "parse_cli_overrides",
    "parse_env_vars",
    "parse_string_value",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
    "validate_config",
]
