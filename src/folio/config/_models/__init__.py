"""Configuration models: the three sections, source descriptors and Config."""

from folio.config._models._config import Config
from folio.config._models._logging import LogFormat, LoggingConfig, LogLevel
from folio.config._models._projects import ProjectsConfig
from folio.config._models._sections import SECTIONS, TEXT_KEYS
from folio.config._models._site import SiteConfig
from folio.config._models._source import ConfigSource, SourceKind

__all__ = [
    "SECTIONS",
    "TEXT_KEYS",
    "Config",
    "ConfigSource",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "ProjectsConfig",
    "SiteConfig",
    "SourceKind",
]
