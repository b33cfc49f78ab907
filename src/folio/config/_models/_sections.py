"""Top-level configuration sections and their models."""

from pydantic import BaseModel

from folio.config._models._logging import LoggingConfig
from folio.config._models._projects import ProjectsConfig
from folio.config._models._site import SiteConfig

SECTIONS: dict[str, type[BaseModel]] = {
    "logging": LoggingConfig,
    "site": SiteConfig,
    "projects": ProjectsConfig,
}

# Dotted keys of plain text settings; environment and CLI values for these
# are kept as written instead of being read as TOML literals
TEXT_KEYS: frozenset[str] = frozenset(
    f"{name}.{field}"
    for name, model in SECTIONS.items()
    for field, info in model.model_fields.items()
    if info.annotation is str
)
