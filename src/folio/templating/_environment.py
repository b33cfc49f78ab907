"""Jinja2 Environment factory."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape

if TYPE_CHECKING:
    from jinja2 import BaseLoader

    from folio.config import Config


@dataclass(slots=True, frozen=True)
class EnvironmentConfig:
    """Configuration for the Jinja2 Environment.

    Attributes:
        autoescape_extensions: Template name suffixes rendered with HTML
            autoescaping. Inline template strings are always escaped.
        trim_blocks: Remove first newline after a block tag.
        lstrip_blocks: Strip leading whitespace before block tags.
        keep_trailing_newline: Preserve trailing newline in templates.
    """

    autoescape_extensions: tuple[str, ...] = ("html", "j2")
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    keep_trailing_newline: bool = True


def create_environment(
    *,
    override_dir: Path | None = None,
    config: EnvironmentConfig | None = None,
) -> Environment:
    """Create a Jinja2 Environment for page templates.

    Templates are looked up in `override_dir` first (when it is an existing
    directory), then in the package's built-in templates. Unlike plain text
    templates, page markup is always autoescaped.

    Args:
        override_dir: Optional directory whose templates shadow built-in ones.
        config: Optional environment configuration. If None, uses defaults.

    Returns:
        Configured Jinja2 Environment.

    Example:
        env = create_environment()
        html = env.get_template("card_list.html.j2").render(cards=DEFAULT_PROJECTS)
    """
    if config is None:
        config = EnvironmentConfig()

    loaders: list[BaseLoader] = []
    if override_dir is not None and override_dir.is_dir():
        loaders.append(FileSystemLoader(str(override_dir)))
    loaders.append(PackageLoader("folio", "templates"))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(
            enabled_extensions=config.autoescape_extensions,
            default_for_string=True,
        ),
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        keep_trailing_newline=config.keep_trailing_newline,
    )


def create_site_environment(config: "Config") -> Environment:  # noqa: UP037
    """Create an Environment honouring the configured ``site.template_dir``."""
    return create_environment(
        override_dir=config.resolve_path(config.site.template_dir)
    )
