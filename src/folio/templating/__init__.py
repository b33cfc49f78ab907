r"""Folio templating.

Jinja2 environment and rendering helpers for page markup. Built-in templates
ship in ``folio/templates``; a site can shadow any of them from its own
directory.

Basic usage:
    from folio.templating import create_environment, render_template

    env = create_environment(override_dir=Path("templates"))
    html = render_template("card_list.html.j2", {"cards": cards}, env=env)
"""

from ._environment import EnvironmentConfig, create_environment, create_site_environment
from ._renderer import render_template, render_template_string

__all__ = [
    "EnvironmentConfig",
    "create_environment",
    "create_site_environment",
    "render_template",
    "render_template_string",
]
