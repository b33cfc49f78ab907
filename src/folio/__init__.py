"""Folio: render and serve a portfolio projects page."""

from folio.pages import compose_page, render_card_list, render_projects_page
from folio.projects import DEFAULT_PROJECTS, Link, ProjectCard

__all__ = [
    "DEFAULT_PROJECTS",
    "Link",
    "ProjectCard",
    "compose_page",
    "render_card_list",
    "render_projects_page",
]
