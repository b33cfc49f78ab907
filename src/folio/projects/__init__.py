"""Project cards: the records shown on the projects page.

Cards are plain, immutable data kept apart from their markup:

    from folio.projects import DEFAULT_PROJECTS, load_projects

    for card in DEFAULT_PROJECTS:
        print(card.title, [link.label for link in card.links])

    cards = load_projects(Path("projects.yaml"))
"""

from ._catalog import DEFAULT_PROJECTS
from ._io import load_projects, resolve_projects
from ._models import Link, ProjectCard

__all__ = [
    "DEFAULT_PROJECTS",
    "Link",
    "ProjectCard",
    "load_projects",
    "resolve_projects",
]
