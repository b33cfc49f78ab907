from collections.abc import Sequence

from jinja2 import Environment

from folio.projects import DEFAULT_PROJECTS, ProjectCard
from folio.templating import render_template

CARD_LIST_TEMPLATE = "card_list.html.j2"


def render_card_list(
    cards: Sequence[ProjectCard] = DEFAULT_PROJECTS,
    *,
    env: Environment | None = None,
) -> str:
    """Render project cards as an HTML fragment, one card per record in order."""
    return render_template(CARD_LIST_TEMPLATE, {"cards": tuple(cards)}, env=env)
