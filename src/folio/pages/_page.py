"""Page composition.

A page is a single ``<h1>`` heading followed by its content, wrapped by an
injected layout. The layout and the SEO builder are passed in, so callers
(and tests) decide what chrome and metadata a page gets.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING

from jinja2 import Environment
from markupsafe import Markup

from folio.config import SiteConfig
from folio.projects import DEFAULT_PROJECTS, ProjectCard, resolve_projects
from folio.templating import create_site_environment, render_template

from ._cards import render_card_list
from ._layout import Layout, make_layout
from ._metadata import Seo, make_seo

if TYPE_CHECKING:
    from folio.config import Config

PAGE_TEMPLATE = "page.html.j2"
PROJECTS_TITLE = "Projects"
PROJECTS_PATH = "/projects/"


def compose_page(
    title: str,
    content: str,
    *,
    layout: Layout,
    seo: Seo,
    env: Environment | None = None,
) -> str:
    """Compose a full page.

    Args:
        title: Page title, rendered as the only top-level heading.
        content: Already-rendered HTML placed once below the heading.
        layout: Page chrome, called once with the body and metadata.
        seo: Metadata builder, called once with the title.
        env: Optional Jinja2 Environment for the body template.

    Returns:
        The complete HTML document produced by `layout`.
    """
    metadata = seo(title)
    body = render_template(
        PAGE_TEMPLATE,
        {"title": title, "content": Markup(content)},
        env=env,
    )
    return layout(Markup(body), metadata)


def render_projects_page(
    cards: Sequence[ProjectCard] = DEFAULT_PROJECTS,
    *,
    layout: Layout | None = None,
    seo: Seo | None = None,
    env: Environment | None = None,
) -> str:
    """Render the "Projects" page.

    Without injected collaborators, the built-in layout and SEO builder are
    used with an empty site configuration.
    """
    site = SiteConfig()
    if layout is None:
        layout = make_layout(site, env=env)
    if seo is None:
        seo = make_seo(site, path=PROJECTS_PATH)

    return compose_page(
        PROJECTS_TITLE,
        render_card_list(cards, env=env),
        layout=layout,
        seo=seo,
        env=env,
    )


def render_site_projects_page(config: "Config") -> str:  # noqa: UP037
    """Render the projects page for a loaded configuration.

    Raises:
        FileNotFoundError: If the configured projects file does not exist.
        ProjectDataError: If the configured projects file is invalid.
    """
    env = create_site_environment(config)
    return render_projects_page(
        resolve_projects(config),
        layout=make_layout(config.site, env=env),
        seo=make_seo(config.site, path=PROJECTS_PATH),
        env=env,
    )
