"""The default page chrome."""

from typing import Protocol

from jinja2 import Environment
from markupsafe import Markup

from folio.config import SiteConfig
from folio.templating import render_template

from ._metadata import PageMetadata

LAYOUT_TEMPLATE = "layout.html.j2"


class Layout(Protocol):
    """Renders page chrome (head, header, footer) around a page body."""

    def __call__(self, body: Markup, metadata: PageMetadata, /) -> str: ...


def make_layout(site: SiteConfig, *, env: Environment | None = None) -> Layout:
    """Create a Layout that renders ``layout.html.j2`` for the given site."""

    def layout(body: Markup, metadata: PageMetadata, /) -> str:
        return render_template(
            LAYOUT_TEMPLATE,
            {"site": site, "page": metadata, "body": Markup(body)},
            env=env,
        )

    return layout
