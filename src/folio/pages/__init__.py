"""Page rendering: the card list, page composition and default chrome."""

from ._cards import render_card_list
from ._layout import Layout, make_layout
from ._metadata import PageMetadata, Seo, make_seo
from ._page import (
    PROJECTS_PATH,
    PROJECTS_TITLE,
    compose_page,
    render_projects_page,
    render_site_projects_page,
)

__all__ = [
    "PROJECTS_PATH",
    "PROJECTS_TITLE",
    "Layout",
    "PageMetadata",
    "Seo",
    "compose_page",
    "make_layout",
    "make_seo",
    "render_card_list",
    "render_projects_page",
    "render_site_projects_page",
]
