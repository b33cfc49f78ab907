"""Page metadata and the default SEO builder."""

from typing import ClassVar, Protocol

from pydantic import BaseModel, ConfigDict, Field

from folio.config import SiteConfig


class PageMetadata(BaseModel):
    """Document-head metadata for one page."""

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    title: str = Field(..., description="Page title as shown in the heading")
    full_title: str = Field(..., description="Title used in <title> and share tags")
    description: str = Field(default="", description="Meta description")
    canonical_url: str | None = Field(default=None, description="Canonical URL")
    language: str = Field(default="en", description="Document language")


class Seo(Protocol):
    """Builds head metadata for a page title."""

    def __call__(self, title: str, /) -> PageMetadata: ...


def make_seo(
    site: SiteConfig,
    *,
    path: str = "",
    description: str | None = None,
) -> Seo:
    """Create an Seo capability bound to site-wide metadata.

    The page title is suffixed with the site title ("Projects | My Site")
    unless the site title is empty or identical. A canonical URL is produced
    only when the site URL is configured.

    Args:
        site: Site configuration section.
        path: Path of the page below the site URL (e.g. "/projects/").
        description: Page description; defaults to the site description.
    """
    canonical_url = f"{site.url.rstrip('/')}{path}" if site.url else None
    page_description = site.description if description is None else description

    def seo(title: str, /) -> PageMetadata:
        full_title = title
        if site.title and site.title != title:
            full_title = f"{title} | {site.title}"
        return PageMetadata(
            title=title,
            full_title=full_title,
            description=page_description,
            canonical_url=canonical_url,
            language=site.language,
        )

    return seo
