"""Site configuration model.

This module provides the SiteConfig Pydantic model for the metadata shared by
every rendered page (title, description, canonical URL, author) and for the
optional directories that customize the output.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class SiteConfig(BaseModel):
    """Site configuration section.

    Attributes:
        title: Site title, appended to page titles.
        description: Default page description.
        url: Public base URL, used for canonical links. Empty disables them.
        author: Author shown in the footer.
        language: Document language code.
        static_dir: Directory copied into the build output and served at /static.
        template_dir: Directory whose templates override the built-in ones.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    title: str = ""
    description: str = ""
    url: str = ""
    author: str = ""
    language: str = Field(default="en", min_length=1)
    static_dir: str = ""
    template_dir: str = ""
