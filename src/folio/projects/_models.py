"""Pydantic models for project cards."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """An outbound link shown at the bottom of a project card.

    External links open in a new browsing context without sending a referrer.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="forbid", str_strip_whitespace=True
    )

    label: str = Field(..., min_length=1, description="Link text")
    url: str = Field(..., min_length=1, description="Link target")
    external: bool = Field(default=False, description="Open in a new tab")

    @property
    def target(self) -> str | None:
        return "_blank" if self.external else None

    @property
    def rel(self) -> str | None:
        return "noreferrer" if self.external else None


class ProjectCard(BaseModel):
    """One project's display record.

    A card always has a non-empty title and at least one link.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(
        frozen=True, extra="forbid", str_strip_whitespace=True
    )

    title: str = Field(..., min_length=1, description="Card heading")
    description: str = Field(default="", description="Short summary")
    image_path: str = Field(..., description="Banner image URL or site path")
    alt_text: str = Field(default="", description="Alternative text for the banner")
    links: tuple[Link, ...] = Field(..., min_length=1, description="Ordered links")
