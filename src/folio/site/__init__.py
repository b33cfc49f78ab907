"""Static site output."""

from ._build import build_site

__all__ = ["build_site"]
