"""Pydantic models for the PhyloPic ``/images`` response.

Only the fields the marker pipeline reads are modelled; everything else in
the payload is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ImageIndexResult(BaseModel):
    """One ``_links.items[]`` entry: a resource path and its display title."""

    model_config = ConfigDict(extra="ignore")

    href: str
    title: str = ""


class IndexLinks(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[ImageIndexResult] = Field(default_factory=list)


class ImageIndexResponse(BaseModel):
    """Top level of an ``/images`` page."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    links: IndexLinks = Field(default_factory=IndexLinks, alias="_links")
    build: int | None = Field(default=None, description="Index build the page was served from")

    @property
    def items(self) -> list[ImageIndexResult]:
        return self.links.items

    @property
    def pinned_build(self) -> int | None:
        """Build number to echo back, or None when the response didn't carry one."""
        if self.build is not None and self.build > 0:
            return self.build
        return None
