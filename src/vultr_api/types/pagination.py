# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Cursor pagination types shared by every list endpoint.

List responses carry a ``meta`` object next to the collection::

    {"databases": [...], "meta": {"total": 42, "links": {"next": "bmV4dA==", "prev": ""}}}

Traversal is caller-driven: issue the same list call again with
``ListOptions.with_cursor(meta.next_cursor)`` until ``meta.next_cursor`` is
None. Cursor values are opaque provider tokens and are passed through
unchanged.
"""

from pydantic import Field
from typing_extensions import Self

from .model import VultrModel


class Links(VultrModel):
    """Cursor tokens for the neighbouring pages. Empty string means no page."""

    next: str = ""
    prev: str = ""


class Meta(VultrModel):
    """Pagination metadata attached to every list envelope."""

    total: int = Field(default=0, ge=0)
    links: Links = Field(default_factory=Links)

    @property
    def next_cursor(self) -> str | None:
        """Cursor for the next page, or None on the last page."""
        return self.links.next or None

    @property
    def prev_cursor(self) -> str | None:
        """Cursor for the previous page, or None on the first page."""
        return self.links.prev or None

    @property
    def has_next(self) -> bool:
        return bool(self.links.next)


class ListOptions(VultrModel):
    """Query parameters accepted by every list endpoint.

    Resource specific filters (label, tag, region, ...) are declared on
    subclasses.
    """

    per_page: int | None = Field(default=None, gt=0, le=500)
    cursor: str | None = None

    def with_cursor(self, cursor: str | None) -> Self:
        """Return a copy of these options positioned at ``cursor``."""
        return self.model_copy(update={"cursor": cursor})


__all__ = ["Links", "ListOptions", "Meta"]
