"""Generic offset paginator driven by a lookahead row."""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


@runtime_checkable
class Container(Protocol):
    """Fetched rows: anything that can drop its last element and report a length.

    ``list`` and ``collections.deque`` both qualify.
    """

    def pop(self): ...

    def __len__(self) -> int: ...


class Pager(BaseModel):
    """Offsets of the adjacent pages, ``None`` when there is no such page."""

    prev: Optional[int] = Field(default=None, description="Offset of the previous page")
    next: Optional[int] = Field(default=None, description="Offset of the next page")
    total: Optional[int] = Field(default=None, description="Total row count, not computed")

    model_config = ConfigDict(frozen=True)


class Paginator(Protocol):
    def get_pager(self, data: Container) -> Pager: ...

    def next_page(self, pager: Pager) -> Optional[Paginator]: ...

    def prev_page(self, pager: Pager) -> Optional[Paginator]: ...


class PageInfo(BaseModel):
    """Which page, and how big."""

    cursor: Optional[int] = Field(default=None, ge=0, description="Row offset of the page")
    page_size: int = Field(default=0, ge=0, description="Rows per page")

    model_config = ConfigDict(frozen=True)

    def get_pager(self, data: Container) -> Pager:
        """Compute adjacent page offsets from a fetched page.

        ``data`` must hold the rows fetched with ``page_size + 1`` as the
        limit. When the lookahead row is present it is popped off, leaving
        exactly ``page_size`` rows behind.

        Args:
            data: Rows fetched for this page, in order

        Returns:
            Pager with prev/next offsets
        """
        prev = None
        if self.cursor:
            prev = max(0, self.cursor - self.page_size)

        next_offset = None
        if len(data) > self.page_size:
            data.pop()
            next_offset = (self.cursor or 0) + self.page_size

        logger.debug(
            f"Computed pager for cursor={self.cursor} page_size={self.page_size}: "
            f"prev={prev} next={next_offset}"
        )
        return Pager(prev=prev, next=next_offset, total=None)

    def next_page(self, pager: Pager) -> Optional[PageInfo]:
        """Page descriptor following this one, if any."""
        if pager.next is None:
            return None
        return PageInfo(cursor=pager.next, page_size=self.page_size)

    def prev_page(self, pager: Pager) -> Optional[PageInfo]:
        """Page descriptor preceding this one, if any."""
        if pager.prev is None:
            return None
        return PageInfo(cursor=pager.prev, page_size=self.page_size)
