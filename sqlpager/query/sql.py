"""SQL query builder with cursor pagination."""

import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config import Settings, get_settings
from ..errors.pagination import InvalidPageSizeError, InvalidSourceError, PaginationError
from ..pagination.cursor import decode_cursor, encode_cursor
from ..pagination.pager import Container, PageInfo, Pager

logger = logging.getLogger(__name__)


class SqlQuery(BaseModel):
    """A paged SELECT over a single table or view.

    Build instances with :meth:`build`, which normalizes and validates the
    page size. ``filter``, ``order`` and ``source`` are emitted verbatim;
    sanitizing them is up to the caller.
    """

    source: str = Field(default="", description="Source table or view")
    projection: List[str] = Field(default_factory=list, description="Fields to include in the result")
    filter: Optional[str] = Field(default=None, description="Filter condition (the WHERE clause)")
    order: Optional[str] = Field(default=None, description="Sort order (the ORDER BY clause)")
    cursor: Optional[str] = Field(
        default=None,
        description="Cursor of the page to fetch; encodes the number of rows to skip"
    )
    page_size: int = Field(default=0, ge=0, description="Rows per page")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "source": "users",
                "projection": ["id", "name"],
                "filter": "id > 10",
                "order": "id DESC",
                "cursor": "MTA",
                "page_size": 10
            }
        }
    )

    @classmethod
    def build(
        cls,
        source: str = "",
        projection: Optional[List[str]] = None,
        filter: Optional[str] = None,
        order: Optional[str] = None,
        cursor: Optional[str] = None,
        page_size: int = 0,
        settings: Optional[Settings] = None
    ) -> "SqlQuery":
        """Build a query, normalizing then validating the page size.

        A page size of 0 becomes the default; anything above the maximum is
        clamped to the maximum, which validation then rejects.

        Args:
            source: Table or view name
            projection: Column expressions, empty for all columns
            filter: WHERE clause body
            order: ORDER BY clause body
            cursor: Cursor from a previous page
            page_size: Requested rows per page
            settings: Settings to use, defaults to the global instance

        Returns:
            Validated query

        Raises:
            InvalidPageSizeError: If the normalized page size is out of range
            InvalidSourceError: If source is empty
        """
        settings = settings or get_settings()

        if page_size == 0:
            page_size = settings.default_page_size
        elif page_size > settings.max_page_size:
            page_size = settings.max_page_size

        if not 0 < page_size < settings.max_page_size:
            raise InvalidPageSizeError(page_size)
        if not source:
            raise InvalidSourceError()

        query = cls(
            source=source,
            projection=list(projection or []),
            filter=filter,
            order=order,
            cursor=cursor,
            page_size=page_size
        )
        logger.debug(f"Built query over {source} with page size {page_size}")
        return query

    def to_sql(self) -> str:
        """Render the query as SQL text.

        The limit is ``page_size + 1`` on the first page and ``page_size + 2``
        once a cursor is set.
        """
        middle_plus = 0 if self.cursor is None else 1
        limit = self.page_size + 1 + middle_plus
        offset = self.get_cursor() or 0

        parts = [
            "SELECT",
            self.projection_sql(),
            "FROM",
            self.source,
            f"WHERE {self.filter}" if self.filter is not None else "",
            f"ORDER BY {self.order}" if self.order is not None else "",
            "LIMIT",
            str(limit),
            "OFFSET",
            str(offset),
        ]
        return " ".join(part for part in parts if part)

    def get_cursor(self) -> Optional[int]:
        """Decoded cursor offset, or None when absent or undecodable."""
        if self.cursor is None:
            return None
        try:
            return decode_cursor(self.cursor)
        except PaginationError as e:
            logger.debug(f"Ignoring undecodable cursor {self.cursor!r}: {e}")
            return None

    def page_info(self) -> PageInfo:
        return PageInfo(cursor=self.get_cursor(), page_size=self.page_size)

    def get_pager(self, data: Container) -> Pager:
        """Compute prev/next offsets, popping the lookahead row from ``data``."""
        return self.page_info().get_pager(data)

    def next_page(self, pager: Pager) -> Optional["SqlQuery"]:
        """Query for the page after this one, or None on the last page."""
        page_info = self.page_info().next_page(pager)
        if page_info is None:
            return None

        cursor = encode_cursor(page_info.cursor) if page_info.cursor is not None else None
        return self.model_copy(update={"cursor": cursor, "page_size": page_info.page_size})

    def projection_sql(self) -> str:
        if not self.projection:
            return "*"
        return ", ".join(self.projection)
