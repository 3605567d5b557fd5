"""Page envelopes and Link headers built from paged query results."""

from typing import Optional, Dict, Any, List, Iterable
from urllib.parse import urlencode

from pydantic import BaseModel, Field

from .cursor import encode_cursor
from ..query.sql import SqlQuery


class PaginationParams(BaseModel):
    """Query parameters for pagination."""

    cursor: Optional[str] = Field(default=None, description="Cursor for pagination")
    page_size: int = Field(default=0, ge=0, description="Number of items per page, 0 for the default")

    def to_query(
        self,
        source: str,
        projection: Optional[List[str]] = None,
        filter: Optional[str] = None,
        order: Optional[str] = None
    ) -> SqlQuery:
        """Build the SqlQuery these parameters select.

        Raises:
            InvalidPageSizeError: If page_size is out of range
            InvalidSourceError: If source is empty
        """
        return SqlQuery.build(
            source=source,
            projection=projection,
            filter=filter,
            order=order,
            cursor=self.cursor,
            page_size=self.page_size
        )


class PaginatedResponse(BaseModel):
    """Response model for paginated data."""

    items: List[Any] = Field(description="List of items")
    next_cursor: Optional[str] = Field(default=None, description="Cursor for next page")
    prev_cursor: Optional[str] = Field(default=None, description="Cursor for previous page")
    has_more: bool = Field(description="Whether more items are available")
    total_count: Optional[int] = Field(default=None, description="Total count if available")


def paginate_query_results(query: SqlQuery, rows: Iterable[Any]) -> PaginatedResponse:
    """Process rows fetched with ``query.to_sql()`` for pagination.

    Args:
        query: Query the rows were fetched with
        rows: Rows in fetch order, including the lookahead row if any

    Returns:
        Page with the lookahead row removed and cursors for adjacent pages
    """
    items = list(rows)
    pager = query.get_pager(items)

    return PaginatedResponse(
        items=items,
        next_cursor=encode_cursor(pager.next) if pager.next is not None else None,
        prev_cursor=encode_cursor(pager.prev) if pager.prev is not None else None,
        has_more=pager.next is not None,
        total_count=pager.total
    )


def create_link_header(
    base_url: str,
    params: Dict[str, Any],
    next_cursor: Optional[str] = None,
    prev_cursor: Optional[str] = None
) -> Optional[str]:
    """Create Link header for pagination as per RFC 8288.

    Args:
        base_url: Base URL for the resource
        params: Current query parameters
        next_cursor: Cursor for next page
        prev_cursor: Cursor for previous page

    Returns:
        Link header value or None if no links
    """
    links = []

    if next_cursor:
        next_url = f"{base_url}?" + urlencode({**params, "cursor": next_cursor})
        links.append(f'<{next_url}>; rel="next"')

    if prev_cursor:
        prev_url = f"{base_url}?" + urlencode({**params, "cursor": prev_cursor})
        links.append(f'<{prev_url}>; rel="prev"')

    return ", ".join(links) if links else None

