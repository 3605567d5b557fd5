"""Cursor-based pagination for SQL queries."""

from .config import Settings, get_settings, configure_logging
from .errors import (
    PaginationError,
    InvalidPageSizeError,
    InvalidSourceError,
    Base64DecodeError,
    InvalidUtf8Error,
    InvalidNumberError
)
from .pagination import (
    Container,
    Paginator,
    PageInfo,
    Pager,
    encode_cursor,
    decode_cursor
)
from .pagination.response import (
    PaginationParams,
    PaginatedResponse,
    paginate_query_results,
    create_link_header
)
from .query import SqlQuery

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "PaginationError",
    "InvalidPageSizeError",
    "InvalidSourceError",
    "Base64DecodeError",
    "InvalidUtf8Error",
    "InvalidNumberError",
    "Container",
    "Paginator",
    "PageInfo",
    "Pager",
    "encode_cursor",
    "decode_cursor",
    "PaginationParams",
    "PaginatedResponse",
    "paginate_query_results",
    "create_link_header",
    "SqlQuery"
]
