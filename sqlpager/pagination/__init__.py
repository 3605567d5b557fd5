"""Pagination module for cursor-based pagination."""

from .cursor import (
    encode_cursor,
    decode_cursor,
    b64_encode,
    b64_decode
)
from .pager import (
    Container,
    Paginator,
    PageInfo,
    Pager
)

__all__ = [
    "encode_cursor",
    "decode_cursor",
    "b64_encode",
    "b64_decode",
    "Container",
    "Paginator",
    "PageInfo",
    "Pager"
]
