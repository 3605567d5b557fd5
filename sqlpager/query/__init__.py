"""SQL query building for SQL Pager."""

from .sql import SqlQuery

__all__ = ["SqlQuery"]
