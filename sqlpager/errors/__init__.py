"""Error handling module for SQL Pager."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    create_problem_response
)
from .pagination import (
    PaginationError,
    InvalidPageSizeError,
    InvalidSourceError,
    Base64DecodeError,
    InvalidUtf8Error,
    InvalidNumberError
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "create_problem_response",
    "PaginationError",
    "InvalidPageSizeError",
    "InvalidSourceError",
    "Base64DecodeError",
    "InvalidUtf8Error",
    "InvalidNumberError",
    "register_exception_handlers"
]
