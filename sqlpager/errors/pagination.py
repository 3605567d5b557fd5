"""Typed errors raised while building queries and decoding cursors."""

from .problem_details import BadRequestError


class PaginationError(BadRequestError):
    """Base class for all pagination errors."""

    error_code = "PAGINATION_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail, error_code=self.error_code)


class InvalidPageSizeError(PaginationError):
    """Page size outside the accepted range after normalization."""

    error_code = "INVALID_PAGE_SIZE"

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Page size must be between 1-99. Got: {size}")


class InvalidSourceError(PaginationError):
    """Query source is empty."""

    error_code = "INVALID_SOURCE"

    def __init__(self):
        super().__init__("Source cannot be empty")


class Base64DecodeError(PaginationError):
    """Cursor token is not valid unpadded URL-safe base64."""

    error_code = "INVALID_BASE64"

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid base64 string: {token}")


class InvalidUtf8Error(PaginationError):
    """Decoded cursor bytes are not valid UTF-8."""

    error_code = "INVALID_UTF8"

    def __init__(self):
        super().__init__("Invalid UTF-8 string")


class InvalidNumberError(PaginationError):
    """Decoded cursor text is not an unsigned 64-bit integer."""

    error_code = "INVALID_NUMBER"

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid number: {text}")
