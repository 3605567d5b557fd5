"""Opaque cursor tokens for offset-based pagination.

A cursor is the decimal representation of a row offset, encoded with the
URL-safe base64 alphabet and no padding, so it can be embedded in a query
string without escaping. ``encode_cursor(10)`` is ``"MTA"``.
"""

import base64
import binascii
import re
import string

from ..errors.pagination import Base64DecodeError, InvalidNumberError, InvalidUtf8Error

U64_MAX = 2 ** 64 - 1

# Decoded cursors never need more than this many bytes
MAX_CURSOR_BYTES = 32

_URL_SAFE_ALPHABET = frozenset(string.ascii_letters + string.digits + "-_")
_U64_PATTERN = re.compile(r"\+?[0-9]+")


def b64_encode(data: bytes) -> str:
    """Encode bytes as unpadded URL-safe base64."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _strict_b64_decode(token: str) -> bytes:
    invalid = [ch for ch in token if ch not in _URL_SAFE_ALPHABET]
    if invalid:
        raise ValueError(f"Invalid symbol {invalid[0]!r}")
    if len(token) % 4 == 1:
        raise ValueError(f"Invalid input length {len(token)}")

    data = base64.urlsafe_b64decode(token + "=" * (-len(token) % 4))

    # Reject tokens whose last symbol carries non-zero trailing bits
    if b64_encode(data) != token:
        raise ValueError("Invalid last symbol")
    if len(data) > MAX_CURSOR_BYTES:
        raise ValueError(f"Decoded cursor exceeds {MAX_CURSOR_BYTES} bytes")
    return data


def b64_decode(token: str) -> bytes:
    """Decode unpadded URL-safe base64.

    Args:
        token: Base64 text without padding

    Returns:
        Decoded bytes

    Raises:
        Base64DecodeError: If the token is not canonical unpadded URL-safe base64
    """
    try:
        return _strict_b64_decode(token)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(token) from e


def _parse_u64(text: str) -> int:
    if not _U64_PATTERN.fullmatch(text):
        raise ValueError(f"invalid digit found in {text!r}")
    value = int(text)
    if value > U64_MAX:
        raise OverflowError(f"number too large to fit in 64 bits: {text}")
    return value


def encode_cursor(offset: int) -> str:
    """Encode a row offset as an opaque cursor.

    Args:
        offset: Unsigned 64-bit row offset

    Returns:
        URL-safe cursor string

    Raises:
        ValueError: If offset is not an unsigned 64-bit integer
    """
    if offset < 0 or offset > U64_MAX:
        raise ValueError(f"Cursor offset out of range: {offset}")
    return b64_encode(str(offset).encode("ascii"))


def decode_cursor(cursor: str) -> int:
    """Decode an opaque cursor back into a row offset.

    Args:
        cursor: Cursor produced by encode_cursor

    Returns:
        Row offset

    Raises:
        Base64DecodeError: If the cursor is not valid base64
        InvalidUtf8Error: If the decoded bytes are not UTF-8
        InvalidNumberError: If the decoded text is not an unsigned 64-bit integer
    """
    data = b64_decode(cursor)

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error() from e

    try:
        return _parse_u64(text)
    except (ValueError, OverflowError) as e:
        raise InvalidNumberError(text) from e
