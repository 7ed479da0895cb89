"""Base64 encoding/decoding utilities for cookieseal."""

from __future__ import annotations

import base64
import binascii
import re

# Unpadded and padded forms of the URL-safe alphabet (RFC 4648 section 5)
_BASE64URL_RAW_PATTERN = re.compile(r"[A-Za-z0-9_-]*")
_BASE64URL_PADDED_PATTERN = re.compile(r"[A-Za-z0-9_-]*={0,2}")


class Base64URLDecodeError(ValueError):
    """String is not valid URL-safe base64."""

    pass


def to_base64url(data: bytes) -> str:
    """Encode bytes to URL-safe base64 without padding.

    Args:
        data: The bytes to encode.

    Returns:
        URL-safe base64 string without padding.
    """
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def to_base64url_padded(data: bytes) -> str:
    """Encode bytes to URL-safe base64 with padding.

    Args:
        data: The bytes to encode.

    Returns:
        URL-safe base64 string, padded to a multiple of four characters.
    """
    return base64.urlsafe_b64encode(data).decode("ascii")


def from_base64url(s: str) -> bytes:
    """Decode an unpadded URL-safe base64 string to bytes.

    Args:
        s: The base64url string to decode.

    Returns:
        The decoded bytes.

    Raises:
        Base64URLDecodeError: If the string contains padding, characters of the
            standard alphabet, other foreign characters, or has an impossible length.
    """
    if any(c in s for c in "+/="):
        raise Base64URLDecodeError("Base64URL string contains forbidden characters")
    if not _BASE64URL_RAW_PATTERN.fullmatch(s):
        raise Base64URLDecodeError("Base64URL string contains non-Base64URL characters")
    if len(s) % 4 == 1:
        raise Base64URLDecodeError(f"Base64URL string has invalid length: {len(s)}")

    # Add padding if needed
    padding = 4 - (len(s) % 4)
    if padding != 4:
        s += "=" * padding
    return base64.urlsafe_b64decode(s)


def from_base64url_padded(s: str) -> bytes:
    """Decode a padded URL-safe base64 string to bytes.

    Args:
        s: The padded base64url string to decode.

    Returns:
        The decoded bytes.

    Raises:
        Base64URLDecodeError: If the string is not correctly padded URL-safe base64.
    """
    if "+" in s or "/" in s:
        raise Base64URLDecodeError("Base64URL string contains forbidden characters")
    if not _BASE64URL_PADDED_PATTERN.fullmatch(s) or len(s) % 4 != 0:
        raise Base64URLDecodeError("Base64URL string is not correctly padded")
    try:
        return base64.urlsafe_b64decode(s)
    except binascii.Error as e:
        raise Base64URLDecodeError(f"Base64URL decoding failed: {e}") from e


def encode_text(s: str) -> bytes:
    """Encode text to UTF-8 without ever raising.

    Lone surrogates from ``os.environ`` or ``os.fsdecode`` (U+DC80..U+DCFF)
    map back to the original bytes; any other lone surrogate is encoded as-is.

    Args:
        s: The text to encode.

    Returns:
        The encoded bytes.
    """
    try:
        return s.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return s.encode("utf-8", "surrogatepass")
