"""Operator secret decoding for cookieseal."""

from __future__ import annotations

import logging

from .constants import VALID_KEY_SIZES
from .utils import Base64URLDecodeError, encode_text, from_base64url, from_base64url_padded

logger = logging.getLogger("cookieseal")


def _try_decode_base64url(s: str) -> bytes | None:
    """Decode ``s`` as raw, then padded, URL-safe base64; None if neither works."""
    for decode in (from_base64url, from_base64url_padded):
        try:
            return decode(s)
        except Base64URLDecodeError:
            continue
    return None


def decode_secret(secret: str) -> bytes:
    """Turn an operator secret into key bytes.

    Secrets are usually pasted as URL-safe base64, with or without padding.
    The decoded form is only used when it has a valid AES key length;
    anything else (not base64, or base64 of the wrong length) is used
    byte-for-byte as UTF-8, with surrogate-escaped characters from
    ``os.environ`` turned back into their original bytes.

    Args:
        secret: The operator-supplied secret string.

    Returns:
        The key bytes. Never raises.
    """
    decoded = _try_decode_base64url(secret)
    if decoded is not None and len(decoded) in VALID_KEY_SIZES:
        return decoded

    logger.debug("Secret is not base64 of a valid key size, using its raw bytes")
    return encode_text(secret)
