"""Cookie signatures for cookieseal."""

from __future__ import annotations

import hmac
import logging
from collections.abc import Sequence

from ..algorithms import HashAlgorithm
from .constants import FIELD_LENGTH_PREFIX_SIZE
from .utils import encode_text, to_base64url_padded

logger = logging.getLogger("cookieseal")

# Current algorithm first, legacy ones after
VERIFY_ALGORITHMS: tuple[HashAlgorithm, ...] = (HashAlgorithm.SHA256, HashAlgorithm.SHA1)


def build_message(key: str, value: str, epoch: str) -> bytes:
    """Build the signed message from the cookie fields.

    Each field is UTF-8 encoded and prefixed with its length
    (4 bytes, big-endian), so field boundaries cannot be shifted.

    Args:
        key: The cookie name.
        value: The cookie value.
        epoch: The issue timestamp as text.

    Returns:
        The message bytes.
    """
    message = b""
    for field in (key, value, epoch):
        data = encode_text(field)
        message += len(data).to_bytes(FIELD_LENGTH_PREFIX_SIZE, "big") + data
    return message


def sign(hash_algorithm: HashAlgorithm, seed: str, key: str, value: str, epoch: str) -> str:
    """Compute the signature of a cookie.

    Args:
        hash_algorithm: The HMAC hash algorithm.
        seed: The signing secret.
        key: The cookie name.
        value: The cookie value.
        epoch: The issue timestamp as text.

    Returns:
        URL-safe base64 (padded) of the HMAC digest.
    """
    digest = hmac.new(
        encode_text(seed),
        build_message(key, value, epoch),
        hash_algorithm.digestmod,
    ).digest()
    return to_base64url_padded(digest)


def verify(
    signature: str,
    seed: str,
    key: str,
    value: str,
    epoch: str,
    *,
    algorithms: Sequence[HashAlgorithm] = VERIFY_ALGORITHMS,
) -> bool:
    """Check a cookie signature against each supported algorithm in order.

    Malformed signatures simply don't match.

    Args:
        signature: The signature carried with the cookie.
        seed: The signing secret.
        key: The cookie name.
        value: The cookie value.
        epoch: The issue timestamp as text.
        algorithms: Accepted algorithms, current one first.

    Returns:
        True if any algorithm produces a matching signature, False otherwise.
    """
    candidate = signature.encode("utf-8", "replace")
    for index, algorithm in enumerate(algorithms):
        expected = sign(algorithm, seed, key, value, epoch).encode("ascii")
        # Constant-time comparison to prevent timing attacks
        if hmac.compare_digest(expected, candidate):
            if index > 0:
                logger.debug("Signature matched legacy algorithm %s", algorithm.value)
            return True
    return False
