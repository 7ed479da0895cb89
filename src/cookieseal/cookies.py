"""Signed cookie values for cookieseal.

A signed value has the form ``<payload>|<issued at>|<signature>`` where the
payload is URL-safe base64, the issue time is in Unix seconds, and the
signature binds both to the cookie name.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from .algorithms import HashAlgorithm
from .constants import (
    DEFAULT_CLOCK_SKEW,
    DEFAULT_SIGNATURE_ALGORITHM,
    SIGNED_VALUE_SEPARATOR,
)
from .crypto.signature import VERIFY_ALGORITHMS, sign, verify
from .crypto.utils import Base64URLDecodeError, from_base64url_padded, to_base64url_padded
from .types import SignedValue

logger = logging.getLogger("cookieseal")


def signed_value(
    seed: str,
    key: str,
    value: bytes,
    now: datetime,
    *,
    hash_algorithm: HashAlgorithm = DEFAULT_SIGNATURE_ALGORITHM,
) -> str:
    """Encode and sign a cookie value.

    Args:
        seed: The signing secret.
        key: The cookie name.
        value: The payload to store.
        now: The issue time.
        hash_algorithm: The signature algorithm.

    Returns:
        The signed cookie value.
    """
    encoded_value = to_base64url_padded(value)
    epoch = str(int(now.timestamp()))
    signature = sign(hash_algorithm, seed, key, encoded_value, epoch)
    return SIGNED_VALUE_SEPARATOR.join((encoded_value, epoch, signature))


def validate_signed_value(
    seed: str,
    key: str,
    cookie_value: str,
    expiration: timedelta,
    now: datetime | None = None,
    *,
    algorithms: Sequence[HashAlgorithm] = VERIFY_ALGORITHMS,
) -> SignedValue | None:
    """Check a signed cookie value and return its payload.

    The value is accepted only if the signature matches, it was issued within
    ``expiration`` of ``now`` and not more than five minutes in the future.

    Args:
        seed: The signing secret.
        key: The cookie name.
        cookie_value: The signed cookie value.
        expiration: Maximum age of the value.
        now: The current time. Defaults to the system clock.
        algorithms: Accepted signature algorithms, current one first.

    Returns:
        The payload and issue time, or None if the value is not acceptable.
    """
    parts = cookie_value.split(SIGNED_VALUE_SEPARATOR)
    if len(parts) != 3:
        logger.debug("Rejected signed value: expected three fields")
        return None
    encoded_value, epoch, signature = parts

    if not verify(signature, seed, key, encoded_value, epoch, algorithms=algorithms):
        logger.debug("Rejected signed value: invalid signature")
        return None

    # Unix seconds; 12 digits reach well past year 9999
    if not (epoch.isascii() and epoch.isdigit()) or len(epoch) > 12:
        logger.debug("Rejected signed value: invalid timestamp")
        return None
    issued_ts = int(epoch)

    now_ts = (now or datetime.now(timezone.utc)).timestamp()
    if not (
        now_ts - expiration.total_seconds() < issued_ts < now_ts + DEFAULT_CLOCK_SKEW.total_seconds()
    ):
        logger.debug("Rejected signed value: expired or issued in the future")
        return None

    try:
        value = from_base64url_padded(encoded_value)
    except Base64URLDecodeError:
        logger.debug("Rejected signed value: payload is not base64")
        return None

    return SignedValue(value=value, issued_at=datetime.fromtimestamp(issued_ts, tz=timezone.utc))
