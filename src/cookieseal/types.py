"""Type definitions for cookieseal."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from .algorithms import HashAlgorithm
from .constants import (
    DEFAULT_COOKIE_EXPIRE,
    DEFAULT_LEGACY_SIGNATURE_ALGORITHMS,
    DEFAULT_SIGNATURE_ALGORITHM,
)


@dataclass
class SealerConfig:
    """Configuration for CookieSealer.

    Attributes:
        secret: Operator secret; URL-safe base64 (padded or not) or raw text.
        signing_seed: HMAC seed for cookie signatures. Defaults to ``secret``.
        signature_algorithm: Algorithm used for new signatures.
        legacy_signature_algorithms: Algorithms still accepted on verification.
            Set to an empty tuple to reject legacy signatures.
        cookie_expire: Maximum age of a signed cookie value.
    """

    secret: str
    signing_seed: str | None = None
    signature_algorithm: HashAlgorithm = DEFAULT_SIGNATURE_ALGORITHM
    legacy_signature_algorithms: tuple[HashAlgorithm, ...] = DEFAULT_LEGACY_SIGNATURE_ALGORITHMS
    cookie_expire: timedelta = DEFAULT_COOKIE_EXPIRE

    @property
    def verification_algorithms(self) -> tuple[HashAlgorithm, ...]:
        """Algorithms tried on verification, current one first."""
        legacy = tuple(a for a in self.legacy_signature_algorithms if a != self.signature_algorithm)
        return (self.signature_algorithm, *legacy)


@dataclass
class StringRef:
    """Mutable slot holding a single string, e.g. one cookie field.

    Attributes:
        value: The current content of the slot.
    """

    value: str = ""


@dataclass(frozen=True)
class SignedValue:
    """A validated signed cookie value.

    Attributes:
        value: The decoded cookie payload.
        issued_at: When the value was signed (UTC).
    """

    value: bytes
    issued_at: datetime
