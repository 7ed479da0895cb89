"""CookieSealer - main entry point for cookieseal."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from .algorithms import HashAlgorithm
from .constants import (
    DEFAULT_COOKIE_EXPIRE,
    DEFAULT_LEGACY_SIGNATURE_ALGORITHMS,
    DEFAULT_SIGNATURE_ALGORITHM,
)
from .cookies import signed_value, validate_signed_value
from .crypto import Cipher, decode_secret, sign, verify
from .types import SealerConfig, SignedValue, StringRef

logger = logging.getLogger("cookieseal")


class CookieSealer:
    """Signs and encrypts cookie values with one operator secret.

    Build one sealer at startup and share it; it holds no mutable state.

    Example:
        ```python
        from datetime import datetime, timezone

        from cookieseal import CookieSealer

        sealer = CookieSealer(secret="A3Xbr6fu6Al0HkgrP1ztjb-mYiwmxgNPP-XbNsz1WBk=")

        now = datetime.now(timezone.utc)
        cookie_value = sealer.seal("_session", sealer.encrypt(token).encode(), now)
        signed = sealer.unseal("_session", cookie_value)
        if signed is None:
            ...  # reject the cookie
        token = sealer.decrypt(signed.value.decode())
        ```
    """

    def __init__(
        self,
        secret: str,
        *,
        signing_seed: str | None = None,
        signature_algorithm: HashAlgorithm = DEFAULT_SIGNATURE_ALGORITHM,
        legacy_signature_algorithms: Sequence[HashAlgorithm] = DEFAULT_LEGACY_SIGNATURE_ALGORITHMS,
        cookie_expire: timedelta = DEFAULT_COOKIE_EXPIRE,
    ) -> None:
        """Initialize the sealer.

        Args:
            secret: Operator secret; URL-safe base64 of a 16, 24 or 32 byte key,
                or a raw string of one of those lengths.
            signing_seed: HMAC seed for signatures. Defaults to ``secret``.
            signature_algorithm: Algorithm used for new signatures.
            legacy_signature_algorithms: Algorithms still accepted on verification.
                Pass an empty sequence to reject legacy signatures.
            cookie_expire: Maximum age of a signed cookie value.

        Raises:
            InvalidKeySizeError: If the decoded secret is not a valid AES key.
        """
        self._config = SealerConfig(
            secret=secret,
            signing_seed=signing_seed,
            signature_algorithm=signature_algorithm,
            legacy_signature_algorithms=tuple(legacy_signature_algorithms),
            cookie_expire=cookie_expire,
        )
        self._cipher = Cipher(decode_secret(secret))
        self._algorithms = self._config.verification_algorithms
        logger.debug(
            "Cookie sealer ready: AES-%d, signing with %s, accepting %s",
            len(self._cipher.key) * 8,
            signature_algorithm.value,
            ", ".join(a.value for a in self._algorithms),
        )

    @property
    def config(self) -> SealerConfig:
        """The sealer configuration."""
        return self._config

    @property
    def cipher(self) -> Cipher:
        """The token cipher."""
        return self._cipher

    @property
    def _seed(self) -> str:
        if self._config.signing_seed is not None:
            return self._config.signing_seed
        return self._config.secret

    def sign(self, key: str, value: str, epoch: str) -> str:
        """Sign a cookie with the current algorithm."""
        return sign(self._config.signature_algorithm, self._seed, key, value, epoch)

    def verify(self, signature: str, key: str, value: str, epoch: str) -> bool:
        """Verify a cookie signature against the current and legacy algorithms."""
        return verify(signature, self._seed, key, value, epoch, algorithms=self._algorithms)

    def seal(self, key: str, value: bytes, now: datetime) -> str:
        """Build a signed cookie value.

        Args:
            key: The cookie name.
            value: The payload to store.
            now: The issue time.

        Returns:
            The signed cookie value.
        """
        return signed_value(
            self._seed, key, value, now, hash_algorithm=self._config.signature_algorithm
        )

    def unseal(self, key: str, cookie_value: str, now: datetime | None = None) -> SignedValue | None:
        """Validate a signed cookie value against the configured expiry.

        Args:
            key: The cookie name.
            cookie_value: The signed cookie value.
            now: The current time. Defaults to the system clock.

        Returns:
            The payload and issue time, or None if the cookie must be rejected.
        """
        return validate_signed_value(
            self._seed,
            key,
            cookie_value,
            self._config.cookie_expire,
            now,
            algorithms=self._algorithms,
        )

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a token. See :meth:`Cipher.encrypt`."""
        return self._cipher.encrypt(plaintext)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a token. See :meth:`Cipher.decrypt`."""
        return self._cipher.decrypt(ciphertext)

    def encrypt_into(self, ref: StringRef | None) -> None:
        """Encrypt a token slot in place. See :meth:`Cipher.encrypt_into`."""
        self._cipher.encrypt_into(ref)

    def decrypt_into(self, ref: StringRef | None) -> None:
        """Decrypt a token slot in place. See :meth:`Cipher.decrypt_into`."""
        self._cipher.decrypt_into(ref)
