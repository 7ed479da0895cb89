"""Error hierarchy for cookieseal."""

from __future__ import annotations


class CookieSealError(Exception):
    """Base exception for all cookieseal errors."""

    pass


class InvalidKeySizeError(CookieSealError):
    """Cipher key has a length other than 16, 24 or 32 bytes.

    Attributes:
        size: The rejected key length in bytes.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        super().__init__(f"Invalid key size: {size} bytes, expected 16, 24 or 32")


class EncryptionError(CookieSealError):
    """Cryptographic encryption failure."""

    pass


class DecryptionError(CookieSealError):
    """Cryptographic decryption failure.

    Raised for malformed ciphertext, a wrong key and failed integrity checks
    alike. Callers should reject the cookie without telling the client which.
    """

    pass
