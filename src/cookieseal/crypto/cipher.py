"""AES-GCM token encryption for cookieseal."""

from __future__ import annotations

import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import DecryptionError, EncryptionError, InvalidKeySizeError
from ..types import StringRef
from .constants import AES_GCM_NONCE_SIZE, AES_GCM_TAG_SIZE, VALID_KEY_SIZES
from .utils import Base64URLDecodeError, from_base64url, to_base64url

logger = logging.getLogger("cookieseal")


class Cipher:
    """Encrypts short text values, such as access tokens, for cookie storage.

    Ciphertext is URL-safe base64 (unpadded) of ``nonce || ciphertext || tag``
    with a fresh random nonce per call, so encrypting the same plaintext twice
    gives different results. Instances hold only their key and may be shared
    between threads.

    Example:
        ```python
        import os

        from cookieseal import Cipher, decode_secret

        cipher = Cipher(decode_secret(os.environ["COOKIE_SECRET"]))
        cookie_value = cipher.encrypt(access_token)
        access_token = cipher.decrypt(cookie_value)
        ```
    """

    def __init__(self, key: bytes) -> None:
        """Create a cipher.

        Args:
            key: AES key of 16, 24 or 32 bytes.

        Raises:
            InvalidKeySizeError: If the key has any other length.
        """
        if len(key) not in VALID_KEY_SIZES:
            raise InvalidKeySizeError(len(key))
        self._key = bytes(key)
        self._aesgcm = AESGCM(self._key)

    @property
    def key(self) -> bytes:
        """The AES key bytes."""
        return self._key

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a text value.

        Args:
            plaintext: The text to encrypt.

        Returns:
            The printable ciphertext.

        Raises:
            EncryptionError: If the random source or AES primitive fails.
        """
        try:
            nonce = os.urandom(AES_GCM_NONCE_SIZE)
            ciphertext = self._aesgcm.encrypt(nonce, plaintext.encode("utf-8"), None)
        except Exception as e:
            raise EncryptionError(f"Encryption failed: {e}") from e
        return to_base64url(nonce + ciphertext)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a value produced by :meth:`encrypt`.

        An empty string decrypts to an empty string.

        Args:
            ciphertext: The printable ciphertext.

        Returns:
            The original text.

        Raises:
            DecryptionError: If the ciphertext is malformed, was encrypted with
                another key or has been tampered with.
        """
        if not ciphertext:
            return ""

        try:
            data = from_base64url(ciphertext)
        except Base64URLDecodeError as e:
            logger.debug("Rejected malformed ciphertext: %s", e)
            raise DecryptionError(f"Decryption failed: {e}") from e

        if len(data) < AES_GCM_NONCE_SIZE + AES_GCM_TAG_SIZE:
            raise DecryptionError(
                f"Encrypted value should be at least {AES_GCM_NONCE_SIZE + AES_GCM_TAG_SIZE} "
                f"bytes, got {len(data)}"
            )

        nonce, sealed = data[:AES_GCM_NONCE_SIZE], data[AES_GCM_NONCE_SIZE:]
        try:
            plaintext = self._aesgcm.decrypt(nonce, sealed, None)
        except InvalidTag as e:
            logger.debug("Rejected ciphertext failing authentication")
            raise DecryptionError("Decryption failed: authentication tag mismatch") from e

        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecryptionError(f"Decrypted value is not valid UTF-8: {e}") from e

    def encrypt_into(self, ref: StringRef | None) -> None:
        """Encrypt the content of ``ref`` in place.

        Does nothing when ``ref`` is None or empty.

        Raises:
            EncryptionError: If encryption fails; ``ref`` is left unchanged.
        """
        if ref is None or not ref.value:
            return
        ref.value = self.encrypt(ref.value)

    def decrypt_into(self, ref: StringRef | None) -> None:
        """Decrypt the content of ``ref`` in place.

        Does nothing when ``ref`` is None or empty.

        Raises:
            DecryptionError: If decryption fails; ``ref`` is left unchanged.
        """
        if ref is None or not ref.value:
            return
        ref.value = self.decrypt(ref.value)
