"""Cryptographic operations for cookieseal."""

from .cipher import Cipher
from .constants import AES_GCM_NONCE_SIZE, AES_GCM_TAG_SIZE, VALID_KEY_SIZES
from .secret import decode_secret
from .signature import VERIFY_ALGORITHMS, build_message, sign, verify
from .utils import (
    Base64URLDecodeError,
    from_base64url,
    from_base64url_padded,
    to_base64url,
    to_base64url_padded,
)

__all__ = [
    "AES_GCM_NONCE_SIZE",
    "AES_GCM_TAG_SIZE",
    "VALID_KEY_SIZES",
    "VERIFY_ALGORITHMS",
    "Base64URLDecodeError",
    "Cipher",
    "build_message",
    "decode_secret",
    "from_base64url",
    "from_base64url_padded",
    "sign",
    "to_base64url",
    "to_base64url_padded",
    "verify",
]
