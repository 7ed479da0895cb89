"""cookieseal - cookie value protection for proxies and web services.

Turns an operator secret into key material, signs cookie values so
tampering and cross-cookie replay are detected, and encrypts tokens
stored in cookies.

Example:
    ```python
    from cookieseal import Cipher, HashAlgorithm, decode_secret, sign, verify

    secret = "A3Xbr6fu6Al0HkgrP1ztjb-mYiwmxgNPP-XbNsz1WBk="
    cipher = Cipher(decode_secret(secret))
    encrypted = cipher.encrypt("my access token")

    signature = sign(HashAlgorithm.SHA256, secret, "_session", encrypted, "1700000000")
    assert verify(signature, secret, "_session", encrypted, "1700000000")
    ```
"""

from .algorithms import HashAlgorithm
from .constants import (
    DEFAULT_CLOCK_SKEW,
    DEFAULT_COOKIE_EXPIRE,
    DEFAULT_LEGACY_SIGNATURE_ALGORITHMS,
    DEFAULT_SIGNATURE_ALGORITHM,
)
from .cookies import signed_value, validate_signed_value
from .crypto import Cipher, decode_secret, sign, verify
from .errors import (
    CookieSealError,
    DecryptionError,
    EncryptionError,
    InvalidKeySizeError,
)
from .sealer import CookieSealer
from .types import SealerConfig, SignedValue, StringRef

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "CookieSealer",
    "Cipher",
    # Operations
    "decode_secret",
    "sign",
    "verify",
    "signed_value",
    "validate_signed_value",
    # Constants
    "DEFAULT_SIGNATURE_ALGORITHM",
    "DEFAULT_LEGACY_SIGNATURE_ALGORITHMS",
    "DEFAULT_COOKIE_EXPIRE",
    "DEFAULT_CLOCK_SKEW",
    # Configuration and data types
    "HashAlgorithm",
    "SealerConfig",
    "SignedValue",
    "StringRef",
    # Errors
    "CookieSealError",
    "InvalidKeySizeError",
    "EncryptionError",
    "DecryptionError",
    # Version
    "__version__",
]
