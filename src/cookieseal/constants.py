"""Default configuration constants for cookieseal."""

from datetime import timedelta

from .algorithms import HashAlgorithm

# Signing settings
DEFAULT_SIGNATURE_ALGORITHM = HashAlgorithm.SHA256
# Still accepted on verification until SHA-1 signed cookies have expired
DEFAULT_LEGACY_SIGNATURE_ALGORITHMS = (HashAlgorithm.SHA1,)

# Signed cookie value settings
DEFAULT_COOKIE_EXPIRE = timedelta(days=7)
DEFAULT_CLOCK_SKEW = timedelta(minutes=5)
SIGNED_VALUE_SEPARATOR = "|"
