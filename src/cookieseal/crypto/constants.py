"""Cryptographic constants for cookieseal."""

# Valid AES key sizes in bytes (AES-128, AES-192, AES-256)
VALID_KEY_SIZES = (16, 24, 32)

# AES-GCM constants
AES_GCM_NONCE_SIZE = 12
AES_GCM_TAG_SIZE = 16

# Signature field length prefix: 4 bytes, big-endian
FIELD_LENGTH_PREFIX_SIZE = 4
