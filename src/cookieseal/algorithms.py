"""Signature hash algorithms for cookieseal."""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from enum import Enum
from typing import Any


class HashAlgorithm(str, Enum):
    """Hash algorithms usable for cookie signatures."""

    SHA256 = "sha256"
    SHA1 = "sha1"

    @property
    def digestmod(self) -> Callable[..., Any]:
        """The hashlib constructor for this algorithm, as accepted by ``hmac.new``."""
        return getattr(hashlib, self.value)
