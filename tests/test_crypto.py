"""Tests for base64 utilities and secret decoding."""

import logging
import os

import pytest

from cookieseal.crypto import decode_secret, from_base64url, to_base64url
from cookieseal.crypto.utils import (
    Base64URLDecodeError,
    encode_text,
    from_base64url_padded,
    to_base64url_padded,
)


class TestBase64Url:
    """Tests for base64url encoding/decoding."""

    def test_round_trip(self) -> None:
        """Test that encoding and decoding produces original data."""
        data = b"Hello, World!"
        encoded = to_base64url(data)
        decoded = from_base64url(encoded)
        assert decoded == data

    def test_no_padding(self) -> None:
        """Test that encoding produces no padding characters."""
        data = b"test"
        encoded = to_base64url(data)
        assert "=" not in encoded

    def test_url_safe_chars(self) -> None:
        """Test that encoding uses URL-safe characters."""
        # Data that would produce + and / in standard base64
        data = b"\xfb\xff\xfe"
        encoded = to_base64url(data)
        assert "+" not in encoded
        assert "/" not in encoded

    def test_decode_rejects_plus(self) -> None:
        """Test that decoding rejects + character."""
        with pytest.raises(Base64URLDecodeError, match="contains forbidden characters"):
            from_base64url("abc+def")

    def test_decode_rejects_slash(self) -> None:
        """Test that decoding rejects / character."""
        with pytest.raises(Base64URLDecodeError, match="contains forbidden characters"):
            from_base64url("abc/def")

    def test_decode_rejects_padding(self) -> None:
        """Test that decoding rejects = padding."""
        with pytest.raises(Base64URLDecodeError, match="contains forbidden characters"):
            from_base64url("abc=")

    def test_decode_rejects_invalid_chars(self) -> None:
        """Test that decoding rejects other invalid characters."""
        with pytest.raises(Base64URLDecodeError, match="contains non-Base64URL characters"):
            from_base64url("abc!def")

    def test_decode_rejects_trailing_newline(self) -> None:
        """Test that a trailing newline is not silently accepted."""
        with pytest.raises(Base64URLDecodeError, match="contains non-Base64URL characters"):
            from_base64url("abcd\n")

    def test_decode_rejects_impossible_length(self) -> None:
        """Test that a length of 4n+1 characters is rejected."""
        with pytest.raises(Base64URLDecodeError, match="invalid length"):
            from_base64url("abcde")


class TestBase64UrlPadded:
    """Tests for padded base64url encoding/decoding."""

    def test_encode_keeps_padding(self) -> None:
        """Test that padded encoding keeps = characters."""
        assert to_base64url_padded(b"Hello, World!") == "SGVsbG8sIFdvcmxkIQ=="

    def test_decode(self) -> None:
        """Test padded decoding."""
        assert from_base64url_padded("SGVsbG8sIFdvcmxkIQ==") == b"Hello, World!"

    def test_decode_rejects_missing_padding(self) -> None:
        """Test that unpadded input is rejected."""
        with pytest.raises(Base64URLDecodeError, match="not correctly padded"):
            from_base64url_padded("SGVsbG8sIFdvcmxkIQ")

    def test_decode_rejects_excess_padding(self) -> None:
        """Test that runs of = longer than two are rejected."""
        with pytest.raises(Base64URLDecodeError, match="not correctly padded"):
            from_base64url_padded("equals==========")

    def test_decode_rejects_standard_alphabet(self) -> None:
        """Test that + and / are rejected even when padded."""
        with pytest.raises(Base64URLDecodeError, match="contains forbidden characters"):
            from_base64url_padded("+/+/")


class TestDecodeSecret:
    """Tests for decode_secret."""

    @pytest.mark.parametrize("size", [16, 24, 32])
    def test_padded_base64_secret(self, size: int) -> None:
        """Test that padded base64 of a valid key size decodes to the key."""
        secret = os.urandom(size)
        result = decode_secret(to_base64url_padded(secret))
        assert result == secret
        assert len(result) == size

    @pytest.mark.parametrize("size", [16, 24, 32])
    def test_raw_base64_secret(self, size: int) -> None:
        """Test that unpadded base64 of a valid key size decodes to the key."""
        secret = os.urandom(size)
        result = decode_secret(to_base64url(secret))
        assert result == secret
        assert len(result) == size

    @pytest.mark.parametrize("size", [15, 20, 28, 33, 44])
    def test_base64_secret_of_wrong_size(self, size: int) -> None:
        """Test that base64 decoding to an invalid key size returns the string itself."""
        secret = os.urandom(size)

        padded = to_base64url_padded(secret)
        result = decode_secret(padded)
        assert result != secret
        assert len(result) != size
        assert result == padded.encode("utf-8")

        raw = to_base64url(secret)
        result = decode_secret(raw)
        assert result != secret
        assert len(result) != size
        assert result == raw.encode("utf-8")

    def test_padding_run_is_not_base64(self) -> None:
        """Test that a string ending in a run of = is returned as-is."""
        trailer = "equals=========="
        assert decode_secret(trailer) == trailer.encode("utf-8")

    @pytest.mark.parametrize(
        "raw",
        [
            "asdflkjhqwer)(*&",
            "asdflkjhqwer)(*&CJEN#$%^",
            "asdflkjhqwer)(*&1234lkjhqwer)(*&",
        ],
    )
    def test_non_base64_secret(self, raw: str) -> None:
        """Test that non-base64 secrets are used byte-for-byte."""
        result = decode_secret(raw)
        assert result == raw.encode("utf-8")
        assert len(result) == len(raw)

    def test_standard_alphabet_is_not_decoded(self) -> None:
        """Test that standard (non URL-safe) base64 is treated as raw text."""
        secret = b"\xfb\xff\xfe" * 8
        standard = "+/" + to_base64url(secret)[2:]
        assert decode_secret(standard) == standard.encode("utf-8")

    def test_empty_secret(self) -> None:
        """Test that an empty secret yields empty bytes without raising."""
        assert decode_secret("") == b""

    def test_non_ascii_secret(self) -> None:
        """Test that non-ASCII secrets are returned as UTF-8 bytes."""
        assert decode_secret("pässwörd") == "pässwörd".encode("utf-8")

    def test_fallback_does_not_log_secret(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the raw-bytes fallback is logged without the secret."""
        with caplog.at_level(logging.DEBUG, logger="cookieseal"):
            decode_secret("asdflkjhqwer)(*&")

        assert "raw bytes" in caplog.text
        assert "asdflkjhqwer" not in caplog.text

    def test_surrogate_escaped_secret(self) -> None:
        """Test that a secret read from the environment keeps its original bytes."""
        raw = b"\xff\xfe0123456789abcd"
        secret = raw.decode("utf-8", "surrogateescape")

        result = decode_secret(secret)

        assert result == raw
        assert len(result) == 16

    def test_lone_surrogate_secret(self) -> None:
        """Test that surrogates outside the escape range do not raise."""
        assert decode_secret("\ud800" * 16) == "\ud800".encode("utf-8", "surrogatepass") * 16


class TestEncodeText:
    """Tests for encode_text."""

    def test_plain_text(self) -> None:
        """Test that ordinary text is UTF-8 encoded."""
        assert encode_text("pässwörd") == "pässwörd".encode("utf-8")

    def test_surrogate_escape_round_trip(self) -> None:
        """Test that surrogate-escaped text encodes back to the original bytes."""
        raw = b"\x80abc\xff"
        assert encode_text(raw.decode("utf-8", "surrogateescape")) == raw

    def test_lone_surrogate(self) -> None:
        """Test that other lone surrogates are encoded instead of raising."""
        assert encode_text("a\ud800b") == b"a\xed\xa0\x80b"
