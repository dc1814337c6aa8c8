"""
Security tests for shellcrypt.

Tests specifically for security-related scenarios:
- Invalid inputs and the error taxonomy
- Malformed Base64
- Statelessness across calls and threads
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

import shellcrypt
from shellcrypt import (
    CryptError, DecodeFormatError, InvalidInputType, UnknownAlgorithm,
    base64, compare, hash_file, hmac, md5, sha256, sha512,
)
from shellcrypt.core_crypto.algorithms import Algorithm
from shellcrypt.core_crypto.base64_codec import base64_decode, base64_decode_bytes
from shellcrypt.core_crypto.encoding import to_bytes
from shellcrypt.main import main


class TestInvalidInputType:
    """Non-text, non-bytes input is rejected before hashing."""

    @pytest.mark.parametrize("bad", [None, 42, 3.14, ["a"], {"a": 1}, object()])
    def test_normalizer_rejects(self, bad):
        """The normalizer rejects anything but text and buffers."""
        with pytest.raises(InvalidInputType):
            to_bytes(bad)

    def test_digests_reject(self):
        """Every digest rejects invalid input types."""
        for fn in (shellcrypt.md5, shellcrypt.sha1, shellcrypt.sha256,
                   shellcrypt.sha384, shellcrypt.sha512):
            with pytest.raises(InvalidInputType):
                fn(12345)

    def test_hmac_rejects_bad_key_and_message(self):
        """HMAC rejects invalid message and key types."""
        with pytest.raises(InvalidInputType):
            hmac("sha256", None, "key")
        with pytest.raises(InvalidInputType):
            hmac("sha256", "msg", 7)

    def test_compare_rejects_non_str_hash(self):
        """The expected hash must be text."""
        with pytest.raises(InvalidInputType):
            compare("md5", "", None)

    def test_is_type_error(self):
        """InvalidInputType is also a TypeError and a CryptError."""
        with pytest.raises(TypeError):
            sha256(None)
        with pytest.raises(CryptError):
            sha256(None)


class TestUnknownAlgorithm:
    """Unrecognized algorithm names fail at the boundary."""

    @pytest.mark.parametrize("name", ["sha3", "sha-224", "md4", "", "SHA 256", None])
    def test_hmac_rejects(self, name):
        """HMAC rejects unknown algorithms."""
        with pytest.raises(UnknownAlgorithm):
            hmac(name, "msg", "key")

    @pytest.mark.parametrize("name", ["blake2b", "crc32", "normalizeInput"])
    def test_compare_rejects(self, name):
        """The comparator rejects unknown algorithms."""
        with pytest.raises(UnknownAlgorithm):
            compare(name, "x", "00")

    def test_compare_checks_algorithm_first(self):
        """An unknown algorithm wins over a bad expected hash."""
        with pytest.raises(UnknownAlgorithm):
            compare("bogus", "x", None)

    def test_hash_file_rejects_before_io(self, tmp_path):
        """hash_file rejects the name before opening the file."""
        with pytest.raises(UnknownAlgorithm):
            hash_file("whirlpool", tmp_path / "missing")

    def test_error_carries_name(self):
        """The error records the rejected name and is a ValueError."""
        with pytest.raises(ValueError) as exc_info:
            Algorithm.parse("ripemd160")
        assert exc_info.value.name == "ripemd160"


class TestMalformedBase64:
    """Structurally invalid Base64 is rejected after stripping."""

    def test_wrong_length(self):
        """Input that is not whole 4-symbol groups is rejected."""
        with pytest.raises(DecodeFormatError):
            base64_decode("SGVsbG8")
        with pytest.raises(DecodeFormatError):
            base64_decode_bytes("A")

    def test_padding_in_middle(self):
        """'=' before the final group is rejected."""
        with pytest.raises(DecodeFormatError):
            base64_decode("SG=sbG8=")
        with pytest.raises(DecodeFormatError):
            base64_decode("Zg==Zg==")

    def test_too_much_padding(self):
        """More than two '=' is rejected."""
        with pytest.raises(DecodeFormatError):
            base64_decode("Z===")

    def test_invalid_utf8(self):
        """Bytes that are not UTF-8 cannot be decoded as text."""
        with pytest.raises(DecodeFormatError):
            base64_decode("/w==")
        assert base64_decode_bytes("/w==") == b"\xff"

    def test_only_foreign_characters(self):
        """Input made only of stripped characters decodes to nothing."""
        assert base64("!!! ###", 1) == ""

    def test_is_value_error(self):
        """DecodeFormatError is also a ValueError."""
        with pytest.raises(ValueError):
            base64("abc", 1)


class TestStatelessness:
    """Every call starts from fresh state."""

    def test_repeated_calls_identical(self):
        """Hashing the same input twice gives the same digest."""
        assert sha512("state") == sha512("state")
        assert md5("state") == md5("state")

    def test_interleaved_calls_independent(self):
        """A call in between does not affect the next result."""
        first = sha256("a")
        sha256("b" * 1000)
        hmac("sha512", "x", "y" * 500)
        assert sha256("a") == first

    def test_concurrent_calls(self):
        """Digests computed on many threads match serial results."""
        inputs = [f"message {i}" * (i + 1) for i in range(32)]
        serial = [hmac("sha256", m, "key") for m in inputs]
        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(lambda m: hmac("sha256", m, "key"), inputs))
        assert parallel == serial


class TestSelfTest:
    """The self-test entry point passes."""

    def test_main_passes(self, capsys):
        """main() reports success and exits 0."""
        assert main() == 0
        out = capsys.readouterr().out
        assert "All tests passed!" in out
        assert "FAIL" not in out
