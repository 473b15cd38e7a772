"""
Hashing Unit Tests
Tests for sigcore/crypto/hashing.py

Tests:
- sha256 / sha3_256 known values
- digest256 golden vectors, size, determinism
- text and bytes inputs hash identically
- missing SHA-3 primitive is fatal
"""
import hashlib

import pytest

from sigcore.crypto import hashing
from sigcore.crypto.hashing import (
    DigestComputer,
    digest256,
    sha256,
    sha3_256,
)
from sigcore.merkle import MerkleHash
from sigcore.schemas.errors import DigestUnavailableException, ErrorCodes


SHA3_256_EMPTY = "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
SHA3_256_ABC = "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"


class TestSha256:
    """Tests for sha256() function."""

    def test_sha256_known_value(self):
        """sha256 matches the well-known digest of "hello"."""
        result = sha256(b"hello")

        assert result.hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )
        assert len(result) == 32

    def test_sha256_empty_bytes(self):
        assert sha256(b"") == hashlib.sha256(b"").digest()

    def test_sha256_differs_from_sha3(self):
        """The two primitives are not interchangeable."""
        assert sha256(b"hello") != sha3_256(b"hello")


class TestSha3:
    """Tests for sha3_256()."""

    def test_sha3_empty_golden_vector(self):
        assert sha3_256(b"").hex() == SHA3_256_EMPTY

    def test_sha3_abc_golden_vector(self):
        assert sha3_256(b"abc").hex() == SHA3_256_ABC

    def test_sha3_unavailable_is_fatal(self, monkeypatch):
        """A missing primitive raises instead of returning a fallback digest."""
        def _no_sha3(name, *args, **kwargs):
            raise ValueError(f"unsupported hash type {name}")

        monkeypatch.setattr(hashing.hashlib, "new", _no_sha3)

        with pytest.raises(DigestUnavailableException) as exc_info:
            sha3_256(b"data")

        assert exc_info.value.code == ErrorCodes.DIGEST_UNAVAILABLE
        assert exc_info.value.details["algorithm"] == "sha3_256"
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestDigest256:
    """Tests for digest256() Merkle node hashing."""

    def test_empty_text_golden_vector(self):
        """digest256("") equals the SHA-3-256 digest of empty bytes."""
        result = digest256("")

        assert isinstance(result, MerkleHash)
        assert result.hex() == SHA3_256_EMPTY
        assert bytes(result) == bytes.fromhex(SHA3_256_EMPTY)

    def test_empty_bytes_golden_vector(self):
        assert digest256(b"").hex() == SHA3_256_EMPTY

    @pytest.mark.parametrize("data", [b"", b"a", b"hello", b"\x00" * 1000, "text", "ünïcødé"])
    def test_always_32_bytes(self, data):
        assert len(bytes(digest256(data))) == 32

    def test_deterministic(self):
        data = b"merkle node payload"

        assert digest256(data) == digest256(data)
        assert hash(digest256(data)) == hash(digest256(data))

    def test_distinct_inputs_distinct_digests(self):
        inputs = [b"", b"a", b"b", b"ab", b"ba", b"hello", b"hello!", b"\x00", b"\x00\x00"]
        digests = {digest256(x) for x in inputs}

        assert len(digests) == len(inputs)

    def test_text_is_utf8_encoded(self):
        """Text delegates to the UTF-8 byte form."""
        assert digest256("abc") == digest256(b"abc")
        assert digest256("ünïcødé") == digest256("ünïcødé".encode("utf-8"))

    def test_bytearray_and_memoryview_accepted(self):
        assert digest256(bytearray(b"abc")) == digest256(b"abc")
        assert digest256(memoryview(b"abc")) == digest256(b"abc")

    def test_non_bytes_input_rejected(self):
        with pytest.raises(TypeError, match="bytes or str"):
            digest256(123)

    def test_unavailable_primitive_propagates(self, monkeypatch):
        def _no_sha3(name, *args, **kwargs):
            raise ValueError("unsupported hash type")

        monkeypatch.setattr(hashing.hashlib, "new", _no_sha3)

        with pytest.raises(DigestUnavailableException):
            digest256("anything")


class TestDigestComputer:
    """Tests for the DigestComputer method form."""

    def test_digest_matches_function(self):
        computer = DigestComputer()

        assert computer.digest(b"abc") == digest256(b"abc")
        assert computer.digest("abc").hex() == SHA3_256_ABC

    def test_callable(self):
        computer = DigestComputer()

        assert computer("") == digest256(b"")

    def test_hex_display_lives_on_merkle_hash(self):
        """Hex formatting is a MerkleHash method, not a hashing helper."""
        import sigcore.crypto as crypto

        assert not hasattr(hashing, "to_hex")
        assert not hasattr(hashing, "from_hex")
        assert "to_hex" not in crypto.__all__
        assert DigestComputer().digest(b"abc").to_hex() == "0x" + SHA3_256_ABC
