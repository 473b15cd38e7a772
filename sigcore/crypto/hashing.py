"""
Hashing Utilities

Digest primitives used by signature verification and by the Merkle tree.

This module provides:
- SHA-256 over raw bytes (legacy signed-payload convention)
- SHA-3-256 over raw bytes or UTF-8 text (Merkle node identity)

Security/Determinism Notes:
- Always hash raw bytes exactly as given; text is UTF-8 encoded, nothing else
- All operations are deterministic and hold no state between calls
- A missing SHA-3 primitive raises DigestUnavailableException; there is no
  fallback digest
"""
from __future__ import annotations

import hashlib
from typing import Union

from sigcore.merkle.merkle_hash import MerkleHash
from sigcore.schemas.errors import DigestUnavailableException


SHA3_256 = "sha3_256"

Hashable = Union[bytes, bytearray, memoryview, str]


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-256 digest

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def sha3_256(data: bytes) -> bytes:
    """
    Compute SHA-3-256 hash of raw bytes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte SHA-3-256 digest

    Raises:
        DigestUnavailableException: If the interpreter has no SHA-3 support

    Example:
        >>> sha3_256(b"").hex()
        'a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a'
    """
    try:
        hasher = hashlib.new(SHA3_256)
    except ValueError as e:
        raise DigestUnavailableException(
            f"SHA-3-256 primitive unavailable: {e}",
            algorithm=SHA3_256,
        ) from e
    hasher.update(data)
    return hasher.digest()


def _to_bytes(data: Hashable) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        f"digest input must be bytes or str, got {type(data).__name__}"
    )


def digest256(data: Hashable) -> MerkleHash:
    """
    Compute the SHA-3-256 Merkle node hash of data.

    Text is UTF-8 encoded first, so digest256("abc") == digest256(b"abc").

    Args:
        data: Raw bytes or text

    Returns:
        MerkleHash wrapping the 32-byte digest

    Raises:
        TypeError: If data is neither bytes-like nor str
        DigestUnavailableException: If SHA-3-256 cannot be computed
    """
    return MerkleHash(sha3_256(_to_bytes(data)))


class DigestComputer:
    """Method form of digest256 for callers that inject a hasher."""

    __slots__ = ()

    def digest(self, data: Hashable) -> MerkleHash:
        return digest256(data)

    def __call__(self, data: Hashable) -> MerkleHash:
        return digest256(data)


__all__ = [
    "sha256",
    "sha3_256",
    "digest256",
    "DigestComputer",
]
