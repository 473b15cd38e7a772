"""
Merkle Node Hash

The value type handed to the Merkle tree as a node identity.

Contract:
- Always exactly MERKLE_HASH_SIZE (32) bytes
- Immutable, hashable, compared by value
- Opaque outside equality/hashing; hex and Base64 forms are for display only
"""
from __future__ import annotations

import base64
from dataclasses import dataclass


MERKLE_HASH_SIZE = 32


@dataclass(frozen=True)
class MerkleHash:
    """
    A 32-byte content digest identifying a Merkle tree node.

    Attributes:
        value: Raw digest bytes
    """
    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise TypeError(
                f"MerkleHash value must be bytes, got {type(self.value).__name__}"
            )
        if len(self.value) != MERKLE_HASH_SIZE:
            raise ValueError(
                f"MerkleHash must be {MERKLE_HASH_SIZE} bytes, got {len(self.value)}"
            )

    def __bytes__(self) -> bytes:
        return self.value

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self) -> str:
        return self.hex()

    def hex(self) -> str:
        """Lowercase hex without prefix."""
        return self.value.hex()

    def to_hex(self) -> str:
        """
        Hex string with 0x prefix.

        Example:
            >>> MerkleHash(bytes(32)).to_hex()[:6]
            '0x0000'
        """
        return "0x" + self.value.hex()

    def to_base64(self) -> str:
        """Standard Base64 encoding of the digest."""
        return base64.b64encode(self.value).decode("ascii")

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "MerkleHash":
        return cls(bytes(data))

    @classmethod
    def from_hex(cls, hex_string: str) -> "MerkleHash":
        """
        Parse a hex digest, with or without 0x prefix.

        Raises:
            ValueError: On invalid hex characters or wrong length
        """
        content = hex_string[2:] if hex_string.startswith("0x") else hex_string
        try:
            raw = bytes.fromhex(content)
        except ValueError as e:
            raise ValueError(f"Invalid hex characters in string: {e}") from e
        return cls(raw)
