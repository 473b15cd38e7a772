"""
Merkle Node Identity

The tree itself lives with the state machine; this package only defines
the node hash value produced by sigcore.crypto.hashing.digest256.

Usage:
    from sigcore.crypto import digest256

    node = digest256(b"payload")
    node.to_hex()
"""
from .merkle_hash import MERKLE_HASH_SIZE, MerkleHash


__all__ = [
    "MERKLE_HASH_SIZE",
    "MerkleHash",
]
