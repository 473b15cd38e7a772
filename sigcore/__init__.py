"""
sigcore - signature verification and Merkle node hashing for the state machine.

Usage:
    from sigcore import verify, digest256

    verify(signature_b64, "hello", public_key_b64)
    digest256(b"node payload").to_hex()
"""

from sigcore.crypto.hashing import DigestComputer, digest256
from sigcore.crypto.signatures import (
    RejectReason,
    SignatureVerifier,
    VerificationOutcome,
    VerifyMode,
    check_signature,
    verify,
)
from sigcore.merkle.merkle_hash import MerkleHash

__version__ = "0.1.0"

__all__ = [
    "verify",
    "check_signature",
    "SignatureVerifier",
    "VerifyMode",
    "RejectReason",
    "VerificationOutcome",
    "digest256",
    "DigestComputer",
    "MerkleHash",
]
