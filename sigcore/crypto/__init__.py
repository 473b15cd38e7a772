"""
Core cryptographic utilities.

- hashing: SHA-256 / SHA-3-256 digests and Merkle node hashes
- signatures: Ed25519 signature verification for external signers
"""
from .hashing import (
    sha256,
    sha3_256,
    digest256,
    DigestComputer,
)
from .signatures import (
    VerifyMode,
    RejectReason,
    VerificationOutcome,
    SignatureVerifier,
    check_signature,
    verify,
)

__all__ = [
    # Hashing
    "sha256",
    "sha3_256",
    "digest256",
    "DigestComputer",
    # Signatures
    "VerifyMode",
    "RejectReason",
    "VerificationOutcome",
    "SignatureVerifier",
    "check_signature",
    "verify",
]
