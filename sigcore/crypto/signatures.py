"""
Signature Verification

Verifies detached Ed25519 signatures supplied by external signers.

Inputs arrive as transport strings:
- signature: standard Base64 (not URL-safe), 64 bytes once decoded
- data: UTF-8 text (or raw bytes)
- public_key: standard Base64 of the raw 32-byte key, no DER wrapping

Two signer conventions are accepted:
- HASHED_PAYLOAD: the signer signed sha256(data)
- RAW_PAYLOAD: the signer signed data directly

Both are enabled by default and tried in that order. The first that
verifies is reported as the matched mode. Narrowing to one mode is a
deployment decision (see RuntimeConfig) since older clients still sign
hashed payloads.

Failure contract:
- check() and verify() never raise. Decode, encoding, key and engine
  failures become a rejected VerificationOutcome with a reason and are
  logged at ERROR with the underlying error text.
- A well-formed signature that simply does not match is a
  SIGNATURE_MISMATCH rejection, logged at INFO.
"""
from __future__ import annotations

import base64
import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

from sigcore.crypto.hashing import sha256
from sigcore.schemas.errors import (
    ConfigException,
    DecodeException,
    EncodingException,
    EngineException,
    ErrorCodes,
    KeyParseException,
    SigCoreException,
)


logger = logging.getLogger(__name__)


ED25519_PUBLIC_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64

_BASE64_STANDARD = re.compile(r"[A-Za-z0-9+/]*={0,2}")


class VerifyMode(str, Enum):
    """Which message the signer is expected to have signed."""
    HASHED_PAYLOAD = "hashed_payload"
    RAW_PAYLOAD = "raw_payload"


class RejectReason(str, Enum):
    """Why a verification call returned False."""
    DECODE_ERROR = ErrorCodes.DECODE_ERROR
    ENCODING_ERROR = ErrorCodes.ENCODING_ERROR
    KEY_PARSE_ERROR = ErrorCodes.KEY_PARSE_ERROR
    ENGINE_ERROR = ErrorCodes.ENGINE_ERROR
    SIGNATURE_MISMATCH = ErrorCodes.SIGNATURE_MISMATCH

    @property
    def is_malformed_input(self) -> bool:
        """True when the input never reached a cryptographic comparison."""
        return self in (
            RejectReason.DECODE_ERROR,
            RejectReason.ENCODING_ERROR,
            RejectReason.KEY_PARSE_ERROR,
        )


DEFAULT_MODES: tuple[VerifyMode, ...] = (
    VerifyMode.HASHED_PAYLOAD,
    VerifyMode.RAW_PAYLOAD,
)


@dataclass(frozen=True)
class VerificationOutcome:
    """
    Result of a single verification call.

    Attributes:
        verified: Whether the signature was accepted
        mode: The signer convention that matched (None when rejected)
        reason: Why the signature was rejected (None when verified)
        message: Human-readable diagnostic
    """
    verified: bool
    mode: Optional[VerifyMode] = None
    reason: Optional[RejectReason] = None
    message: str = ""

    def __bool__(self) -> bool:
        return self.verified

    @classmethod
    def accepted(cls, mode: VerifyMode) -> "VerificationOutcome":
        return cls(
            verified=True,
            mode=mode,
            message=f"Signature verified ({mode.value})",
        )

    @classmethod
    def rejected(cls, reason: RejectReason, message: str) -> "VerificationOutcome":
        return cls(verified=False, reason=reason, message=message)

    def to_dict(self) -> dict:
        return {
            "verified": self.verified,
            "mode": self.mode.value if self.mode else None,
            "reason": self.reason.value if self.reason else None,
            "message": self.message,
        }


# =============================================================================
# Input decoding
# =============================================================================

def decode_base64(value: str, field_name: str) -> bytes:
    """
    Strictly decode a standard-alphabet Base64 string.

    Characters outside the alphabet (including URL-safe '-' and '_')
    are rejected rather than skipped. Padding may be omitted, but when
    present it must complete the final 4-character group.

    Raises:
        DecodeException: If value is not valid Base64
    """
    if not isinstance(value, str):
        raise DecodeException(
            f"{field_name} must be a Base64 string, got {type(value).__name__}",
            field_name=field_name,
        )
    if not _BASE64_STANDARD.fullmatch(value):
        raise DecodeException(
            f"Invalid Base64 in {field_name}: characters outside the standard alphabet",
            field_name=field_name,
        )
    if len(value) % 4 == 1 or ("=" in value and len(value) % 4 != 0):
        raise DecodeException(
            f"Invalid Base64 in {field_name}: truncated final group (length {len(value)})",
            field_name=field_name,
        )
    try:
        return base64.b64decode(value + "=" * (-len(value) % 4), validate=True)
    except ValueError as e:
        raise DecodeException(
            f"Invalid Base64 in {field_name}: {e}",
            field_name=field_name,
        ) from e


def encode_data(data: Union[str, bytes]) -> bytes:
    """
    Bytes the signer is expected to have covered.

    Raises:
        EncodingException: If text is not encodable as UTF-8
    """
    if isinstance(data, str):
        try:
            return data.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingException(f"Data is not valid UTF-8 text: {e}") from e
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise EncodingException(
        f"Data must be str or bytes, got {type(data).__name__}"
    )


def load_public_key(key_bytes: bytes) -> Ed25519PublicKey:
    """
    Parse raw Ed25519 public key bytes.

    Raises:
        KeyParseException: If the bytes are not a raw Ed25519 key
        EngineException: If the backend has no Ed25519 support
    """
    try:
        return Ed25519PublicKey.from_public_bytes(key_bytes)
    except UnsupportedAlgorithm as e:
        raise EngineException(f"Ed25519 not supported by backend: {e}") from e
    except ValueError as e:
        raise KeyParseException(
            f"Invalid Ed25519 public key: {e}",
            key_length=len(key_bytes),
        ) from e


def _parse_modes(modes: Iterable[Union[VerifyMode, str]]) -> tuple[VerifyMode, ...]:
    parsed: list[VerifyMode] = []
    for mode in modes:
        try:
            value = VerifyMode(mode)
        except ValueError as e:
            raise ConfigException(
                f"Unknown verify mode: {mode!r}", key="modes"
            ) from e
        if value not in parsed:
            parsed.append(value)
    if not parsed:
        raise ConfigException("At least one verify mode is required", key="modes")
    return tuple(parsed)


# =============================================================================
# Verifier
# =============================================================================

@dataclass(frozen=True)
class SignatureVerifier:
    """
    Stateless Ed25519 signature verifier.

    Safe to share between threads: holds only the immutable mode tuple.

    Example:
        verifier = SignatureVerifier()
        outcome = verifier.check(sig_b64, "hello", pk_b64)
        if outcome:
            print(outcome.mode)
    """
    modes: tuple[VerifyMode, ...] = DEFAULT_MODES

    def __post_init__(self) -> None:
        object.__setattr__(self, "modes", _parse_modes(self.modes))

    def check(
        self,
        signature: str,
        data: Union[str, bytes],
        public_key: str,
    ) -> VerificationOutcome:
        """
        Verify signature and report the matched mode or the reject reason.

        Args:
            signature: Base64 detached signature
            data: Signed data (text is UTF-8 encoded)
            public_key: Base64 raw Ed25519 public key

        Returns:
            VerificationOutcome (never raises)
        """
        try:
            signature_bytes = decode_base64(signature, "signature")
            data_bytes = encode_data(data)
            key_bytes = decode_base64(public_key, "public_key")
            key = load_public_key(key_bytes)
            matched = self._match(key, signature_bytes, data_bytes)
        except SigCoreException as e:
            logger.error("An error on verifying signature: %s", e.message)
            return VerificationOutcome.rejected(RejectReason(e.code), e.message)

        if matched is None:
            message = "Signature does not match data for modes: " + ", ".join(
                m.value for m in self.modes
            )
            logger.info(message)
            return VerificationOutcome.rejected(RejectReason.SIGNATURE_MISMATCH, message)

        logger.debug("Signature verified using %s", matched.value)
        return VerificationOutcome.accepted(matched)

    def verify(
        self,
        signature: str,
        data: Union[str, bytes],
        public_key: str,
    ) -> bool:
        """Boolean form of check()."""
        return self.check(signature, data, public_key).verified

    def _match(
        self,
        key: Ed25519PublicKey,
        signature: bytes,
        data: bytes,
    ) -> Optional[VerifyMode]:
        for mode in self.modes:
            if self._verify_one(key, signature, self._payload(mode, data)):
                return mode
        return None

    @staticmethod
    def _payload(mode: VerifyMode, data: bytes) -> bytes:
        if mode is VerifyMode.HASHED_PAYLOAD:
            return sha256(data)
        return data

    @staticmethod
    def _verify_one(key: Ed25519PublicKey, signature: bytes, payload: bytes) -> bool:
        try:
            key.verify(signature, payload)
        except InvalidSignature:
            return False
        except Exception as e:
            raise EngineException(f"Ed25519 verification failed to run: {e}") from e
        return True


_DEFAULT_VERIFIER = SignatureVerifier()


def check_signature(
    signature: str,
    data: Union[str, bytes],
    public_key: str,
) -> VerificationOutcome:
    """Check a signature with both signer conventions enabled."""
    return _DEFAULT_VERIFIER.check(signature, data, public_key)


def verify(signature: str, data: Union[str, bytes], public_key: str) -> bool:
    """
    Verify a Base64 Ed25519 signature of data against a Base64 public key.

    Accepts signatures over either sha256(data) or data itself.

    Returns:
        True if the signature verifies, False otherwise (never raises)
    """
    return _DEFAULT_VERIFIER.verify(signature, data, public_key)


__all__ = [
    "ED25519_PUBLIC_KEY_SIZE",
    "ED25519_SIGNATURE_SIZE",
    "VerifyMode",
    "RejectReason",
    "DEFAULT_MODES",
    "VerificationOutcome",
    "SignatureVerifier",
    "decode_base64",
    "encode_data",
    "load_public_key",
    "check_signature",
    "verify",
]
