"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for signature verification and digests.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Propagation rules:
- Signature verification raises these internally and recovers them at
  its boundary into a VerificationOutcome (callers only ever see a result).
- Digest computation propagates DigestUnavailableException; a wrong or
  empty digest must never be returned in its place.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input decoding
    DECODE_ERROR = "DECODE_ERROR"
    ENCODING_ERROR = "ENCODING_ERROR"

    # Key material
    KEY_PARSE_ERROR = "KEY_PARSE_ERROR"

    # Verification engine
    ENGINE_ERROR = "ENGINE_ERROR"
    SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"

    # Hashing
    DIGEST_UNAVAILABLE = "DIGEST_UNAVAILABLE"

    # Configuration
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class SigCoreError(BaseModel):
    """
    Base error model for structured error communication.

    Used when an error has to cross a boundary as data (CLI JSON output,
    logs) rather than as a raised exception.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.DECODE_ERROR],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "SigCoreException":
        """Convert this error model to a raised exception."""
        return SigCoreException(
            code=self.code,
            message=self.message,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class SigCoreException(Exception):
    """
    Base exception for all sigcore errors.

    Carries structured error information and can be converted
    to a SigCoreError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "SIGCORE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> SigCoreError:
        """Convert this exception to a SigCoreError model."""
        return SigCoreError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class DecodeException(SigCoreException):
    """Raised when a signature or public key is not valid standard Base64."""

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if field_name:
            full_details["field"] = field_name
        super().__init__(
            message=message,
            code=ErrorCodes.DECODE_ERROR,
            details=full_details,
        )


class EncodingException(SigCoreException):
    """Raised when text data cannot be encoded as UTF-8."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.ENCODING_ERROR,
            details=details,
        )


class KeyParseException(SigCoreException):
    """Raised when decoded bytes do not form a raw Ed25519 public key."""

    def __init__(
        self,
        message: str,
        key_length: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key_length is not None:
            full_details["key_length"] = key_length
        super().__init__(
            message=message,
            code=ErrorCodes.KEY_PARSE_ERROR,
            details=full_details,
        )


class EngineException(SigCoreException):
    """Raised when the verification primitive fails to run."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.ENGINE_ERROR,
            details=details,
        )


class DigestUnavailableException(SigCoreException):
    """
    Raised when the SHA-3-256 primitive cannot be used.

    This is an environment fault. It must abort the calling context.
    """

    def __init__(
        self,
        message: str,
        algorithm: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if algorithm:
            full_details["algorithm"] = algorithm
        super().__init__(
            message=message,
            code=ErrorCodes.DIGEST_UNAVAILABLE,
            details=full_details,
        )


class ConfigException(SigCoreException):
    """Raised when runtime configuration is invalid."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key:
            full_details["key"] = key
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
        )
