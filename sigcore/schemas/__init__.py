"""
Schemas

Purpose: Export the error taxonomy and transport models.
"""

from .errors import (
    ConfigException,
    DecodeException,
    DigestUnavailableException,
    EncodingException,
    EngineException,
    ErrorCodes,
    KeyParseException,
    SigCoreError,
    SigCoreException,
)
from .messages import SignedMessage

__all__ = [
    # Errors
    "ErrorCodes",
    "SigCoreError",
    "SigCoreException",
    "DecodeException",
    "EncodingException",
    "KeyParseException",
    "EngineException",
    "DigestUnavailableException",
    "ConfigException",
    # Transport
    "SignedMessage",
]
