"""
Schemas - Signed Messages
File: messages.py

Purpose: Transport shape for a signed message as it arrives from outside
(JSON file, CLI arguments). Fields stay as the encoded strings the signer
produced; decoding happens inside the verifier so that malformed input is
reported as a rejection rather than a schema error.
"""

from pydantic import BaseModel, ConfigDict, Field


class SignedMessage(BaseModel):
    """A detached Ed25519 signature together with its data and signer key."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    signature: str = Field(
        ...,
        description="Detached Ed25519 signature, standard Base64",
    )
    data: str = Field(
        ...,
        description="Signed data as UTF-8 text",
    )
    public_key: str = Field(
        ...,
        description="Raw 32-byte Ed25519 public key, standard Base64",
    )
