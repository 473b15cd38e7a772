"""
Test fixtures package for sigcore tests.

- keys.py: Ed25519 keypairs and client-side signing helpers

Usage:
    from fixtures import make_keypair

    def test_something():
        keys = make_keypair()
        sig = keys.sign_hashed("hello")
"""

from .keys import (
    TestKeypair,
    b64,
    flip_bit,
    make_keypair,
)

__all__ = [
    "TestKeypair",
    "b64",
    "flip_bit",
    "make_keypair",
]
