"""
sigcore CLI

Command-line interface for signature verification and Merkle node hashing.

Usage:
    python -m sigcore_cli verify --message message.json
    python -m sigcore_cli digest "hello"
"""

__version__ = "0.1.0"
