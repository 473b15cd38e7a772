"""
CLI Digest Command

Compute the SHA-3-256 Merkle node hash of UTF-8 text or a file's bytes.

Usage:
    sigcore digest "<text>" [--format hex|base64] [--json]
    sigcore digest --file PATH [--format hex|base64] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from sigcore.crypto.hashing import digest256
from sigcore.merkle.merkle_hash import MerkleHash


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1


def format_hash(node_hash: MerkleHash, fmt: str) -> str:
    """Render a node hash as lowercase hex, or standard Base64 when fmt is "base64"."""
    if fmt == "base64":
        return node_hash.to_base64()
    return node_hash.hex()


def digest_cmd(args: Namespace) -> int:
    """Execute the digest command."""
    if (args.text is None) == (args.file is None):
        print("Error: provide exactly one of TEXT or --file", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    if args.file is not None:
        path = Path(args.file)
        logger.info(f"Hashing file: {path}")
        try:
            payload: bytes | str = path.read_bytes()
        except OSError as e:
            print(f"Error: cannot read {path}: {e}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        source = str(path)
    else:
        payload = args.text
        source = "text"

    node_hash = digest256(payload)
    rendered = format_hash(node_hash, args.format)

    if args.json:
        print(json.dumps({
            "algorithm": "sha3-256",
            "source": source,
            "format": args.format,
            "digest": rendered,
        }, indent=2))
    else:
        print(rendered)

    return EXIT_SUCCESS
