"""
CLI Verify Command

Verify a detached Ed25519 signature from arguments or a JSON message file.

Usage:
    sigcore verify --signature SIG --data TEXT --public-key KEY [--mode M] [--json]
    sigcore verify --message message.json [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from pathlib import Path

from pydantic import ValidationError

from sigcore.crypto.signatures import SignatureVerifier, VerificationOutcome
from sigcore.schemas.messages import SignedMessage


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def load_message(args: Namespace) -> SignedMessage:
    """
    Build a SignedMessage from --message or the individual flags.

    Raises:
        ValueError: If neither form is complete or the JSON is malformed
    """
    if args.message:
        path = Path(args.message)
        logger.info(f"Loading signed message from: {path}")
        try:
            return SignedMessage.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise ValueError(f"Invalid message file {path}: {e}") from e

    missing = [
        flag for flag, value in (
            ("--signature", args.signature),
            ("--data", args.data),
            ("--public-key", args.public_key),
        )
        if value is None
    ]
    if missing:
        raise ValueError(
            "Provide --message or all of --signature, --data, --public-key "
            f"(missing: {', '.join(missing)})"
        )
    return SignedMessage(
        signature=args.signature,
        data=args.data,
        public_key=args.public_key,
    )


def build_verifier(args: Namespace) -> SignatureVerifier:
    """CLI --mode flags win over the configured modes."""
    if args.mode:
        return SignatureVerifier(modes=tuple(args.mode))
    return args.runtime_config.build_verifier()


def print_outcome(outcome: VerificationOutcome, as_json: bool) -> None:
    if as_json:
        print(json.dumps(outcome.to_dict(), indent=2))
        return
    if outcome.verified:
        print(f"OK: signature verified ({outcome.mode.value})")
    else:
        print(f"REJECTED [{outcome.reason.value}]: {outcome.message}")


def verify_cmd(args: Namespace) -> int:
    """Execute the verify command."""
    try:
        message = load_message(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    verifier = build_verifier(args)
    outcome = verifier.check(message.signature, message.data, message.public_key)
    print_outcome(outcome, args.json)

    return EXIT_SUCCESS if outcome.verified else EXIT_VERIFICATION_FAILED
