"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m sigcore_cli verify --signature SIG --data TEXT --public-key KEY [--mode M] [--json]
    python -m sigcore_cli verify --message message.json [--json]
    python -m sigcore_cli digest "<text>" [--format hex|base64] [--json]
    python -m sigcore_cli digest --file PATH [--format hex|base64] [--json]

Environment Variables:
    SIGCORE_VERIFY_MODES        Comma-separated verify modes (default: hashed_payload,raw_payload)
    SIGCORE_LOG_LEVEL           Log level (default: INFO)
    SIGCORE_LOG_FILE            Also write logs to this file
"""

from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from sigcore.config import load_runtime_config
from sigcore.crypto.signatures import VerifyMode
from sigcore_cli import __version__
from sigcore_cli.commands import digest, verify


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="sigcore",
        description="Verify Ed25519 signatures and compute SHA-3-256 Merkle node hashes.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a detached Ed25519 signature",
        description="Verify a Base64 signature of UTF-8 data against a Base64 raw public key.",
    )
    verify_parser.add_argument(
        "--message", "-m",
        type=str,
        default=None,
        help="JSON file with signature, data and public_key fields",
    )
    verify_parser.add_argument("--signature", "-s", type=str, help="Base64 signature")
    verify_parser.add_argument("--data", "-d", type=str, help="Signed data (UTF-8 text)")
    verify_parser.add_argument("--public-key", "-k", type=str, help="Base64 raw Ed25519 public key")
    verify_parser.add_argument(
        "--mode",
        action="append",
        choices=[m.value for m in VerifyMode],
        default=None,
        help="Accepted signer convention; repeat to allow several (default: from config)",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON result",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- digest command ---
    digest_parser = subparsers.add_parser(
        "digest",
        help="Compute the SHA-3-256 Merkle node hash of text or a file",
        description="Hash UTF-8 text or the raw bytes of a file with SHA-3-256.",
    )
    digest_parser.add_argument(
        "text",
        type=str,
        nargs="?",
        default=None,
        help="Text to hash (UTF-8)",
    )
    digest_parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Hash the raw bytes of this file instead",
    )
    digest_parser.add_argument(
        "--format",
        type=str,
        choices=["hex", "base64"],
        default="hex",
        help="Output encoding (default: hex)",
    )
    digest_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON result",
    )
    digest_parser.set_defaults(func=digest.digest_cmd)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_runtime_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    args.runtime_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if log_level == "DEBUG":
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
