"""
CLI command modules.
"""

from sigcore_cli.commands import digest, verify

__all__ = ["digest", "verify"]
