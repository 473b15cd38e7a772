"""
Runtime Configuration Module

Provides configuration loading for verification modes and logging.
"""

from .runtime import LoggingConfig, RuntimeConfig, VerificationConfig, load_runtime_config

__all__ = [
    "RuntimeConfig",
    "VerificationConfig",
    "LoggingConfig",
    "load_runtime_config",
]
