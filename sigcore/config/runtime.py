"""
Runtime Configuration

Configuration for signature verification modes and logging.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from sigcore.crypto.signatures import DEFAULT_MODES, SignatureVerifier, VerifyMode
from sigcore.schemas.errors import ConfigException

load_dotenv()


ENV_PREFIX = "SIGCORE_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class VerificationConfig:
    """Which signer conventions the verifier accepts, in trial order."""
    modes: list[str] = field(
        default_factory=lambda: [m.value for m in DEFAULT_MODES]
    )

    def __post_init__(self):
        if isinstance(self.modes, str):
            self.modes = _split_modes(self.modes)
        else:
            self.modes = [str(getattr(m, "value", m)).strip().lower() for m in self.modes]
        known = {m.value for m in VerifyMode}
        unknown = [m for m in self.modes if m not in known]
        if unknown:
            raise ConfigException(
                f"Unknown verify mode(s): {', '.join(unknown)}; "
                f"expected any of {', '.join(sorted(known))}",
                key="verification.modes",
            )
        if not self.modes:
            raise ConfigException(
                "At least one verify mode is required",
                key="verification.modes",
            )


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    file: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.level, str):
            raise ConfigException(
                f"Invalid log level: {self.level!r}",
                key="logging.level",
            )
        if self.file is not None and not isinstance(self.file, str):
            raise ConfigException(
                f"Invalid log file: {self.file!r}",
                key="logging.file",
            )
        self.level = self.level.upper()
        if self.level not in _LOG_LEVELS:
            raise ConfigException(
                f"Invalid log level: {self.level}",
                key="logging.level",
            )


def _split_modes(raw: str) -> list[str]:
    return [part.strip().lower() for part in raw.split(",") if part.strip()]


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for sigcore.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    verification: VerificationConfig = field(default_factory=VerificationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - SIGCORE_VERIFY_MODES: Comma-separated modes (hashed_payload,raw_payload)
        - SIGCORE_LOG_LEVEL: Log level
        - SIGCORE_LOG_FILE: Also write logs to this file
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}VERIFY_MODES"):
            overrides.setdefault("verification", {})["modes"] = _split_modes(
                os.getenv(f"{ENV_PREFIX}VERIFY_MODES", "")
            )

        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides.setdefault("logging", {})["level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides.setdefault("logging", {})["file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigException(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        verification_data = data.get("verification") or {}
        logging_data = data.get("logging") or {}

        try:
            verification = VerificationConfig(**verification_data)
            log_config = LoggingConfig(**logging_data)
        except TypeError as e:
            raise ConfigException(f"Invalid configuration: {e}") from e

        return cls(
            verification=verification,
            logging=log_config,
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        Lets a config file be loaded first and env vars layered on top.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)

        if "verification" in overrides:
            new_config.verification = VerificationConfig(**overrides["verification"])

        if "logging" in overrides:
            merged = {"level": new_config.logging.level, "file": new_config.logging.file}
            merged.update(overrides["logging"])
            new_config.logging = LoggingConfig(**merged)

        return new_config

    def build_verifier(self) -> SignatureVerifier:
        """Create a verifier accepting the configured modes."""
        return SignatureVerifier(modes=tuple(VerifyMode(m) for m in self.verification.modes))

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "verification": {
                "modes": list(self.verification.modes),
            },
            "logging": {
                "level": self.logging.level,
                "file": self.logging.file,
            },
        }


def load_runtime_config(path: str | Path | None = None) -> RuntimeConfig:
    """
    Load configuration from an optional YAML file, then apply env overrides.
    """
    if path is None:
        return RuntimeConfig.from_env()
    return RuntimeConfig.from_yaml(path).with_env_overrides()
