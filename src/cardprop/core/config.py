"""Configuration management for cardprop."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigError
from .types import CompatibilityMode, VCardVersion


@dataclass
class Config:
    """Library-wide defaults for marshalling and unmarshalling.

    Attributes:
        default_version: Version used when a caller does not name one.
        compatibility_mode: Default consumer bias for marshalling.
    """

    default_version: VCardVersion = VCardVersion.V4_0
    compatibility_mode: CompatibilityMode = CompatibilityMode.RFC

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path) -> "Config":
        """Load configuration from a TOML file, then apply env overrides."""
        try:
            with open(path, "rb") as fh:
                data = tomllib.load(fh)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Could not read config file {path}: {e}") from e

        config = cls()
        config._apply_mapping(data)
        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Optional[Path] = None) -> "Config":
        """Load from an explicit path, CARDPROP_CONFIG, or the environment."""
        if path is None and (env_path := os.environ.get("CARDPROP_CONFIG")):
            path = Path(env_path)
        if path is not None:
            return cls.from_file(path)
        return cls.from_env()

    def _apply_mapping(self, data: dict[str, Any]) -> None:
        if "default_version" in data:
            self.default_version = _parse_version(str(data["default_version"]))
        if "compatibility_mode" in data:
            self.compatibility_mode = _parse_mode(str(data["compatibility_mode"]))

    def _apply_env(self) -> None:
        if version := os.environ.get("CARDPROP_VERSION"):
            self.default_version = _parse_version(version)
        if mode := os.environ.get("CARDPROP_COMPAT_MODE"):
            self.compatibility_mode = _parse_mode(mode)


def _parse_version(value: str) -> VCardVersion:
    version = VCardVersion.from_string(value)
    if version is None:
        raise ConfigError(f"Unknown vCard version: {value}")
    return version


def _parse_mode(value: str) -> CompatibilityMode:
    mode = CompatibilityMode.from_string(value)
    if mode is None:
        raise ConfigError(f"Unknown compatibility mode: {value}")
    return mode
