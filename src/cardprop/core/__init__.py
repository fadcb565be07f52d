"""Core types, signals and configuration for cardprop."""

from .config import Config
from .exceptions import (
    CannotParse,
    CardPropError,
    ConfigError,
    EmbeddedVCard,
    PropertySignal,
    RegistryError,
    SkipProperty,
    UnsupportedFormat,
)
from .types import (
    XCARD_NAMESPACE,
    CompatibilityMode,
    ValidationWarning,
    VCardDataType,
    VCardVersion,
    WarningKind,
)

__all__ = [
    "Config",
    "CardPropError",
    "ConfigError",
    "RegistryError",
    "PropertySignal",
    "SkipProperty",
    "CannotParse",
    "EmbeddedVCard",
    "UnsupportedFormat",
    "XCARD_NAMESPACE",
    "CompatibilityMode",
    "ValidationWarning",
    "VCardDataType",
    "VCardVersion",
    "WarningKind",
]
