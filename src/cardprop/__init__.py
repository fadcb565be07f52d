"""cardprop - vCard property framework.

One property contract, four encodings (plain text, xCard, jCard, hCard)
and three vCard versions.

Logging goes through loguru and is disabled by default; call
``logger.enable("cardprop")`` to see it.
"""

from loguru import logger

from cardprop.core import (
    CannotParse,
    CardPropError,
    CompatibilityMode,
    Config,
    EmbeddedVCard,
    PropertySignal,
    SkipProperty,
    UnsupportedFormat,
    ValidationWarning,
    VCardDataType,
    VCardVersion,
    WarningKind,
)
from cardprop.document import VCard
from cardprop.parameters import VCardParameters
from cardprop.property import (
    Outcome,
    PropertyRegistry,
    PropertyResult,
    VCardProperty,
    get_default_registry,
)
from cardprop.values import Multi, Single, Structured, TaggedValue

logger.disable("cardprop")

__version__ = "0.1.0"

__all__ = [
    "CannotParse",
    "CardPropError",
    "CompatibilityMode",
    "Config",
    "EmbeddedVCard",
    "Multi",
    "Outcome",
    "PropertyRegistry",
    "PropertyResult",
    "PropertySignal",
    "Single",
    "SkipProperty",
    "Structured",
    "TaggedValue",
    "UnsupportedFormat",
    "ValidationWarning",
    "VCard",
    "VCardDataType",
    "VCardParameters",
    "VCardProperty",
    "VCardVersion",
    "WarningKind",
    "get_default_registry",
]
