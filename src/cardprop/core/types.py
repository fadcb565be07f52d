"""Type definitions for cardprop."""

from enum import Enum
from typing import Optional


class VCardVersion(Enum):
    """Protocol versions, oldest first."""

    V2_1 = "2.1"
    V3_0 = "3.0"
    V4_0 = "4.0"

    def __str__(self) -> str:
        """Return the version string (e.g. "3.0")."""
        return self.value

    def __lt__(self, other: "VCardVersion") -> bool:
        if not isinstance(other, VCardVersion):
            return NotImplemented
        members = list(VCardVersion)
        return members.index(self) < members.index(other)

    @property
    def xml_namespace(self) -> Optional[str]:
        """Namespace of the xCard vocabulary, which only exists for 4.0."""
        if self is VCardVersion.V4_0:
            return XCARD_NAMESPACE
        return None

    @classmethod
    def from_string(cls, value: str) -> Optional["VCardVersion"]:
        """Look up a version by its string form, or None if unknown."""
        for version in cls:
            if version.value == value.strip():
                return version
        return None


XCARD_NAMESPACE = "urn:ietf:params:xml:ns:vcard-4.0"


class CompatibilityMode(Enum):
    """Bias applied while marshalling for a particular consumer."""

    RFC = "rfc"
    OUTLOOK = "outlook"
    MAC_ADDRESS_BOOK = "mac"
    GMAIL = "gmail"
    I_PHONE = "iphone"
    EVOLUTION = "evolution"
    KDE_ADDRESS_BOOK = "kde"

    @classmethod
    def from_string(cls, value: str) -> Optional["CompatibilityMode"]:
        """Look up a mode by value or member name, case-insensitively."""
        wanted = value.strip().lower()
        for mode in cls:
            if mode.value == wanted or mode.name.lower() == wanted:
                return mode
        return None


_ALL_VERSIONS = frozenset(VCardVersion)
_V21 = frozenset({VCardVersion.V2_1})
_V40 = frozenset({VCardVersion.V4_0})
_V30_V40 = frozenset({VCardVersion.V3_0, VCardVersion.V4_0})


class VCardDataType(Enum):
    """Data types a property value may declare through the VALUE parameter.

    Each member carries its wire name and the versions that define it.
    """

    URL = ("url", _V21)
    CONTENT_ID = ("content-id", _V21)
    INLINE = ("inline", _V21)
    BINARY = ("binary", frozenset({VCardVersion.V3_0}))
    URI = ("uri", _V30_V40)
    TEXT = ("text", _V30_V40)
    DATE = ("date", _V30_V40)
    TIME = ("time", _V30_V40)
    DATE_TIME = ("date-time", _V30_V40)
    DATE_AND_OR_TIME = ("date-and-or-time", _V40)
    TIMESTAMP = ("timestamp", _V40)
    BOOLEAN = ("boolean", _V30_V40)
    INTEGER = ("integer", _V30_V40)
    FLOAT = ("float", _V30_V40)
    UTC_OFFSET = ("utc-offset", _V30_V40)
    LANGUAGE_TAG = ("language-tag", _V40)

    def __init__(self, wire_name: str, versions: frozenset) -> None:
        self.wire_name = wire_name
        self.versions = versions

    def __str__(self) -> str:
        return self.wire_name

    def is_supported(self, version: VCardVersion) -> bool:
        """Whether the data type is defined by the given version."""
        return version in self.versions

    @classmethod
    def find(cls, name: Optional[str]) -> Optional["VCardDataType"]:
        """Look up a data type by wire name, case-insensitively."""
        if name is None:
            return None
        wanted = name.strip().lower()
        if wanted == "cid":
            return cls.CONTENT_ID
        for data_type in cls:
            if data_type.wire_name == wanted:
                return data_type
        return None


class WarningKind(Enum):
    """Closed set of validation warning categories."""

    UNSUPPORTED_VERSION = "unsupported-version"
    PARAMETER_INVALID = "parameter-invalid"
    VALUE_EMPTY = "value-empty"
    TYPE_SPECIFIC = "type-specific"


class ValidationWarning(str):
    """A human-readable warning string tagged with its WarningKind.

    Behaves as a plain ``str`` everywhere, so lists of warnings can be
    compared against strings directly.
    """

    kind: WarningKind

    def __new__(
        cls, message: str, kind: WarningKind = WarningKind.TYPE_SPECIFIC
    ) -> "ValidationWarning":
        instance = super().__new__(cls, message)
        instance.kind = kind
        return instance

    def __repr__(self) -> str:
        return f"ValidationWarning({str.__repr__(self)}, {self.kind.name})"
