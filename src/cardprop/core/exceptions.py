"""Custom exceptions for cardprop.

Two families live here. ``CardPropError`` covers ordinary failures
(configuration, registry misuse). ``PropertySignal`` subclasses are the
outcomes a marshal/unmarshal hook may produce instead of a normal return.
``UnsupportedFormat`` is deliberately outside both families: it reports a
gap in a property type's format support and must reach the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from cardprop.document import VCard


class CardPropError(Exception):
    """Base exception for all cardprop errors."""

    pass


class ConfigError(CardPropError):
    """Configuration could not be loaded."""

    pass


class RegistryError(CardPropError):
    """Property registry operation failed."""

    pass


class PropertySignal(Exception):
    """Base class for the recoverable per-property signals."""

    pass


class SkipProperty(PropertySignal):
    """The property instance must be left out of the resulting document."""

    def __init__(self, reason: Optional[str] = None):
        self.reason = reason
        super().__init__(reason or "Property skipped.")


class CannotParse(PropertySignal):
    """The raw property value is malformed."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class EmbeddedVCard(PropertySignal):
    """The property value is itself a complete nested vCard.

    When marshalling, ``vcard`` holds the nested document the writer must
    serialize. When unmarshalling, the reader parses the nested document
    and hands it to ``injector``.
    """

    def __init__(
        self,
        vcard: Optional["VCard"] = None,
        injector: Optional[Callable[["VCard"], None]] = None,
    ):
        self.vcard = vcard
        self.injector = injector
        super().__init__("Property value is an embedded vCard.")

    def inject(self, vcard: "VCard") -> None:
        """Hand a parsed nested vCard back to the property that raised this."""
        if self.injector is not None:
            self.injector(vcard)


class UnsupportedFormat(NotImplementedError):
    """The property type does not implement the requested wire format."""

    def __init__(self, type_name: str, format_name: str):
        self.type_name = type_name
        self.format_name = format_name
        super().__init__(
            f"Property type {type_name} does not support the parsing of {format_name}."
        )
