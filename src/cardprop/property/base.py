"""Base class for vCard properties.

Every public marshal/unmarshal/validate method is a ``final`` wrapper
around an underscore hook. Wrappers own the side effects (installing
parsed parameters, copying parameters, building the warning list, logging
signals); concrete property types override hooks only.

Hooks may raise the signals from :mod:`cardprop.core.exceptions`:

- ``SkipProperty``: leave this instance out of the document.
- ``CannotParse``: the value is malformed.
- ``EmbeddedVCard``: the value is a nested vCard.
- ``UnsupportedFormat``: the type does not implement the format.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Union, final
from xml.etree import ElementTree as ET

from loguru import logger

from cardprop import text
from cardprop.core.exceptions import (
    CannotParse,
    EmbeddedVCard,
    SkipProperty,
    UnsupportedFormat,
)
from cardprop.core.types import (
    XCARD_NAMESPACE,
    CompatibilityMode,
    ValidationWarning,
    VCardDataType,
    VCardVersion,
    WarningKind,
)
from cardprop.elements import HCardElement, XCardElement
from cardprop.parameters import VCardParameters
from cardprop.values import Multi, Single, Structured, TaggedValue

if TYPE_CHECKING:
    from lxml.html import HtmlElement

    from cardprop.document import VCard

# hCard only maps onto the 3.0 text grammar.
HTML_VERSION = VCardVersion.V3_0


class VCardProperty(ABC):
    """A single property ("type") of a vCard, e.g. one ADR or one FN."""

    def __init__(self, type_name: str) -> None:
        """Create a property.

        Args:
            type_name: The property name, e.g. "ADR".
        """
        self._type_name = type_name
        self.group: Optional[str] = None
        self._parameters = VCardParameters()

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def parameters(self) -> VCardParameters:
        return self._parameters

    @parameters.setter
    def parameters(self, parameters: VCardParameters) -> None:
        if parameters is None:
            raise ValueError("Property parameters cannot be None")
        self._parameters = parameters

    # -----------------------------------------------------------------
    # Version support and validation
    # -----------------------------------------------------------------

    def supported_versions(self) -> frozenset[VCardVersion]:
        """Versions that define this property. Defaults to all of them."""
        return frozenset(VCardVersion)

    @final
    def is_supported(self, version: VCardVersion) -> bool:
        return version in self.supported_versions()

    @final
    def validate(
        self, version: VCardVersion, vcard: Optional["VCard"] = None
    ) -> list[ValidationWarning]:
        """Check the property for problems under a given version.

        Problems found here do not stop the property from being written,
        but may stop consumers from reading it correctly. All three checks
        always run: version support, parameters, then the property's own
        rules.

        Args:
            version: Version to check against (4.0 for xCard and jCard).
            vcard: The vCard the property belongs to. Read, never modified.

        Returns:
            Warnings in the order they were found; empty if none.
        """
        warnings: list[ValidationWarning] = []

        if not self.is_supported(version):
            supported = ", ".join(
                str(v) for v in VCardVersion if v in self.supported_versions()
            )
            warnings.append(
                ValidationWarning(
                    f"Property is not supported by version {version}.  "
                    f"Supported versions are: [{supported}]",
                    WarningKind.UNSUPPORTED_VERSION,
                )
            )

        warnings.extend(self._parameters.validate(version))

        for warning in self._validate(version, vcard):
            if not isinstance(warning, ValidationWarning):
                warning = ValidationWarning(warning, WarningKind.TYPE_SPECIFIC)
            warnings.append(warning)

        return warnings

    def _validate(
        self, version: VCardVersion, vcard: Optional["VCard"]
    ) -> Iterable[Union[str, ValidationWarning]]:
        """Property-specific checks. Yield or return warnings."""
        return ()

    # -----------------------------------------------------------------
    # Marshalling
    # -----------------------------------------------------------------

    @final
    def marshal_text(
        self, version: VCardVersion, mode: CompatibilityMode = CompatibilityMode.RFC
    ) -> str:
        """Convert the value to its plain-text wire form (unfolded).

        Raises:
            SkipProperty: The property must not be written.
            EmbeddedVCard: The value is a nested vCard.
        """
        with self._signals("marshal text"):
            return self._marshal_text(version, mode)

    @abstractmethod
    def _marshal_text(self, version: VCardVersion, mode: CompatibilityMode) -> str:
        ...

    @final
    def marshal_xml(
        self,
        element: ET.Element,
        version: VCardVersion = VCardVersion.V4_0,
        mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> None:
        """Write the value into the property's xCard element.

        Args:
            element: The property element (e.g. ``<fn>``) to append to.
            version: Version being written.
            mode: Consumer bias.

        Raises:
            SkipProperty: The property must not be written.
        """
        with self._signals("marshal xml"):
            self._marshal_xml(XCardElement(element, version), mode)

    def _marshal_xml(self, element: XCardElement, mode: CompatibilityMode) -> None:
        value = self.marshal_text(element.version, mode)
        element.append("unknown", value)

    @final
    def marshal_json(self, version: VCardVersion = VCardVersion.V4_0) -> TaggedValue:
        """Convert the value to a jCard tagged value.

        Raises:
            SkipProperty: The property must not be written.
        """
        with self._signals("marshal json"):
            return self._marshal_json(version)

    def _marshal_json(self, version: VCardVersion) -> TaggedValue:
        value = self.marshal_text(version, CompatibilityMode.RFC)
        return Single(self._parameters.value, value)

    @final
    def marshal_parameters(
        self,
        version: VCardVersion,
        mode: CompatibilityMode = CompatibilityMode.RFC,
        vcard: Optional["VCard"] = None,
    ) -> VCardParameters:
        """Get the parameters to write, as a copy.

        The property's own container is never modified, and later changes
        to the returned copy do not affect it.
        """
        copy = self._parameters.copy()
        self._marshal_parameters(copy, version, mode, vcard)
        return copy

    def _marshal_parameters(
        self,
        copy: VCardParameters,
        version: VCardVersion,
        mode: CompatibilityMode,
        vcard: Optional["VCard"],
    ) -> None:
        """Adjust the copied parameters before they are written."""
        pass

    # -----------------------------------------------------------------
    # Unmarshalling
    # -----------------------------------------------------------------

    @final
    def unmarshal_text(
        self,
        parameters: VCardParameters,
        value: str,
        version: VCardVersion,
        mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> list[str]:
        """Read the value from its plain-text wire form.

        Args:
            parameters: Parsed parameters; they replace the current ones.
            value: The unfolded, transport-decoded value.
            version: Version of the vCard being read.
            mode: Producer bias.

        Returns:
            Non-critical problems noticed while reading.

        Raises:
            SkipProperty: The property must not be added to the vCard.
            CannotParse: The value is malformed.
            EmbeddedVCard: The value is a nested vCard.
        """
        self._parameters = parameters
        warnings: list[str] = []
        with self._signals("unmarshal text"):
            self._unmarshal_text(value, version, warnings, mode)
        return warnings

    @abstractmethod
    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: list[str],
        mode: CompatibilityMode,
    ) -> None:
        ...

    @final
    def unmarshal_xml(
        self,
        parameters: VCardParameters,
        element: ET.Element,
        version: VCardVersion = VCardVersion.V4_0,
        mode: CompatibilityMode = CompatibilityMode.RFC,
    ) -> list[str]:
        """Read the value from an xCard property element.

        The element no longer contains its ``<parameters>`` child.

        Raises:
            SkipProperty, CannotParse: As for :meth:`unmarshal_text`.
            UnsupportedFormat: The property type cannot read xCard.
        """
        self._parameters = parameters
        warnings: list[str] = []
        with self._signals("unmarshal xml"):
            self._unmarshal_xml(XCardElement(element, version), warnings, mode)
        return warnings

    def _unmarshal_xml(
        self, element: XCardElement, warnings: list[str], mode: CompatibilityMode
    ) -> None:
        raise UnsupportedFormat(self._type_name, "xCards")

    @final
    def unmarshal_html(self, element: Union["HtmlElement", HCardElement]) -> list[str]:
        """Read the value from an hCard element.

        Raises:
            SkipProperty, CannotParse, EmbeddedVCard: As for
                :meth:`unmarshal_text`.
        """
        if not isinstance(element, HCardElement):
            element = HCardElement(element)
        warnings: list[str] = []
        with self._signals("unmarshal html"):
            self._unmarshal_html(element, warnings)
        return warnings

    def _unmarshal_html(self, element: HCardElement, warnings: list[str]) -> None:
        self._unmarshal_text(element.value(), HTML_VERSION, warnings, CompatibilityMode.RFC)

    @final
    def unmarshal_json(
        self,
        parameters: VCardParameters,
        value: TaggedValue,
        version: VCardVersion = VCardVersion.V4_0,
    ) -> list[str]:
        """Read the value from a jCard tagged value.

        Raises:
            SkipProperty, CannotParse: As for :meth:`unmarshal_text`.
        """
        self._parameters = parameters
        warnings: list[str] = []
        with self._signals("unmarshal json"):
            self._unmarshal_json(value, version, warnings)
        return warnings

    def _unmarshal_json(
        self, value: TaggedValue, version: VCardVersion, warnings: list[str]
    ) -> None:
        self._unmarshal_text(tagged_value_to_text(value), version, warnings, CompatibilityMode.RFC)

    @contextmanager
    def _signals(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SkipProperty as e:
            logger.debug(f"{self._type_name}: {operation} skipped: {e}")
            raise
        except CannotParse as e:
            logger.debug(f"{self._type_name}: {operation} failed: {e.reason}")
            raise
        except EmbeddedVCard:
            logger.debug(f"{self._type_name}: {operation} found an embedded vCard")
            raise
        except UnsupportedFormat:
            logger.debug(f"{self._type_name}: {operation} is not supported")
            raise

    # -----------------------------------------------------------------
    # XML naming
    # -----------------------------------------------------------------

    def qualified_name(self) -> Optional[tuple[str, str]]:
        """``(namespace, local_name)`` for xCard, or None for the default.

        Extended property types with their own XML vocabulary override this.
        """
        return None

    @final
    def default_qualified_name(self) -> tuple[str, str]:
        """The xCard namespace and the lower-cased type name."""
        return XCARD_NAMESPACE, self._type_name.lower()

    # -----------------------------------------------------------------
    # Parameter access
    # -----------------------------------------------------------------

    def get_parameter(self, name: str) -> Optional[str]:
        """First value of a parameter (case-insensitive name), or None."""
        return self._parameters.first(name)

    def get_parameters(self, name: str) -> list[str]:
        return self._parameters.get(name)

    def set_parameter(self, name: str, value: Optional[str]) -> None:
        """Replace every value of a parameter."""
        self._parameters.replace(name, value)

    def add_parameter(self, name: str, value: str) -> None:
        self._parameters.put(name, value)

    def remove_parameter(self, name: str) -> None:
        self._parameters.remove_all(name)

    # Typed helpers for concrete property classes. Each property type
    # decides which of these it exposes publicly.

    def _get_pref(self) -> Optional[int]:
        return self._parameters.pref

    def _set_pref(self, pref: Optional[int]) -> None:
        self._parameters.pref = pref

    def _get_language(self) -> Optional[str]:
        return self._parameters.language

    def _set_language(self, language: Optional[str]) -> None:
        self._parameters.language = language

    def _get_index(self) -> Optional[int]:
        return self._parameters.index

    def _set_index(self, index: Optional[int]) -> None:
        self._parameters.index = index

    def _get_pids(self) -> list[tuple[int, Optional[int]]]:
        return self._parameters.pids

    def _add_pid(self, local_id: int, clientpidmap_ref: int) -> None:
        self._parameters.add_pid(local_id, clientpidmap_ref)

    def _remove_pids(self) -> None:
        self._parameters.remove_pids()

    # -----------------------------------------------------------------
    # Ordering
    # -----------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        """Order by PREF ascending; properties without PREF go last."""
        if not isinstance(other, VCardProperty):
            return NotImplemented
        return compare_preference(self, other) < 0

    # Equal PREF makes <= and >= true in both directions; == stays identity.
    def __le__(self, other: object) -> bool:
        if not isinstance(other, VCardProperty):
            return NotImplemented
        return compare_preference(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, VCardProperty):
            return NotImplemented
        return compare_preference(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, VCardProperty):
            return NotImplemented
        return compare_preference(self, other) >= 0

    def __repr__(self) -> str:
        group = f"{self.group}." if self.group else ""
        return f"{type(self).__name__}({group}{self._type_name})"


def preference_key(prop: VCardProperty) -> tuple[bool, int]:
    """Sort key that puts low PREF values first and missing PREF last."""
    pref = prop.parameters.pref
    return (pref is None, pref if pref is not None else 0)


def compare_preference(a: VCardProperty, b: VCardProperty) -> int:
    """Three-way comparison by PREF; two properties without PREF are equal."""
    key_a, key_b = preference_key(a), preference_key(b)
    return (key_a > key_b) - (key_a < key_b)


def tagged_value_to_text(value: TaggedValue) -> str:
    """Turn a jCard tagged value back into plain-text wire form.

    Multi values are escaped and comma-joined. Structured values are
    escaped and comma-joined per component, then semicolon-joined. Single
    values are returned as-is; the text grammar handles their escaping.
    """
    if isinstance(value, Multi):
        return text.join(value.values, ",", text.escape)
    if isinstance(value, Structured):
        return text.join(
            value.values,
            ";",
            lambda component: text.join(component, ",", text.escape),
        )
    return value.as_single()


def missing_xml_elements(*elements: Union[str, VCardDataType, None]) -> CannotParse:
    """Build the CannotParse raised when expected xCard children are missing.

    Args:
        elements: Expected element names. Data types are rendered by their
            lower-cased name and None as "unknown".

    Returns:
        A CannotParse with a message naming the missing elements.
    """
    names = [
        "unknown" if e is None else e.wire_name.lower() if isinstance(e, VCardDataType) else e
        for e in elements
    ]

    if not names:
        message = "Property value empty."
    elif len(names) == 1:
        message = f"Property value empty (no <{names[0]}> element found)."
    elif len(names) == 2:
        message = f"Property value empty (no <{names[0]}> or <{names[1]}> elements found)."
    else:
        head = text.join(names[:-1], ", ", lambda name: f"<{name}>")
        message = f"Property value empty (no {head}, or <{names[-1]}> elements found)."

    return CannotParse(message)
