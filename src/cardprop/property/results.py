"""Per-property outcomes for document readers.

Readers process a document one property at a time. These helpers create
the property through the registry, run one unmarshal entry point and turn
the recoverable signals into a PropertyResult, so the reader can branch on
``result.outcome`` instead of catching exceptions itself.

``UnsupportedFormat`` is not recoverable and always propagates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional
from xml.etree import ElementTree as ET

from loguru import logger

from cardprop.core.config import Config
from cardprop.core.exceptions import CannotParse, EmbeddedVCard, SkipProperty
from cardprop.core.types import VCardVersion
from cardprop.elements import split_tag
from cardprop.parameters import VCardParameters
from cardprop.property.base import VCardProperty
from cardprop.property.registry import PropertyRegistry, get_default_registry
from cardprop.values import TaggedValue

if TYPE_CHECKING:
    from lxml.html import HtmlElement


class Outcome(Enum):
    """What happened to a property during unmarshalling."""

    OK = "ok"
    SKIP = "skip"
    CANNOT_PARSE = "cannot-parse"
    EMBEDDED = "embedded"


@dataclass
class PropertyResult:
    """Result of unmarshalling a single property.

    Attributes:
        outcome: Which of the four outcomes occurred.
        property: The property object (only meaningful for OK and EMBEDDED).
        warnings: Non-critical problems reported while reading.
        reason: Why the property was skipped or could not be parsed.
        embedded: The signal carrying the nested-vCard injector, for EMBEDDED.
    """

    outcome: Outcome
    property: VCardProperty
    warnings: list[str] = field(default_factory=list)
    reason: Optional[str] = None
    embedded: Optional[EmbeddedVCard] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.OK


def capture(prop: VCardProperty, operation: Callable[[], list[str]]) -> PropertyResult:
    """Run an unmarshal call and convert its signals into a PropertyResult."""
    try:
        warnings = operation()
    except SkipProperty as e:
        return PropertyResult(Outcome.SKIP, prop, reason=e.reason)
    except CannotParse as e:
        logger.warning(f"Could not parse {prop.type_name}: {e.reason}")
        return PropertyResult(Outcome.CANNOT_PARSE, prop, reason=e.reason)
    except EmbeddedVCard as e:
        return PropertyResult(Outcome.EMBEDDED, prop, embedded=e)
    return PropertyResult(Outcome.OK, prop, warnings=warnings)


def unmarshal_text_property(
    name: str,
    parameters: VCardParameters,
    value: str,
    version: Optional[VCardVersion] = None,
    *,
    group: Optional[str] = None,
    registry: Optional[PropertyRegistry] = None,
    config: Optional[Config] = None,
) -> PropertyResult:
    """Create and unmarshal a property from one plain-text content line.

    Args:
        name: Property name from the line.
        parameters: Parsed parameters.
        value: Unfolded, decoded value.
        version: vCard version; defaults to ``config.default_version``.
        group: Group prefix from the line, if any.
        registry: Registry to create the property from.
        config: Defaults for version and compatibility mode.
    """
    config = config or Config()
    registry = registry or get_default_registry()
    prop = registry.create(name)
    prop.group = group
    return capture(
        prop,
        lambda: prop.unmarshal_text(
            parameters, value, version or config.default_version, config.compatibility_mode
        ),
    )


def unmarshal_xml_property(
    element: ET.Element,
    parameters: VCardParameters,
    version: VCardVersion = VCardVersion.V4_0,
    *,
    registry: Optional[PropertyRegistry] = None,
    config: Optional[Config] = None,
) -> PropertyResult:
    """Create and unmarshal a property from an xCard element."""
    config = config or Config()
    registry = registry or get_default_registry()
    namespace, local_name = split_tag(element.tag)
    prop = registry.create_for_xml(namespace, local_name)
    return capture(
        prop,
        lambda: prop.unmarshal_xml(parameters, element, version, config.compatibility_mode),
    )


def unmarshal_json_property(
    name: str,
    parameters: VCardParameters,
    value: TaggedValue,
    version: VCardVersion = VCardVersion.V4_0,
    *,
    registry: Optional[PropertyRegistry] = None,
) -> PropertyResult:
    """Create and unmarshal a property from a jCard property array's parts."""
    registry = registry or get_default_registry()
    prop = registry.create(name)
    return capture(prop, lambda: prop.unmarshal_json(parameters, value, version))


def unmarshal_html_property(
    name: str,
    element: "HtmlElement",
    *,
    registry: Optional[PropertyRegistry] = None,
) -> PropertyResult:
    """Create and unmarshal a property from an hCard element."""
    registry = registry or get_default_registry()
    prop = registry.create(name)
    return capture(prop, lambda: prop.unmarshal_html(element))
