"""The property contract and the property types that ship with cardprop."""

from .agent import Agent
from .base import (
    HTML_VERSION,
    VCardProperty,
    compare_preference,
    missing_xml_elements,
    preference_key,
    tagged_value_to_text,
)
from .categories import Categories
from .gender import Gender
from .raw import RawProperty
from .registry import PropertyRegistration, PropertyRegistry, get_default_registry
from .results import (
    Outcome,
    PropertyResult,
    capture,
    unmarshal_html_property,
    unmarshal_json_property,
    unmarshal_text_property,
    unmarshal_xml_property,
)
from .textual import FormattedName, Note, TextProperty, Title

__all__ = [
    "HTML_VERSION",
    "VCardProperty",
    "compare_preference",
    "missing_xml_elements",
    "preference_key",
    "tagged_value_to_text",
    # Property types
    "Agent",
    "Categories",
    "FormattedName",
    "Gender",
    "Note",
    "RawProperty",
    "TextProperty",
    "Title",
    # Registry
    "PropertyRegistration",
    "PropertyRegistry",
    "get_default_registry",
    # Results
    "Outcome",
    "PropertyResult",
    "capture",
    "unmarshal_html_property",
    "unmarshal_json_property",
    "unmarshal_text_property",
    "unmarshal_xml_property",
]
