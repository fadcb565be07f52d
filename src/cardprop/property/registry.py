"""Property type registry.

Maps property names (e.g. "FN") to the classes that implement them, so
readers can create the right property object for each line, element or
jCard array they meet. Names nobody registered fall back to RawProperty.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from cardprop.core.exceptions import RegistryError
from cardprop.core.types import XCARD_NAMESPACE
from cardprop.property.base import VCardProperty
from cardprop.property.raw import RawProperty


@dataclass
class PropertyRegistration:
    """Registration entry for a property class.

    Attributes:
        name: Upper-cased property name.
        property_class: Zero-argument constructible VCardProperty subclass.
        qualified_name: xCard ``(namespace, local_name)`` of the class.
    """

    name: str
    property_class: type[VCardProperty]
    qualified_name: tuple[str, str]


class PropertyRegistry:
    """Registry of property classes keyed by property name."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._types: dict[str, PropertyRegistration] = {}

    def register(
        self,
        property_class: type[VCardProperty],
        *,
        override: bool = False,
    ) -> None:
        """Register a property class under the name its instances report."""
        try:
            sample = property_class()
        except TypeError as e:
            raise RegistryError(
                f"{property_class.__name__} must be constructible without arguments"
            ) from e

        name = sample.type_name.upper()
        if name in self._types and not override:
            raise RegistryError(
                f"Property '{name}' is already registered. "
                f"Use override=True to replace."
            )

        self._types[name] = PropertyRegistration(
            name=name,
            property_class=property_class,
            qualified_name=sample.qualified_name() or sample.default_qualified_name(),
        )

    def unregister(self, name: str) -> bool:
        """Remove a registered property class."""
        if name.upper() in self._types:
            del self._types[name.upper()]
            return True
        return False

    def get(self, name: str) -> Optional[type[VCardProperty]]:
        """Get the class registered for a property name."""
        registration = self._types.get(name.upper())
        return registration.property_class if registration else None

    def create(self, name: str) -> VCardProperty:
        """Create an empty property for a name, falling back to RawProperty."""
        property_class = self.get(name)
        if property_class is None:
            logger.debug(f"No property class registered for {name}; using RawProperty")
            return RawProperty(name)
        return property_class()

    def find_by_qualified_name(
        self, namespace: Optional[str], local_name: str
    ) -> Optional[type[VCardProperty]]:
        """Get the class whose xCard element matches a namespace and local name."""
        namespace = namespace or XCARD_NAMESPACE
        for registration in self._types.values():
            if registration.qualified_name == (namespace, local_name):
                return registration.property_class
        return None

    def create_for_xml(self, namespace: Optional[str], local_name: str) -> VCardProperty:
        """Create an empty property for an xCard element."""
        property_class = self.find_by_qualified_name(namespace, local_name)
        if property_class is None:
            logger.debug(f"No property class registered for <{local_name}>; using RawProperty")
            return RawProperty(local_name)
        return property_class()

    def list_types(self) -> list[str]:
        """Get list of all registered property names."""
        return sorted(self._types.keys())

    def is_registered(self, name: str) -> bool:
        return name.upper() in self._types


# =============================================================================
# Default Registry
# =============================================================================

_default_registry: PropertyRegistry | None = None


def get_default_registry() -> PropertyRegistry:
    """Get the default global property registry."""
    global _default_registry
    if _default_registry is None:
        _default_registry = PropertyRegistry()
        _register_builtin_types(_default_registry)
    return _default_registry


def _register_builtin_types(registry: PropertyRegistry) -> None:
    """Register the property classes that ship with cardprop."""
    from cardprop.property.agent import Agent
    from cardprop.property.categories import Categories
    from cardprop.property.gender import Gender
    from cardprop.property.textual import FormattedName, Note, Title

    for property_class in (FormattedName, Note, Title, Categories, Gender, Agent):
        registry.register(property_class)
