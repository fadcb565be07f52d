"""Minimal vCard container.

Holds property instances in document order. Readers and writers build and
walk it; properties receive it read-only during validation and parameter
marshalling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, TypeVar

from cardprop.core.types import VCardVersion

if TYPE_CHECKING:
    from cardprop.property.base import VCardProperty

P = TypeVar("P", bound="VCardProperty")


class VCard:
    """An ordered collection of properties."""

    def __init__(self, version: VCardVersion = VCardVersion.V3_0) -> None:
        self.version = version
        self._properties: list["VCardProperty"] = []

    @property
    def properties(self) -> list["VCardProperty"]:
        return list(self._properties)

    def add_property(self, prop: "VCardProperty") -> None:
        self._properties.append(prop)

    def get_properties(self, cls: type[P]) -> list[P]:
        """All properties that are instances of ``cls``, in document order."""
        return [prop for prop in self._properties if isinstance(prop, cls)]

    def get_property(self, cls: type[P]) -> Optional[P]:
        """The most preferred property of a class, or None."""
        matches = sorted(self.get_properties(cls))
        return matches[0] if matches else None

    def remove_properties(self, cls: type["VCardProperty"]) -> int:
        """Remove every property of a class, returning how many were removed."""
        before = len(self._properties)
        self._properties = [prop for prop in self._properties if not isinstance(prop, cls)]
        return before - len(self._properties)

    def __iter__(self) -> Iterator["VCardProperty"]:
        return iter(list(self._properties))

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"VCard(version={self.version}, properties={len(self._properties)})"
