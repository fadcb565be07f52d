"""Format-neutral representation of jCard property values.

A tagged value is produced while marshalling to, or consumed while
unmarshalling from, the JSON encoding. It always carries the declared data
type alongside exactly one of three shapes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from cardprop.core.types import VCardDataType


@dataclass(frozen=True)
class Single:
    """A single scalar value."""

    data_type: Optional[VCardDataType]
    value: Optional[str]

    def as_single(self) -> str:
        return "" if self.value is None else self.value

    def as_multi(self) -> list[str]:
        return [] if self.value is None else [self.value]

    def as_structured(self) -> list[list[str]]:
        return [] if self.value is None else [[self.value]]

    def to_jcard(self) -> list[Any]:
        return [self.value]


@dataclass(frozen=True)
class Multi:
    """A flat list of values (e.g. CATEGORIES)."""

    data_type: Optional[VCardDataType]
    values: list[str] = field(default_factory=list)

    def as_single(self) -> str:
        return self.values[0] if self.values else ""

    def as_multi(self) -> list[str]:
        return list(self.values)

    def as_structured(self) -> list[list[str]]:
        return [[value] for value in self.values]

    def to_jcard(self) -> list[Any]:
        return list(self.values)


@dataclass(frozen=True)
class Structured:
    """A list of components, each holding one or more values (e.g. N, ADR)."""

    data_type: Optional[VCardDataType]
    values: list[list[str]] = field(default_factory=list)

    def as_single(self) -> str:
        if self.values and self.values[0]:
            return self.values[0][0]
        return ""

    def as_multi(self) -> list[str]:
        return [value for component in self.values for value in component]

    def as_structured(self) -> list[list[str]]:
        return [list(component) for component in self.values]

    def to_jcard(self) -> list[Any]:
        """One nested JSON array; single-value components collapse to strings."""
        components: list[Any] = []
        for component in self.values:
            if len(component) == 1:
                components.append(component[0])
            else:
                components.append(list(component))
        return [components]


TaggedValue = Union[Single, Multi, Structured]


def from_jcard(data_type: Optional[VCardDataType], values: list[Any]) -> TaggedValue:
    """Build a tagged value from the value slots of a jCard property array.

    The shape is chosen from the JSON: a nested array makes a structured
    value, more than one scalar makes a multi value, anything else is single.

    Args:
        data_type: Data type named in the jCard property array.
        values: Everything after the data type in the property array.

    Returns:
        The matching TaggedValue variant.
    """
    if values and isinstance(values[0], list):
        components: list[list[str]] = []
        for component in values[0]:
            if isinstance(component, list):
                components.append([_scalar(v) for v in component])
            else:
                components.append([_scalar(component)])
        return Structured(data_type, components)

    if len(values) > 1:
        return Multi(data_type, [_scalar(v) for v in values])

    if not values or values[0] is None:
        return Single(data_type, None)
    return Single(data_type, _scalar(values[0]))


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
