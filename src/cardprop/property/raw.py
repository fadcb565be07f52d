"""Fallback property for names no registered class handles."""

from __future__ import annotations

from typing import Optional

from cardprop.core.types import CompatibilityMode, VCardVersion
from cardprop.elements import XCardElement
from cardprop.property.base import VCardProperty, missing_xml_elements


class RawProperty(VCardProperty):
    """Extended or unrecognized property; the value is kept verbatim."""

    def __init__(self, type_name: str, value: Optional[str] = None) -> None:
        super().__init__(type_name.upper())
        self.value = value

    def _marshal_text(self, version: VCardVersion, mode: CompatibilityMode) -> str:
        return self.value or ""

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: list[str],
        mode: CompatibilityMode,
    ) -> None:
        self.value = value

    def _unmarshal_xml(
        self, element: XCardElement, warnings: list[str], mode: CompatibilityMode
    ) -> None:
        child = element.first_value()
        if child is None:
            raise missing_xml_elements()
        self.value = child[1]
