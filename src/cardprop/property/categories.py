"""CATEGORIES: a comma-separated list of tags."""

from __future__ import annotations

from typing import Iterable, Optional

from cardprop import text
from cardprop.core.types import (
    CompatibilityMode,
    ValidationWarning,
    VCardDataType,
    VCardVersion,
    WarningKind,
)
from cardprop.elements import HCardElement, XCardElement
from cardprop.property.base import VCardProperty, missing_xml_elements
from cardprop.values import Multi, TaggedValue


class Categories(VCardProperty):
    """Tags or categories the vCard's subject belongs to."""

    NAME = "CATEGORIES"

    def __init__(self, values: Optional[list[str]] = None) -> None:
        super().__init__(self.NAME)
        self.values: list[str] = list(values or [])

    def add_value(self, value: str) -> None:
        self.values.append(value)

    @property
    def pref(self) -> Optional[int]:
        return self._get_pref()

    @pref.setter
    def pref(self, pref: Optional[int]) -> None:
        self._set_pref(pref)

    @property
    def index(self) -> Optional[int]:
        return self._get_index()

    @index.setter
    def index(self, index: Optional[int]) -> None:
        self._set_index(index)

    def _marshal_text(self, version: VCardVersion, mode: CompatibilityMode) -> str:
        return text.join(self.values, ",", text.escape)

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: list[str],
        mode: CompatibilityMode,
    ) -> None:
        self.values = [part.strip() for part in text.split(value, ",") if part.strip()]

    def _marshal_xml(self, element: XCardElement, mode: CompatibilityMode) -> None:
        element.append_all("text", self.values)

    def _unmarshal_xml(
        self, element: XCardElement, warnings: list[str], mode: CompatibilityMode
    ) -> None:
        values = element.all("text")
        if not values:
            raise missing_xml_elements(VCardDataType.TEXT)
        self.values = values

    def _unmarshal_html(self, element: HCardElement, warnings: list[str]) -> None:
        # Each category is usually its own element, e.g. <span class="category">.
        self.values = [element.value()]

    def _marshal_json(self, version: VCardVersion) -> TaggedValue:
        return Multi(VCardDataType.TEXT, list(self.values))

    def _unmarshal_json(
        self, value: TaggedValue, version: VCardVersion, warnings: list[str]
    ) -> None:
        self.values = value.as_multi()

    def _validate(self, version: VCardVersion, vcard) -> Iterable[ValidationWarning]:
        if not self.values:
            yield ValidationWarning("Property has no values.", WarningKind.VALUE_EMPTY)
