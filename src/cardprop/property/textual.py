"""Properties whose value is a single text string."""

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
from cardprop.values import Single, TaggedValue


class TextProperty(VCardProperty):
    """Base for properties holding one escaped text value."""

    def __init__(self, type_name: str, value: Optional[str] = None) -> None:
        super().__init__(type_name)
        self.value = value

    @property
    def language(self) -> Optional[str]:
        return self._get_language()

    @language.setter
    def language(self, language: Optional[str]) -> None:
        self._set_language(language)

    @property
    def pref(self) -> Optional[int]:
        return self._get_pref()

    @pref.setter
    def pref(self, pref: Optional[int]) -> None:
        self._set_pref(pref)

    def _marshal_text(self, version: VCardVersion, mode: CompatibilityMode) -> str:
        return text.escape(self.value or "")

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: list[str],
        mode: CompatibilityMode,
    ) -> None:
        self.value = text.unescape(value)

    def _marshal_xml(self, element: XCardElement, mode: CompatibilityMode) -> None:
        element.append("text", self.value or "")

    def _unmarshal_xml(
        self, element: XCardElement, warnings: list[str], mode: CompatibilityMode
    ) -> None:
        value = element.first("text")
        if value is None:
            raise missing_xml_elements(VCardDataType.TEXT)
        self.value = value

    def _unmarshal_html(self, element: HCardElement, warnings: list[str]) -> None:
        self.value = element.value()

    def _marshal_json(self, version: VCardVersion) -> TaggedValue:
        return Single(VCardDataType.TEXT, self.value or "")

    def _unmarshal_json(
        self, value: TaggedValue, version: VCardVersion, warnings: list[str]
    ) -> None:
        if isinstance(value, Single):
            self.value = value.as_single()
        else:
            self.value = ",".join(value.as_multi())

    def _validate(self, version: VCardVersion, vcard) -> Iterable[ValidationWarning]:
        if self.value is None:
            yield ValidationWarning("Property has no value.", WarningKind.VALUE_EMPTY)


class FormattedName(TextProperty):
    """FN: the display name of the vCard's subject."""

    NAME = "FN"

    def __init__(self, value: Optional[str] = None) -> None:
        super().__init__(self.NAME, value)


class Note(TextProperty):
    """NOTE: free-form commentary."""

    NAME = "NOTE"

    def __init__(self, value: Optional[str] = None) -> None:
        super().__init__(self.NAME, value)


class Title(TextProperty):
    """TITLE: job title or position."""

    NAME = "TITLE"

    def __init__(self, value: Optional[str] = None) -> None:
        super().__init__(self.NAME, value)
