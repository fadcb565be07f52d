"""GENDER: sex and gender identity (vCard 4.0 only)."""

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
from cardprop.elements import XCardElement
from cardprop.property.base import VCardProperty, missing_xml_elements
from cardprop.values import Single, Structured, TaggedValue

MALE = "M"
FEMALE = "F"
OTHER = "O"
NONE = "N"
UNKNOWN = "U"


class Gender(VCardProperty):
    """Sex component (a single letter) plus optional free-form identity.

    Example:
        >>> gender = Gender.female()
        >>> gender.text = "woman"
        >>> gender.marshal_text(VCardVersion.V4_0)
        'F;woman'
    """

    NAME = "GENDER"

    def __init__(self, gender: Optional[str] = None, text: Optional[str] = None) -> None:
        super().__init__(self.NAME)
        self.gender = gender
        self.text = text

    @classmethod
    def male(cls) -> "Gender":
        return cls(MALE)

    @classmethod
    def female(cls) -> "Gender":
        return cls(FEMALE)

    @classmethod
    def other(cls) -> "Gender":
        return cls(OTHER)

    @classmethod
    def none(cls) -> "Gender":
        return cls(NONE)

    @classmethod
    def unknown(cls) -> "Gender":
        return cls(UNKNOWN)

    def is_male(self) -> bool:
        return self.gender == MALE

    def is_female(self) -> bool:
        return self.gender == FEMALE

    def is_other(self) -> bool:
        return self.gender == OTHER

    def is_none(self) -> bool:
        return self.gender == NONE

    def is_unknown(self) -> bool:
        return self.gender == UNKNOWN

    def supported_versions(self) -> frozenset[VCardVersion]:
        return frozenset({VCardVersion.V4_0})

    def _marshal_text(self, version: VCardVersion, mode: CompatibilityMode) -> str:
        value = text.escape(self.gender or "")
        if self.text is not None:
            value += ";" + text.escape(self.text)
        return value

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: list[str],
        mode: CompatibilityMode,
    ) -> None:
        parts = text.split(value, ";")
        self.gender = parts[0].strip().upper() or None
        self.text = parts[1] if len(parts) > 1 and parts[1] else None

    def _marshal_xml(self, element: XCardElement, mode: CompatibilityMode) -> None:
        element.append("sex", self.gender or "")
        if self.text is not None:
            element.append("identity", self.text)

    def _unmarshal_xml(
        self, element: XCardElement, warnings: list[str], mode: CompatibilityMode
    ) -> None:
        sex = element.first("sex")
        if sex is None:
            raise missing_xml_elements("sex")
        self.gender = sex.strip().upper() or None
        self.text = element.first("identity")

    def _marshal_json(self, version: VCardVersion) -> TaggedValue:
        if self.text is None:
            return Single(VCardDataType.TEXT, self.gender or "")
        return Structured(VCardDataType.TEXT, [[self.gender or ""], [self.text]])

    def _unmarshal_json(
        self, value: TaggedValue, version: VCardVersion, warnings: list[str]
    ) -> None:
        components = value.as_structured()
        sex = components[0][0] if components and components[0] else ""
        self.gender = sex.strip().upper() or None
        identity = components[1][0] if len(components) > 1 and components[1] else ""
        self.text = identity or None

    def _validate(self, version: VCardVersion, vcard) -> Iterable[ValidationWarning]:
        if self.gender is None:
            yield ValidationWarning("Property has no sex value.", WarningKind.VALUE_EMPTY)
