"""AGENT: someone who acts on behalf of the vCard's subject (2.1 and 3.0)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from cardprop import text
from cardprop.core.exceptions import EmbeddedVCard, SkipProperty
from cardprop.core.types import (
    CompatibilityMode,
    ValidationWarning,
    VCardDataType,
    VCardVersion,
    WarningKind,
)
from cardprop.elements import HCardElement, XCardElement
from cardprop.parameters import VCardParameters
from cardprop.property.base import VCardProperty
from cardprop.values import TaggedValue

if TYPE_CHECKING:
    from cardprop.document import VCard


class Agent(VCardProperty):
    """Either a URL pointing at the agent or the agent's own nested vCard.

    A nested vCard cannot be expressed as text by this property alone, so
    both directions raise ``EmbeddedVCard`` and let the reader or writer
    recurse.
    """

    NAME = "AGENT"

    def __init__(self, url: Optional[str] = None, vcard: Optional["VCard"] = None) -> None:
        super().__init__(self.NAME)
        self.url = url
        self.vcard = vcard

    def set_vcard(self, vcard: "VCard") -> None:
        """Attach a nested vCard, replacing any URL."""
        self.url = None
        self.vcard = vcard

    def supported_versions(self) -> frozenset[VCardVersion]:
        return frozenset({VCardVersion.V2_1, VCardVersion.V3_0})

    def _marshal_parameters(
        self,
        copy: VCardParameters,
        version: VCardVersion,
        mode: CompatibilityMode,
        vcard: Optional["VCard"],
    ) -> None:
        if self.url is not None:
            copy.value = VCardDataType.URL if version is VCardVersion.V2_1 else VCardDataType.URI
        else:
            copy.value = None

    def _marshal_text(self, version: VCardVersion, mode: CompatibilityMode) -> str:
        if self.url is not None:
            return text.escape(self.url)
        if self.vcard is not None:
            raise EmbeddedVCard(vcard=self.vcard)
        raise SkipProperty("Property has neither a URL nor an embedded vCard.")

    def _unmarshal_text(
        self,
        value: str,
        version: VCardVersion,
        warnings: list[str],
        mode: CompatibilityMode,
    ) -> None:
        if self.parameters.value in (VCardDataType.URL, VCardDataType.URI):
            self.url = text.unescape(value)
            return
        raise EmbeddedVCard(injector=self.set_vcard)

    def _marshal_xml(self, element: XCardElement, mode: CompatibilityMode) -> None:
        raise SkipProperty("AGENT is not part of the xCard vocabulary.")

    def _marshal_json(self, version: VCardVersion) -> TaggedValue:
        raise SkipProperty("AGENT is not part of the jCard vocabulary.")

    def _unmarshal_html(self, element: HCardElement, warnings: list[str]) -> None:
        if "vcard" in element.class_names():
            raise EmbeddedVCard(injector=self.set_vcard)
        self.url = element.absolute_url("href") or element.value()

    def _validate(self, version: VCardVersion, vcard) -> Iterable[ValidationWarning]:
        if self.url is None and self.vcard is None:
            yield ValidationWarning(
                "Property has neither a URL nor an embedded vCard.", WarningKind.VALUE_EMPTY
            )
