"""Tests for the module-level helpers in cardprop.property.base."""

import pytest

from cardprop.core.exceptions import CannotParse
from cardprop.core.types import VCardDataType
from cardprop.property.base import missing_xml_elements, tagged_value_to_text
from cardprop.values import Multi, Single, Structured


class TestMissingXmlElements:
    """Tests for missing_xml_elements."""

    @pytest.mark.parametrize(
        ("elements", "message"),
        [
            ((), "Property value empty."),
            (("sex",), "Property value empty (no <sex> element found)."),
            (("uri", "text"), "Property value empty (no <uri> or <text> elements found)."),
            (
                ("a", "b", "c"),
                "Property value empty (no <a>, <b>, or <c> elements found).",
            ),
        ],
    )
    def test_messages(self, elements, message):
        error = missing_xml_elements(*elements)

        assert isinstance(error, CannotParse)
        assert error.reason == message
        assert str(error) == message

    def test_data_types_and_none(self):
        error = missing_xml_elements(VCardDataType.DATE_AND_OR_TIME, None)

        assert error.reason == (
            "Property value empty (no <date-and-or-time> or <unknown> elements found)."
        )

    def test_returns_rather_than_raises(self):
        assert missing_xml_elements("text") is not None


class TestTaggedValueToText:
    """Tests for tagged_value_to_text."""

    def test_single(self):
        assert tagged_value_to_text(Single(VCardDataType.TEXT, "a;b")) == "a;b"

    def test_single_none(self):
        assert tagged_value_to_text(Single(VCardDataType.TEXT, None)) == ""

    def test_multi(self):
        assert tagged_value_to_text(Multi(VCardDataType.TEXT, ["a", "b,c"])) == r"a,b\,c"

    def test_structured(self):
        value = Structured(VCardDataType.TEXT, [["a", "b"], [], ["c;d"]])

        assert tagged_value_to_text(value) == r"a,b;;c\;d"
