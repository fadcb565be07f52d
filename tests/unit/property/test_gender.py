"""Tests for the GENDER property."""

from xml.etree import ElementTree as ET

import pytest

from cardprop.core.exceptions import CannotParse
from cardprop.core.types import XCARD_NAMESPACE, VCardDataType, VCardVersion
from cardprop.parameters import VCardParameters
from cardprop.property.gender import Gender
from cardprop.values import Single, Structured


class TestFactories:
    """Tests for factory methods and predicates."""

    @pytest.mark.parametrize(
        ("factory", "letter", "predicate"),
        [
            (Gender.male, "M", "is_male"),
            (Gender.female, "F", "is_female"),
            (Gender.other, "O", "is_other"),
            (Gender.none, "N", "is_none"),
            (Gender.unknown, "U", "is_unknown"),
        ],
    )
    def test_factory_sets_letter(self, factory, letter, predicate):
        gender = factory()

        assert gender.gender == letter
        assert getattr(gender, predicate)()
        assert gender.text is None

    def test_predicates_are_exclusive(self):
        gender = Gender.female()

        assert not gender.is_male()
        assert not gender.is_other()

    def test_only_40(self):
        assert Gender().supported_versions() == frozenset({VCardVersion.V4_0})


class TestText:
    """Tests for the plain-text form."""

    def test_marshal_sex_only(self):
        assert Gender.male().marshal_text(VCardVersion.V4_0) == "M"

    def test_marshal_with_identity(self):
        gender = Gender.female()
        gender.text = "woman"

        assert gender.marshal_text(VCardVersion.V4_0) == "F;woman"

    def test_marshal_escapes_identity(self):
        assert Gender("O", "a;b").marshal_text(VCardVersion.V4_0) == r"O;a\;b"

    def test_unmarshal(self, parameters):
        gender = Gender()

        warnings = gender.unmarshal_text(parameters, "f;woman", VCardVersion.V4_0)

        assert warnings == []
        assert gender.is_female()
        assert gender.text == "woman"

    def test_unmarshal_empty_sex(self, parameters):
        gender = Gender()

        gender.unmarshal_text(parameters, ";it's complicated", VCardVersion.V4_0)

        assert gender.gender is None
        assert gender.text == "it's complicated"


class TestXml:
    """Tests for the xCard form."""

    def test_marshal(self, xcard_element):
        element = xcard_element("gender")

        Gender("M", "man").marshal_xml(element)

        assert [child.tag.split("}")[1] for child in element] == ["sex", "identity"]
        assert [child.text for child in element] == ["M", "man"]

    def test_unmarshal(self, xcard_element, parameters):
        element = xcard_element("gender")
        ET.SubElement(element, f"{{{XCARD_NAMESPACE}}}sex").text = "f"
        ET.SubElement(element, f"{{{XCARD_NAMESPACE}}}identity").text = "woman"
        gender = Gender()

        gender.unmarshal_xml(parameters, element)

        assert gender.is_female()
        assert gender.text == "woman"

    def test_unmarshal_without_sex(self, xcard_element, parameters):
        element = xcard_element("gender")
        ET.SubElement(element, f"{{{XCARD_NAMESPACE}}}identity").text = "woman"

        with pytest.raises(CannotParse) as exc_info:
            Gender().unmarshal_xml(parameters, element)

        assert exc_info.value.reason == "Property value empty (no <sex> element found)."


class TestJson:
    """Tests for the jCard form."""

    def test_marshal_single(self):
        assert Gender.male().marshal_json() == Single(VCardDataType.TEXT, "M")

    def test_marshal_structured(self):
        assert Gender("F", "woman").marshal_json() == Structured(
            VCardDataType.TEXT, [["F"], ["woman"]]
        )

    def test_unmarshal_structured(self, parameters):
        gender = Gender()

        gender.unmarshal_json(parameters, Structured(VCardDataType.TEXT, [["m"], ["man"]]))

        assert gender.is_male()
        assert gender.text == "man"

    def test_unmarshal_single(self, parameters):
        gender = Gender()

        gender.unmarshal_json(parameters, Single(VCardDataType.TEXT, "U"))

        assert gender.is_unknown()
        assert gender.text is None


class TestHtml:
    """Tests for the hCard form."""

    def test_unmarshal_uses_text_grammar(self):
        from cardprop.elements import HCardElement

        gender = Gender()

        gender.unmarshal_html(HCardElement.from_html('<span class="gender">F;woman</span>'))

        assert gender.is_female()
        assert gender.text == "woman"


def test_end_to_end_scenario():
    """Read a female GENDER, check it, validate it and write it back."""
    gender = Gender()
    parameters = VCardParameters()

    assert gender.unmarshal_text(parameters, "F", VCardVersion.V4_0) == []
    assert gender.is_female()
    assert gender.validate(VCardVersion.V4_0) == []

    gender.text = "woman"
    assert gender.marshal_text(VCardVersion.V4_0) == "F;woman"
    assert len(gender.validate(VCardVersion.V3_0)) == 1
