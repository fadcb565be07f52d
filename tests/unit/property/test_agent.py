"""Tests for the AGENT property."""

import pytest

from cardprop.core.exceptions import EmbeddedVCard, SkipProperty
from cardprop.core.types import VCardDataType, VCardVersion
from cardprop.document import VCard
from cardprop.elements import HCardElement
from cardprop.property.agent import Agent
from cardprop.property.textual import FormattedName


@pytest.fixture
def nested() -> VCard:
    vcard = VCard()
    vcard.add_property(FormattedName("Jane"))
    return vcard


class TestMarshal:
    """Tests for writing AGENT."""

    def test_url(self):
        assert Agent(url="http://example.com/a,b").marshal_text(VCardVersion.V3_0) == (
            r"http://example.com/a\,b"
        )

    def test_embedded(self, nested):
        with pytest.raises(EmbeddedVCard) as exc_info:
            Agent(vcard=nested).marshal_text(VCardVersion.V2_1)

        assert exc_info.value.vcard is nested

    def test_empty_is_skipped(self):
        with pytest.raises(SkipProperty):
            Agent().marshal_text(VCardVersion.V3_0)

    @pytest.mark.parametrize(
        ("version", "data_type"),
        [(VCardVersion.V2_1, VCardDataType.URL), (VCardVersion.V3_0, VCardDataType.URI)],
    )
    def test_value_parameter_for_url(self, version, data_type):
        agent = Agent(url="http://example.com")

        copy = agent.marshal_parameters(version)

        assert copy.value is data_type
        assert agent.parameters.value is None

    def test_value_parameter_cleared_for_vcard(self, nested):
        agent = Agent(vcard=nested)
        agent.parameters.value = VCardDataType.URI

        assert agent.marshal_parameters(VCardVersion.V3_0).value is None
        assert agent.parameters.value is VCardDataType.URI

    def test_not_written_to_xml_or_json(self, xcard_element):
        agent = Agent(url="http://example.com")

        with pytest.raises(SkipProperty):
            agent.marshal_xml(xcard_element("agent"))
        with pytest.raises(SkipProperty):
            agent.marshal_json()


class TestUnmarshal:
    """Tests for reading AGENT."""

    @pytest.mark.parametrize("value_type", ["uri", "URL"])
    def test_url(self, parameters, value_type):
        parameters.put("VALUE", value_type)
        agent = Agent()

        agent.unmarshal_text(parameters, "http://example.com", VCardVersion.V3_0)

        assert agent.url == "http://example.com"

    def test_embedded_injects(self, parameters, nested):
        agent = Agent(url="http://old.example.com")

        with pytest.raises(EmbeddedVCard) as exc_info:
            agent.unmarshal_text(parameters, r"BEGIN:VCARD\nEND:VCARD", VCardVersion.V3_0)

        exc_info.value.inject(nested)
        assert agent.vcard is nested
        assert agent.url is None

    def test_html_link(self):
        agent = Agent()

        agent.unmarshal_html(
            HCardElement.from_html('<a class="agent" href="http://example.com/bob">Bob</a>')
        )

        assert agent.url == "http://example.com/bob"

    def test_html_nested_vcard(self, nested):
        agent = Agent()

        with pytest.raises(EmbeddedVCard) as exc_info:
            agent.unmarshal_html(
                HCardElement.from_html('<div class="agent vcard"><span class="fn">Jane</span></div>')
            )

        exc_info.value.inject(nested)
        assert agent.vcard is nested


class TestValidate:
    """Tests for AGENT validation."""

    def test_empty(self):
        warnings = Agent().validate(VCardVersion.V3_0)

        assert warnings == ["Property has neither a URL nor an embedded vCard."]

    def test_not_in_40(self):
        warnings = Agent(url="http://example.com").validate(VCardVersion.V4_0)

        assert warnings == [
            "Property is not supported by version 4.0.  Supported versions are: [2.1, 3.0]"
        ]
