"""Tests for the three-stage property validation pipeline."""

import pytest

from cardprop.core.types import ValidationWarning, VCardVersion, WarningKind
from cardprop.document import VCard
from cardprop.property.gender import Gender
from tests.fakes import EchoProperty, ValidatingProperty


class TestValidate:
    """Tests for validate."""

    def test_clean_property_has_no_warnings(self, echo):
        assert echo.validate(VCardVersion.V4_0) == []

    def test_unsupported_version_message(self):
        warnings = Gender.male().validate(VCardVersion.V3_0)

        assert warnings == [
            "Property is not supported by version 3.0.  Supported versions are: [4.0]"
        ]
        assert warnings[0].kind is WarningKind.UNSUPPORTED_VERSION

    def test_stages_run_in_order(self):
        gender = Gender()
        gender.parameters.put("PREF", "0")

        warnings = gender.validate(VCardVersion.V3_0)

        assert [w.kind for w in warnings] == [
            WarningKind.UNSUPPORTED_VERSION,
            WarningKind.PARAMETER_INVALID,
            WarningKind.PARAMETER_INVALID,
            WarningKind.VALUE_EMPTY,
        ]
        assert "PREF is not supported by version 3.0" in warnings[1]
        assert warnings[2] == 'PREF must be an integer between 1 and 100, got "0".'
        assert warnings[3] == "Property has no sex value."

    def test_all_stages_run_even_when_version_unsupported(self):
        prop = ValidatingProperty()

        warnings = prop.validate(VCardVersion.V2_1)

        assert len(warnings) == 3
        assert warnings[1:] == ["first problem", "second problem"]

    def test_plain_strings_become_type_specific(self):
        warnings = ValidatingProperty().validate(VCardVersion.V4_0)

        assert all(isinstance(w, ValidationWarning) for w in warnings)
        assert warnings[0].kind is WarningKind.TYPE_SPECIFIC
        assert warnings[1].kind is WarningKind.VALUE_EMPTY

    def test_vcard_is_not_modified(self, echo):
        vcard = VCard(VCardVersion.V4_0)
        vcard.add_property(echo)

        echo.validate(VCardVersion.V4_0, vcard)

        assert vcard.properties == [echo]

    def test_parameter_warnings_come_from_container(self, echo):
        echo.parameters.put("ENCODING", "b")

        warnings = echo.validate(VCardVersion.V4_0)

        assert len(warnings) == 1
        assert warnings[0].startswith("Parameter ENCODING is not supported by version 4.0")


class TestGenderValidationCounts:
    """Gender combines the version check with its own empty-value rule."""

    @pytest.mark.parametrize(
        ("gender", "version", "expected"),
        [
            (Gender(), VCardVersion.V2_1, 2),
            (Gender(), VCardVersion.V3_0, 2),
            (Gender(), VCardVersion.V4_0, 1),
            (Gender.male(), VCardVersion.V2_1, 1),
            (Gender.male(), VCardVersion.V3_0, 1),
            (Gender.male(), VCardVersion.V4_0, 0),
        ],
    )
    def test_warning_count(self, gender, version, expected):
        assert len(gender.validate(version)) == expected


def test_echo_supports_every_version():
    for version in VCardVersion:
        assert EchoProperty("x").validate(version) == []
