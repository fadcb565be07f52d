"""Tests for jCard tagged values."""

from dataclasses import FrozenInstanceError

import pytest

from cardprop.core.types import VCardDataType
from cardprop.values import Multi, Single, Structured, from_jcard


class TestVariants:
    """Tests for the three tagged value shapes."""

    def test_single_conversions(self):
        value = Single(VCardDataType.TEXT, "John")

        assert value.as_single() == "John"
        assert value.as_multi() == ["John"]
        assert value.as_structured() == [["John"]]
        assert value.to_jcard() == ["John"]

    def test_single_none(self):
        value = Single(None, None)

        assert value.as_single() == ""
        assert value.as_multi() == []
        assert value.as_structured() == []
        assert value.to_jcard() == [None]

    def test_multi_conversions(self):
        value = Multi(VCardDataType.TEXT, ["a", "b"])

        assert value.as_single() == "a"
        assert value.as_multi() == ["a", "b"]
        assert value.as_structured() == [["a"], ["b"]]
        assert value.to_jcard() == ["a", "b"]

    def test_structured_conversions(self):
        value = Structured(VCardDataType.TEXT, [["Doe"], ["John", "J."], []])

        assert value.as_single() == "Doe"
        assert value.as_multi() == ["Doe", "John", "J."]
        assert value.as_structured() == [["Doe"], ["John", "J."], []]
        assert value.to_jcard() == [["Doe", ["John", "J."], []]]

    def test_data_type_travels_with_value(self):
        assert Multi(VCardDataType.URI, ["x"]).data_type is VCardDataType.URI
        assert Structured(None, []).data_type is None

    def test_values_are_frozen(self):
        value = Single(VCardDataType.TEXT, "a")

        with pytest.raises(FrozenInstanceError):
            value.value = "b"


class TestFromJCard:
    """Tests for choosing a variant from JSON values."""

    def test_single(self):
        assert from_jcard(VCardDataType.TEXT, ["John"]) == Single(VCardDataType.TEXT, "John")

    def test_empty_and_null(self):
        assert from_jcard(None, []) == Single(None, None)
        assert from_jcard(None, [None]) == Single(None, None)

    def test_multi(self):
        assert from_jcard(VCardDataType.TEXT, ["a", "b"]) == Multi(VCardDataType.TEXT, ["a", "b"])

    def test_structured(self):
        value = from_jcard(VCardDataType.TEXT, [["Doe", ["John", "J."], ""]])

        assert value == Structured(VCardDataType.TEXT, [["Doe"], ["John", "J."], [""]])

    def test_scalars_are_stringified(self):
        assert from_jcard(VCardDataType.INTEGER, [42]).as_single() == "42"
        assert from_jcard(VCardDataType.BOOLEAN, [True]).as_single() == "true"
        assert from_jcard(VCardDataType.FLOAT, [1.5, None]).as_multi() == ["1.5", ""]
