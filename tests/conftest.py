"""Pytest configuration and fixtures."""

from xml.etree import ElementTree as ET

import pytest

from cardprop.core.types import XCARD_NAMESPACE
from cardprop.parameters import VCardParameters
from cardprop.property.registry import PropertyRegistry
from tests.fakes import EchoProperty


@pytest.fixture
def parameters() -> VCardParameters:
    """Provide an empty parameter container."""
    return VCardParameters()


@pytest.fixture
def echo() -> EchoProperty:
    """Provide a property that records every hook call."""
    return EchoProperty("hello")


@pytest.fixture
def registry() -> PropertyRegistry:
    """Create a fresh empty registry for testing."""
    return PropertyRegistry()


@pytest.fixture
def xcard_element():
    """Factory for empty xCard property elements."""

    def make(local_name: str) -> ET.Element:
        return ET.Element(f"{{{XCARD_NAMESPACE}}}{local_name}")

    return make
