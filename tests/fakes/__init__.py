"""Test fakes for exercising the property contract.

Example:
    from tests.fakes import EchoProperty, SignalProperty

    prop = SignalProperty(SkipProperty("not today"))
    with pytest.raises(SkipProperty):
        prop.marshal_text(VCardVersion.V4_0)
"""

from .properties import (
    EchoProperty,
    ParameterRewritingProperty,
    SignalProperty,
    ValidatingProperty,
)

__all__ = [
    "EchoProperty",
    "ParameterRewritingProperty",
    "SignalProperty",
    "ValidatingProperty",
]
