"""
Tests for structural type identification.
"""

import pytest

from tokentree.core.types import UNSUPPORTED_TYPE, TokenType
from tokentree.values import ColorValue, identify_json_type, identify_type, is_json_value


class TestIdentifyJsonType:
    """Test classification into the generic JSON categories."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("#ff0000", TokenType.STRING),
            (16, TokenType.NUMBER),
            (1.5, TokenType.NUMBER),
            (10**400, TokenType.NUMBER),
            (True, TokenType.BOOLEAN),
            (None, TokenType.NULL),
            ([1, "two", None], TokenType.ARRAY),
            ((0.25, 0.1, 0.25, 1), TokenType.ARRAY),
            ({"fontFamily": "Inter", "fontSize": 16}, TokenType.OBJECT),
        ],
    )
    def test_supported_shapes(self, value, expected):
        """Every JSON shape maps to its category."""
        assert identify_json_type(value) is expected

    def test_bool_is_not_a_number(self):
        """Booleans are classified before numbers."""
        assert identify_json_type(False) is TokenType.BOOLEAN

    @pytest.mark.parametrize(
        "value",
        [
            float("nan"),
            float("inf"),
            {1, 2},
            object(),
            {1: "non-string key"},
            [1, object()],
            {"nested": {"deeper": {3, 4}}},
        ],
    )
    def test_unsupported_shapes(self, value):
        """Anything not representable as JSON is unsupported, however deep."""
        assert identify_json_type(value) is UNSUPPORTED_TYPE
        assert not is_json_value(value)

    def test_composite_is_not_a_json_value(self):
        """JSON classification does not know about composite values."""
        assert identify_json_type(ColorValue(channels=(0, 0, 0))) is UNSUPPORTED_TYPE


class TestIdentifyType:
    """Test classification including composite values."""

    def test_composite_reports_its_value_type(self):
        """A ColorValue is a color."""
        assert identify_type(ColorValue(channels=(0, 0, 0))) is TokenType.COLOR

    def test_json_values_fall_through(self):
        """Plain values are classified structurally."""
        assert identify_type("16px") is TokenType.STRING
        assert identify_type(object()) is UNSUPPORTED_TYPE
