"""
Tests for Reference values.
"""

import attrs
import pytest

from tokentree.exceptions import PathValidationError
from tokentree.structure import Reference, is_alias_string, is_reference


class TestReference:
    """Test construction, immutability and alias conversion."""

    def test_path_and_segments(self):
        """A reference exposes its path and the names along it."""
        reference = Reference("color.brand.primary")
        assert reference.get_path() == "color.brand.primary"
        assert reference.get_segments() == ["color", "brand", "primary"]

    def test_invalid_path_is_rejected(self):
        """Malformed paths fail at construction."""
        with pytest.raises(PathValidationError):
            Reference("color..red")

    def test_is_immutable(self):
        """References are frozen value objects."""
        reference = Reference("color.red")
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            reference.path = "color.blue"

    def test_equality_by_path(self):
        """Two references to the same path are equal and hash alike."""
        assert Reference("color.red") == Reference.from_segments(["color", "red"])
        assert len({Reference("a.b"), Reference("a.b")}) == 1

    def test_alias_round_trip(self):
        """to_alias and from_alias are inverse."""
        reference = Reference("spacing.small")
        assert reference.to_alias() == "{spacing.small}"
        assert str(reference) == "{spacing.small}"
        assert Reference.from_alias("{spacing.small}") == reference

    @pytest.mark.parametrize("text", ["spacing.small", "{spacing.small", "{}", 42])
    def test_from_alias_rejects_non_alias(self, text):
        """Only "{path}" strings are aliases."""
        with pytest.raises(PathValidationError):
            Reference.from_alias(text)


class TestPredicates:
    """Test the module level helpers."""

    def test_is_reference(self):
        """Only Reference instances are references; alias strings are not."""
        assert is_reference(Reference("a"))
        assert not is_reference("{a}")

    @pytest.mark.parametrize(
        "value, expected",
        [("{color.red}", True), ("color.red", False), ("{a}{b}", False), (None, False)],
    )
    def test_is_alias_string(self, value, expected):
        """Alias strings are a single brace-wrapped path."""
        assert is_alias_string(value) is expected
