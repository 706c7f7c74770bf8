"""
Tests for loading DTCG documents.

Focus Areas:
1. Building trees in document order with aliases as references
2. Type-driven value interpretation through inherited types
3. Tolerance for unknown properties, rejection of malformed documents
"""

import json
import logging

import pytest

from tokentree.core.types import TokenType
from tokentree.dtcg import dump_dtcg_json, load_dtcg_json, parse_dtcg_document, serialize_dtcg_file
from tokentree.exceptions import DtcgFormatError, NameValidationError, PathValidationError
from tokentree.structure import DesignToken, Reference, RootGroup, is_group
from tokentree.values import ColorValue

SRGB_RED = {"colorSpace": "srgb", "components": [1, 0, 0]}


class TestLoading:
    """Test tree construction from DTCG data."""

    def test_round_trip(self, document):
        """Loading serialized output reproduces the same document."""
        loaded = load_dtcg_json(dump_dtcg_json(document), "foo.tokens.json")
        assert loaded.get_name() == "foo.tokens.json"
        assert serialize_dtcg_file(loaded) == serialize_dtcg_file(document)

    def test_round_trip_untyped_color(self):
        """A color token outside any typed group reloads as a color."""
        root = RootGroup("tokens.json")
        root.add_child(DesignToken("red", ColorValue(channels=(1, 0, 0), alpha=0.5)))

        loaded = load_dtcg_json(dump_dtcg_json(root), "tokens.json")
        red = loaded.get_child("red")
        assert red.get_resolved_type() is TokenType.COLOR
        assert red.get_value() == ColorValue(channels=(1, 0, 0), alpha=0.5)
        assert serialize_dtcg_file(loaded) == serialize_dtcg_file(root)

    def test_structure_and_order(self):
        """Groups and tokens appear in document order."""
        root = parse_dtcg_document(
            {
                "spacing": {
                    "$description": "Spacing scale",
                    "large": {"$value": 16},
                    "small": {"$value": 4},
                },
                "radius": {"$value": 2, "$type": "number"},
            },
            "tokens.json",
        )
        assert root.child_names() == ["spacing", "radius"]
        spacing = root.get_child("spacing")
        assert is_group(spacing)
        assert spacing.get_description() == "Spacing scale"
        assert spacing.child_names() == ["large", "small"]
        assert root.get_child("radius").get_type() is TokenType.NUMBER

    def test_aliases_become_references(self):
        """Alias strings are stored as references and resolve after loading."""
        root = parse_dtcg_document(
            {"base": {"$value": 4}, "gap": {"$value": "{base}"}}, "tokens.json"
        )
        gap = root.get_child("gap")
        assert gap.get_value() == Reference("base")
        assert gap.get_value(resolve=True) == 4

    def test_large_integer(self):
        """Integers too large for a float still load as numbers."""
        digits = "9" * 400
        root = load_dtcg_json(f'{{"big": {{"$value": {digits}}}}}', "tokens.json")
        big = root.get_child("big")
        assert big.get_value() == int(digits)
        assert big.get_resolved_type() is TokenType.NUMBER

    def test_forward_references(self):
        """An alias may point at a token defined later in the document."""
        root = parse_dtcg_document(
            {"gap": {"$value": "{spacing.base}"}, "spacing": {"base": {"$value": 4}}},
            "tokens.json",
        )
        assert root.get_child("gap").get_value(resolve=True) == 4

    def test_root_properties(self):
        """Document level $type and $description land on the root."""
        root = parse_dtcg_document(
            {"$type": "dimension", "$description": "Sizes", "gap": {"$value": "4px"}},
            "tokens.json",
        )
        assert root.get_type() is TokenType.DIMENSION
        assert root.get_description() == "Sizes"
        assert root.get_child("gap").get_resolved_type() is TokenType.DIMENSION

    def test_extensions_are_loaded(self):
        """$extensions entries are kept on the token."""
        data = {"gap": {"$value": 4, "$extensions": {"com.example.tags": ["layout"]}}}
        root = parse_dtcg_document(data, "tokens.json")
        gap = root.get_child("gap")
        assert gap.get_extension("com.example.tags") == ["layout"]

        data["gap"]["$extensions"]["com.example.tags"].append("changed")
        assert gap.get_extension("com.example.tags") == ["layout"]

    def test_loaded_types_are_kept_as_declared(self):
        """Declared types are not overwritten by the loader even if values differ."""
        root = parse_dtcg_document(
            {"gap": {"$type": "dimension", "$value": "4px"}}, "tokens.json"
        )
        gap = root.get_child("gap")
        assert gap.get_type() is TokenType.DIMENSION
        assert not gap.is_valid()


class TestColorValues:
    """Test interpretation of color objects."""

    def test_color_object_in_typed_group(self):
        """An untyped token inherits the group's color type and gets a ColorValue."""
        root = parse_dtcg_document(
            {"color": {"$type": "color", "red": {"$value": SRGB_RED}}}, "tokens.json"
        )
        red = root.get_node_by_path("color.red")
        assert red.get_type() is None
        assert red.get_value() == ColorValue(channels=(1, 0, 0))
        assert red.get_value().get_parent() is red

    def test_color_object_with_own_type(self):
        """A token declaring the color type gets a ColorValue too."""
        root = parse_dtcg_document(
            {"red": {"$type": "color", "$value": {**SRGB_RED, "alpha": 0.5}}}, "tokens.json"
        )
        assert root.get_child("red").get_value() == ColorValue(channels=(1, 0, 0), alpha=0.5)

    def test_untyped_object_stays_plain(self):
        """Without a color type the object is kept as a plain value."""
        root = parse_dtcg_document({"red": {"$value": SRGB_RED}}, "tokens.json")
        red = root.get_child("red")
        assert red.get_value() == SRGB_RED
        assert red.get_resolved_type() is TokenType.OBJECT

    def test_hex_string_color(self):
        """Hex strings are kept as strings and written back unchanged."""
        data = {"color": {"$type": "color", "red": {"$value": "#ff0000"}}}
        root = parse_dtcg_document(data, "tokens.json")
        assert root.get_node_by_path("color.red").get_value() == "#ff0000"
        assert serialize_dtcg_file(root) == data

    def test_unsupported_color_space_is_kept_with_warning(self, caplog):
        """Colors outside sRGB are kept as plain objects and logged."""
        raw = {"colorSpace": "display-p3", "components": [1, 0, 0]}
        with caplog.at_level(logging.WARNING, logger="tokentree.dtcg.values"):
            root = parse_dtcg_document(
                {"red": {"$type": "color", "$value": raw}}, "tokens.json"
            )
        assert root.get_child("red").get_value() == raw
        assert "display-p3" in caplog.text


class TestUnknownProperties:
    """Test that unknown $-properties are ignored with a warning."""

    def test_unknown_group_property(self, caplog):
        """Unknown group properties are skipped."""
        with caplog.at_level(logging.WARNING, logger="tokentree.dtcg.parser"):
            root = parse_dtcg_document(
                {"spacing": {"$deprecated": True, "small": {"$value": 4}}}, "tokens.json"
            )
        assert root.get_child("spacing").child_names() == ["small"]
        assert "$deprecated" in caplog.text
        assert "spacing" in caplog.text

    def test_unknown_token_property(self, caplog):
        """Unknown token properties are skipped."""
        with caplog.at_level(logging.WARNING, logger="tokentree.dtcg.parser"):
            root = parse_dtcg_document(
                {"gap": {"$value": 4, "$deprecated": True}}, "tokens.json"
            )
        assert serialize_dtcg_file(root) == {"gap": {"$value": 4}}
        assert "'$deprecated' at 'gap'" in caplog.text


class TestMalformedDocuments:
    """Test that invalid documents are rejected."""

    @pytest.mark.parametrize(
        "data",
        [
            [1, 2],
            {"gap": 4},
            {"gap": {"$value": 4, "$type": "size"}},
            {"gap": {"$value": 4, "$type": ["number"]}},
            {"gap": {"$value": "{spacing..small}"}},
            {"gap": {"$value": 4, "$description": 12}},
            {"gap": {"$value": 4, "$extensions": ["a"]}},
        ],
    )
    def test_format_errors(self, data):
        """Structural problems raise DtcgFormatError."""
        with pytest.raises(DtcgFormatError):
            parse_dtcg_document(data, "tokens.json")

    def test_error_reports_path(self):
        """The offending path is part of the error."""
        with pytest.raises(DtcgFormatError) as exc_info:
            parse_dtcg_document({"spacing": {"small": {"$value": 4, "$type": "size"}}}, "t.json")
        assert exc_info.value.path == "spacing.small"

    def test_malformed_alias_keeps_cause(self):
        """The path validation failure is chained to the format error."""
        with pytest.raises(DtcgFormatError) as exc_info:
            parse_dtcg_document({"gap": {"$value": "{spacing..small}"}}, "t.json")
        assert exc_info.value.path == "gap"
        assert isinstance(exc_info.value.__cause__, PathValidationError)

    def test_invalid_json(self):
        """Unparseable text is a format error at document level."""
        with pytest.raises(DtcgFormatError) as exc_info:
            load_dtcg_json("{not json", "tokens.json")
        assert exc_info.value.path == ""

    def test_invalid_name(self):
        """Names containing the path separator are rejected."""
        with pytest.raises(NameValidationError):
            load_dtcg_json(json.dumps({"a.b": {"$value": 1}}), "tokens.json")
