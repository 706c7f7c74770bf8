"""
Shared test fixtures and utilities for the tokentree test suite.
"""

import pytest

from tokentree import ColorValue, DesignToken, Group, RootGroup, TokenType


@pytest.fixture
def document():
    """Small document exercising typed groups, composites and aliases.

    Structure:
        color ($type: color)
            red      ColorValue(1, 0, 0)
            primary  -> {color.red}
        spacing
            small    4
            base     -> {spacing.small}

    Usage:
        def test_something(document):
            red = document.get_node_by_path("color.red")
    """
    root = RootGroup("foo.tokens.json")

    color = Group("color", type=TokenType.COLOR)
    root.add_child(color)
    color.add_child(DesignToken("red", ColorValue(channels=(1, 0, 0))))
    color.add_child(DesignToken("primary", color.get_child("red")))

    spacing = Group("spacing")
    root.add_child(spacing)
    spacing.add_child(DesignToken("small", 4))
    spacing.add_child(DesignToken("base", spacing.get_child("small")))

    return root
