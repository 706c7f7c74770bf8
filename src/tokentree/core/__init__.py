"""
Core tokentree components.

This package provides the fundamental building blocks for the token tree:
node identity and parent tracking, path helpers and type definitions.
"""

from tokentree.core.node import NodeWithParent, TomNode, assign_parent, clear_parent
from tokentree.core.path_utils import (
    PATH_SEPARATOR,
    join_path_segments,
    split_path_segments,
    validate_node_name,
    validate_path_format,
)
from tokentree.core.types import (
    UNSUPPORTED_TYPE,
    JsonValue,
    TokenType,
    UnsupportedType,
    coerce_token_type,
)

__all__ = [
    "NodeWithParent",
    "TomNode",
    "assign_parent",
    "clear_parent",
    "PATH_SEPARATOR",
    "join_path_segments",
    "split_path_segments",
    "validate_node_name",
    "validate_path_format",
    "TokenType",
    "UnsupportedType",
    "UNSUPPORTED_TYPE",
    "JsonValue",
    "coerce_token_type",
]
