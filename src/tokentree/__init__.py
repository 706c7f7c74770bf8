"""
tokentree - A Tree Object Model for design tokens

tokentree provides a typed, reference-aware in-memory representation of
design token documents and serializes them to the DTCG JSON format.
"""

from importlib.metadata import version

from tokentree.core.types import TokenType
from tokentree.dtcg import dump_dtcg_json, load_dtcg_json, serialize_dtcg_file
from tokentree.structure import (
    DesignToken,
    Group,
    Reference,
    RootGroup,
    SetValueStrategy,
)
from tokentree.values import ColorValue

__version__ = version("tokentree")

__all__ = [
    "__version__",
    "DesignToken",
    "Group",
    "RootGroup",
    "Reference",
    "SetValueStrategy",
    "TokenType",
    "ColorValue",
    "serialize_dtcg_file",
    "dump_dtcg_json",
    "load_dtcg_json",
]
