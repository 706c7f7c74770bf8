"""
DTCG interchange format support.

Serialization of token trees to Design Tokens Community Group JSON, and a
loader building trees from it.
"""

from tokentree.dtcg.config import SerializerConfig
from tokentree.dtcg.parser import load_dtcg_json, parse_dtcg_document
from tokentree.dtcg.serializer import (
    dump_dtcg_json,
    serialize_common_props,
    serialize_design_token,
    serialize_dtcg_file,
    serialize_group,
)
from tokentree.dtcg.values import parse_value, serialize_value

__all__ = [
    "SerializerConfig",
    "serialize_common_props",
    "serialize_design_token",
    "serialize_group",
    "serialize_dtcg_file",
    "dump_dtcg_json",
    "serialize_value",
    "parse_value",
    "parse_dtcg_document",
    "load_dtcg_json",
]
