"""
DTCG serializer.

Walks a token tree depth-first and produces the DTCG JSON shape. Only the
model's public read accessors are used; the tree is never modified. Aliases
are written as aliases rather than flattened.
"""

import copy
import json
from typing import Any

from tokentree.core.node import TomNode
from tokentree.dtcg.config import SerializerConfig
from tokentree.dtcg.values import serialize_value
from tokentree.structure import DesignToken, Group, Reference, RootGroup, is_design_token
from tokentree.values import is_composite_value


def serialize_common_props(node: TomNode, config: SerializerConfig) -> dict[str, Any]:
    """Emit the properties tokens and groups share; unset ones are omitted."""
    output: dict[str, Any] = {}
    if node.get_type() is not None:
        output["$type"] = node.get_type().value
    if config.include_descriptions and node.get_description() is not None:
        output["$description"] = node.get_description()
    return output


def serialize_design_token(token: DesignToken, config: SerializerConfig) -> dict[str, Any]:
    """
    Serialize a single token.

    Params:
        token: Token to serialize; its value must not be pending
        config: Serializer options

    Returns:
        Mapping with "$type", "$description", "$value" and "$extensions" as present

    Raises:
        PendingValueError: If the token's deferred value has not been resolved
    """
    output = serialize_common_props(token, config)

    value = token.get_value()
    resolved_type = None if isinstance(value, Reference) else token.get_resolved_type()
    if "$type" not in output and _needs_value_type(token, value):
        # A composite's type is not recoverable from its DTCG object alone
        output = {"$type": value.value_type.value, **output}
    output["$value"] = serialize_value(value, resolved_type)

    if config.include_extensions and token.has_extensions():
        output["$extensions"] = {
            key: copy.deepcopy(extension) for key, extension in token.extensions()
        }
    return output


def _needs_value_type(token: DesignToken, value: Any) -> bool:
    if not is_composite_value(value):
        return False
    parent = token.get_parent()
    return parent is None or parent.get_inherited_type() is None


def serialize_group(group: Group, config: SerializerConfig) -> dict[str, Any]:
    output = serialize_common_props(group, config)

    for child in group:
        if is_design_token(child):
            output[child.get_name()] = serialize_design_token(child, config)
        else:
            output[child.get_name()] = serialize_group(child, config)

    return output


def serialize_dtcg_file(
    file: RootGroup, config: SerializerConfig | None = None
) -> dict[str, Any]:
    """
    Serialize a whole document.

    Params:
        file: Root of the document
        config: Serializer options, defaults used when omitted

    Returns:
        The document as a JSON-compatible dict, children in insertion order
    """
    return serialize_group(file, config or SerializerConfig())


def dump_dtcg_json(file: RootGroup, config: SerializerConfig | None = None) -> str:
    """Serialize a document to DTCG JSON text."""
    config = config or SerializerConfig()
    return json.dumps(
        serialize_dtcg_file(file, config),
        indent=config.indent,
        sort_keys=config.sort_keys,
    )
