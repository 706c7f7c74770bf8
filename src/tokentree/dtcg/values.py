"""
Conversion of token values to and from their DTCG `$value` form.

References are written in alias syntax ("{group.token}"). Composite values
write their own DTCG shape; plain JSON values are copied as they are.
"""

import copy
import logging
from collections.abc import Callable
from typing import Any

from tokentree.core.types import JsonValue, TokenType
from tokentree.structure.reference import Reference
from tokentree.values import ColorValue, CompositeValue

logger = logging.getLogger(__name__)


def _serialize_json(value: Any) -> JsonValue:
    if isinstance(value, CompositeValue):
        return value.to_dtcg()
    if isinstance(value, (list, tuple)):
        return [_serialize_json(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize_json(item) for key, item in value.items()}
    return value


def _serialize_color(value: Any) -> JsonValue:
    # Colors may also be kept as plain strings such as "#ff0000"
    if isinstance(value, ColorValue):
        return value.to_dtcg()
    return _serialize_json(value)


_VALUE_SERIALIZERS: dict[TokenType, Callable[[Any], JsonValue]] = {
    TokenType.COLOR: _serialize_color,
}


def serialize_value(
    value_or_reference: Any, resolved_type: TokenType | None
) -> JsonValue:
    """
    Convert a token's value or reference to its DTCG `$value`.

    Params:
        value_or_reference: The token's unresolved value
        resolved_type: The token's resolved type (unused for references)

    Returns:
        Alias string for references, otherwise a JSON-compatible value
    """
    if isinstance(value_or_reference, Reference):
        return value_or_reference.to_alias()
    serializer = _VALUE_SERIALIZERS.get(resolved_type, _serialize_json)
    return serializer(value_or_reference)


def parse_value(raw: JsonValue, token_type: TokenType | None) -> Any:
    """
    Convert a raw DTCG `$value` into a token value, given the token's type.

    Params:
        raw: Value as read from the document (not an alias)
        token_type: The declared or inherited type of the token, if any

    Returns:
        A ColorValue for sRGB color objects of color tokens, otherwise a copy
        of the raw value
    """
    if token_type is TokenType.COLOR and isinstance(raw, dict):
        if ColorValue.is_dtcg_color(raw):
            return ColorValue.from_dtcg(raw)
        logger.warning(f"Keeping unsupported color object as plain object: {raw!r}")
    return copy.deepcopy(raw)
