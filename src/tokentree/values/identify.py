"""
Structural type identification for token values.

Classification is total: every Python object maps either to one of the
supported categories or to UNSUPPORTED_TYPE, so callers decide how to react
instead of catching errors from deep inside the value.
"""

import math
from typing import Any

from tokentree.core.types import UNSUPPORTED_TYPE, TokenType, UnsupportedType
from tokentree.values.composite import CompositeValue


def identify_json_type(value: Any) -> TokenType | UnsupportedType:
    """
    Classify a value into one of the generic JSON categories.

    Params:
        value: Any Python object

    Returns:
        STRING, NUMBER, BOOLEAN, ARRAY, OBJECT or NULL, or UNSUPPORTED_TYPE when
        the value (or anything nested inside it) is not representable as JSON

    Examples:
        "#ff0000" -> TokenType.STRING
        [1, "a"] -> TokenType.ARRAY
        float("nan") -> UNSUPPORTED_TYPE
        {1: "a"} -> UNSUPPORTED_TYPE  (object keys must be strings)
    """
    if value is None:
        return TokenType.NULL

    # bool is a subclass of int, so it must be tested first
    if isinstance(value, bool):
        return TokenType.BOOLEAN

    if isinstance(value, str):
        return TokenType.STRING

    if isinstance(value, float):
        return TokenType.NUMBER if math.isfinite(value) else UNSUPPORTED_TYPE

    # ints are exact, however large
    if isinstance(value, int):
        return TokenType.NUMBER

    if isinstance(value, (list, tuple)):
        if all(is_json_value(item) for item in value):
            return TokenType.ARRAY
        return UNSUPPORTED_TYPE

    if isinstance(value, dict):
        if all(
            isinstance(key, str) and is_json_value(item) for key, item in value.items()
        ):
            return TokenType.OBJECT
        return UNSUPPORTED_TYPE

    return UNSUPPORTED_TYPE


def is_json_value(value: Any) -> bool:
    return identify_json_type(value) is not UNSUPPORTED_TYPE


def identify_type(value: Any) -> TokenType | UnsupportedType:
    """
    Classify a concrete token value, composite values included.

    Params:
        value: A JSON value or a CompositeValue

    Returns:
        The composite's own value type, the JSON category, or UNSUPPORTED_TYPE
    """
    if isinstance(value, CompositeValue):
        return value.value_type
    return identify_json_type(value)
