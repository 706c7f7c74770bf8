"""
Core type definitions for tokentree.

This module contains the token type enumeration, the sentinel used for
values that cannot be classified, and the type aliases shared across
the object model.
"""

from enum import Enum

from tokentree.exceptions import UnsupportedTypeError

JsonValue = str | int | float | bool | list | dict | None


class TokenType(str, Enum):
    """Types a design token or group can declare or resolve to."""

    # Generic JSON categories, used for structural inference
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"

    # DTCG token types
    COLOR = "color"
    DIMENSION = "dimension"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    STROKE_STYLE = "strokeStyle"
    BORDER = "border"
    TRANSITION = "transition"
    SHADOW = "shadow"
    GRADIENT = "gradient"
    TYPOGRAPHY = "typography"


class UnsupportedType(Enum):
    """Marker for values whose shape matches no supported category."""

    UNSUPPORTED = "unsupported"


UNSUPPORTED_TYPE = UnsupportedType.UNSUPPORTED


def coerce_token_type(token_type: "TokenType | str | None") -> TokenType | None:
    """
    Normalize a declared type to a TokenType.

    Params:
        token_type: A TokenType, its string value (e.g. "fontFamily"), or None

    Returns:
        The matching TokenType, or None when no type was given

    Raises:
        UnsupportedTypeError: If the string names no known token type
    """
    if token_type is None or isinstance(token_type, TokenType):
        return token_type
    try:
        return TokenType(token_type)
    except ValueError as e:
        raise UnsupportedTypeError(token_type, "unknown token type") from e
