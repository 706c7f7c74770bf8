"""
DTCG loader.

Builds a token tree from a DTCG document. Alias strings become references.
Other values are handed to tokens as deferred values, so that a token's raw
`$value` is interpreted only once the token knows its effective type; an sRGB
color object inside a `color` group becomes a ColorValue even when the token
itself declares no type.
"""

import copy
import json
import logging
from typing import Any

from tokentree.core.path_utils import join_path_segments
from tokentree.core.types import JsonValue, TokenType
from tokentree.dtcg.values import parse_value
from tokentree.exceptions import DtcgFormatError, PathValidationError
from tokentree.structure import (
    DeferredValue,
    DesignToken,
    Group,
    Reference,
    RootGroup,
    SetValueStrategy,
    is_alias_string,
)

logger = logging.getLogger(__name__)

_GROUP_PROPERTIES = frozenset({"$type", "$description"})
_TOKEN_PROPERTIES = frozenset({"$type", "$description", "$value", "$extensions"})
_TYPE_NAMES = frozenset(token_type.value for token_type in TokenType)


def parse_dtcg_document(data: dict[str, Any], name: str) -> RootGroup:
    """
    Build a token tree from a parsed DTCG document.

    Params:
        data: The document as decoded from JSON
        name: Name identifying the document, e.g. its file name

    Returns:
        RootGroup holding the document's groups and tokens in document order

    Raises:
        DtcgFormatError: If the document's structure is not valid DTCG
        NameValidationError: If a group or token name is not allowed
    """
    if not isinstance(data, dict):
        raise DtcgFormatError("", "document must be a JSON object")

    root = RootGroup(
        name,
        description=_parse_description(data, []),
        type=_parse_type(data, []),
    )
    _populate_group(root, data, [])
    return root


def load_dtcg_json(text: str, name: str) -> RootGroup:
    """
    Build a token tree from DTCG JSON text.

    Params:
        text: JSON text of the document
        name: Name identifying the document

    Returns:
        RootGroup of the loaded document

    Raises:
        DtcgFormatError: If the text is not valid JSON or not valid DTCG
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DtcgFormatError("", f"invalid JSON: {e}") from e
    return parse_dtcg_document(data, name)


def _populate_group(group: Group, data: dict[str, Any], path: list[str]) -> None:
    for key, item in data.items():
        if key.startswith("$"):
            if key not in _GROUP_PROPERTIES:
                logger.warning(
                    f"Ignoring unknown group property '{key}' at '{join_path_segments(path)}'"
                )
            continue

        child_path = path + [key]
        if not isinstance(item, dict):
            raise DtcgFormatError(
                join_path_segments(child_path), "expected a token or group object"
            )

        if "$value" in item:
            group.add_child(_parse_token(key, item, child_path))
        else:
            child = Group(
                key,
                description=_parse_description(item, child_path),
                type=_parse_type(item, child_path),
            )
            # Attach before populating so descendants see inherited types
            group.add_child(child)
            _populate_group(child, item, child_path)


def _parse_token(name: str, item: dict[str, Any], path: list[str]) -> DesignToken:
    for key in item:
        if key not in _TOKEN_PROPERTIES:
            logger.warning(
                f"Ignoring unknown token property '{key}' at '{join_path_segments(path)}'"
            )

    raw = item["$value"]
    if is_alias_string(raw):
        value: Reference | DeferredValue = _parse_alias(raw, path)
    else:
        value = _deferred_value(raw)

    token = DesignToken(
        name,
        value,
        description=_parse_description(item, path),
        type=_parse_type(item, path),
        strategy=SetValueStrategy.NO_CHECK,
    )

    extensions = item.get("$extensions")
    if extensions is not None:
        if not isinstance(extensions, dict):
            raise DtcgFormatError(join_path_segments(path), "$extensions must be an object")
        for key, extension in extensions.items():
            token.set_extension(key, copy.deepcopy(extension))

    return token


def _deferred_value(raw: JsonValue) -> DeferredValue:
    def compute(own_or_inherited_type: TokenType | None) -> Any:
        return parse_value(raw, own_or_inherited_type)

    return compute


def _parse_alias(raw: str, path: list[str]) -> Reference:
    try:
        return Reference.from_alias(raw)
    except PathValidationError as e:
        raise DtcgFormatError(join_path_segments(path), f"malformed alias {raw!r}") from e


def _parse_type(item: dict[str, Any], path: list[str]) -> TokenType | None:
    raw = item.get("$type")
    if raw is None:
        return None
    if not isinstance(raw, str) or raw not in _TYPE_NAMES:
        raise DtcgFormatError(join_path_segments(path), f"unknown $type {raw!r}")
    return TokenType(raw)


def _parse_description(item: dict[str, Any], path: list[str]) -> str | None:
    description = item.get("$description")
    if description is not None and not isinstance(description, str):
        raise DtcgFormatError(join_path_segments(path), "$description must be a string")
    return description
