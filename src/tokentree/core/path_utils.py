"""
Path utilities for tokentree.

Token and group paths are the names of a node's ancestors below the document
root, joined with a dot (e.g. "color.brand.primary"). This module provides
the splitting, joining and validation helpers used by nodes, references and
the DTCG loader.
"""

from collections.abc import Iterable

from tokentree.exceptions import NameValidationError, PathValidationError

PATH_SEPARATOR = "."

# Characters DTCG reserves for alias syntax and path separation
RESERVED_NAME_CHARACTERS = frozenset({PATH_SEPARATOR, "{", "}"})


def split_path_segments(path: str) -> list[str]:
    """Split a path into its names; the empty path has no segments."""
    if not path:
        return []
    return path.split(PATH_SEPARATOR)


def join_path_segments(segments: Iterable[str]) -> str:
    """Join names into a path string."""
    return PATH_SEPARATOR.join(segments)


def validate_path_format(path: str) -> None:
    """
    Validate the basic shape of a token path.

    Params:
        path: Path string to validate

    Raises:
        PathValidationError: If the path is empty, not a string, or has empty
            segments (leading, trailing or doubled separators)
    """
    if not path or not isinstance(path, str):
        raise PathValidationError(path, "must be a non-empty string")

    for segment in path.split(PATH_SEPARATOR):
        if not segment:
            raise PathValidationError(path, "contains an empty segment")
        if "{" in segment or "}" in segment:
            raise PathValidationError(path, "must not contain curly braces")


def validate_node_name(name: str) -> None:
    """
    Validate a token or group name.

    Params:
        name: Name to validate

    Raises:
        NameValidationError: If the name is empty, starts with "$" or contains
            a reserved character
    """
    if not name or not isinstance(name, str):
        raise NameValidationError(name, "must be a non-empty string")

    if name.startswith("$"):
        raise NameValidationError(name, "names starting with '$' are reserved")

    reserved = sorted(RESERVED_NAME_CHARACTERS.intersection(name))
    if reserved:
        raise NameValidationError(
            name, f"must not contain {', '.join(repr(c) for c in reserved)}"
        )
