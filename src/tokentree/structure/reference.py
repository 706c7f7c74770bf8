"""
References (aliases) between design tokens.

A Reference is an immutable, validated path to another token in the same
document. It is carried as a token's payload and resolved on read; it never
caches what it points at.
"""

import re
from collections.abc import Iterable
from typing import Any

from attrs import field, frozen

from tokentree.core.path_utils import (
    join_path_segments,
    split_path_segments,
    validate_path_format,
)
from tokentree.exceptions import PathValidationError

_ALIAS_PATTERN = re.compile(r"^\{([^{}]+)\}$")


def _validate_path(instance: Any, attribute: Any, path: str) -> None:
    validate_path_format(path)


@frozen
class Reference:
    """Path-based pointer to another token, e.g. Reference("color.brand.primary")."""

    path: str = field(validator=_validate_path)

    def get_path(self) -> str:
        return self.path

    def get_segments(self) -> list[str]:
        return split_path_segments(self.path)

    def to_alias(self) -> str:
        """Return the DTCG alias form, e.g. "{color.brand.primary}"."""
        return f"{{{self.path}}}"

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> "Reference":
        return cls(join_path_segments(segments))

    @classmethod
    def from_alias(cls, alias: str) -> "Reference":
        """
        Parse a DTCG alias string.

        Params:
            alias: String of the form "{group.token}"

        Returns:
            Reference to the aliased path

        Raises:
            PathValidationError: If the string is not in alias form
        """
        match = _ALIAS_PATTERN.match(alias) if isinstance(alias, str) else None
        if match is None:
            raise PathValidationError(alias, "not a '{path}' alias")
        return cls(match.group(1))

    def __str__(self) -> str:
        return self.to_alias()


def is_reference(value: Any) -> bool:
    return isinstance(value, Reference)


def is_alias_string(value: Any) -> bool:
    """Check whether a raw value is written in DTCG alias syntax."""
    return isinstance(value, str) and _ALIAS_PATTERN.match(value) is not None
