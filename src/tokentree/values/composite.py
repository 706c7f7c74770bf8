"""
Base class for structured token values.

A composite value is owned by at most one design token at a time. The token
assigns itself as the composite's parent when it takes the value and clears
that link when the value is replaced, so references that live inside a
composite resolve relative to the owning token's position in the tree.
"""

from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, PrivateAttr

from tokentree.core.node import NodeWithParent
from tokentree.core.types import JsonValue, TokenType
from tokentree.exceptions import PathNotFoundError

if TYPE_CHECKING:
    from tokentree.structure.reference import Reference


class CompositeValue(BaseModel, NodeWithParent):
    """Structured value that tracks the token owning it."""

    model_config = ConfigDict(validate_assignment=True, allow_inf_nan=False)

    value_type: ClassVar[TokenType]

    _parent: Any = PrivateAttr(default=None)

    def to_dtcg(self) -> JsonValue:
        """Return the DTCG `$value` representation of this value."""
        raise NotImplementedError

    def resolve_referenced_value(self, reference: "Reference") -> Any:
        """
        Resolve a reference held inside this value from the owning token.

        Params:
            reference: Reference to another token in the same document

        Returns:
            The referenced token's fully resolved value

        Raises:
            PathNotFoundError: If this value is not owned by a token
        """
        if self._parent is None:
            raise PathNotFoundError(
                reference.get_path(), "composite value is not owned by a token"
            )
        return self._parent.resolve_referenced_value(reference)

    def __eq__(self, other: object) -> bool:
        # Ownership is not part of a value's identity
        if not isinstance(other, CompositeValue):
            return NotImplemented
        return type(self) is type(other) and self.model_dump() == other.model_dump()


def is_composite_value(value: Any) -> bool:
    return isinstance(value, CompositeValue)
