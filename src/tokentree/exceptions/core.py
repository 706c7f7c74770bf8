"""
Exception classes for the tokentree object model.

This module defines specific exception types for the error conditions that
can occur while building, editing, resolving and serializing a design token
tree. None of them are caught by the model itself; callers decide whether
to retry with different input, skip the node, or abort.
"""

from typing import Any


class TokenTreeError(Exception):
    """Base exception for all tokentree errors."""

    pass


class PendingValueError(TokenTreeError):
    """Raised when reading a token whose deferred value has not resolved yet."""

    def __init__(self, token_name: str):
        """
        Initialize the exception.

        Params:
            token_name: Name of the token that still holds a deferred value
        """
        self.token_name = token_name
        super().__init__(
            f"Token '{token_name}' has a pending value; attach it to a group first"
        )


class TypeMismatchError(TokenTreeError):
    """Raised when a value is rejected because its type differs from the token's."""

    def __init__(self, token_name: str, expected: Any, actual: Any):
        """
        Initialize the exception.

        Params:
            token_name: Name of the token that rejected the value
            expected: The token's current resolved type
            actual: The type of the rejected value or reference
        """
        self.token_name = token_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"New value for token '{token_name}' has type '{_type_label(actual)}' "
            f"which does not match the token's type '{_type_label(expected)}'"
        )


class UnsupportedTypeError(TokenTreeError):
    """Raised when a value's shape matches none of the supported categories."""

    def __init__(self, value: Any, reason: str = "unsupported value"):
        """
        Initialize the exception.

        Params:
            value: The offending value (or type name)
            reason: Why the value cannot be classified
        """
        self.value = value
        self.reason = reason
        super().__init__(
            f"{reason}: {value!r} (Python type is {type(value).__name__})"
        )


class NotATokenError(TokenTreeError):
    """Raised when a reference resolves to a node that is not a design token."""

    def __init__(self, path: str):
        """
        Initialize the exception.

        Params:
            path: Path of the node the reference pointed at
        """
        self.path = path
        super().__init__(f"Node at '{path}' is not a design token")


class PathNotFoundError(TokenTreeError):
    """Raised when a path does not resolve to any node."""

    def __init__(self, path: str, reason: str = "no such node"):
        """
        Initialize the exception.

        Params:
            path: The path that failed to resolve
            reason: Why the lookup failed
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve path '{path}': {reason}")


class CyclicReferenceError(TokenTreeError):
    """Raised when an alias chain revisits a token already on the chain."""

    def __init__(self, chain: list[str]):
        """
        Initialize the exception.

        Params:
            chain: Paths visited in order, ending with the revisited path
        """
        self.chain = list(chain)
        super().__init__(f"Cyclic reference: {' -> '.join(self.chain)}")


class PathValidationError(TokenTreeError):
    """Raised when path validation fails."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The invalid path
            reason: Why the path is invalid
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid path '{path}': {reason}")


class NameValidationError(TokenTreeError):
    """Raised when a token or group name is not allowed."""

    def __init__(self, name: str, reason: str):
        """
        Initialize the exception.

        Params:
            name: The invalid name
            reason: Why the name is invalid
        """
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid node name '{name}': {reason}")


class DuplicateChildError(TokenTreeError):
    """Raised when attempting to add a child whose name is already taken."""

    def __init__(self, group_name: str, child_name: str):
        """
        Initialize the exception.

        Params:
            group_name: Name of the group that already has such a child
            child_name: The conflicting child name
        """
        self.group_name = group_name
        self.child_name = child_name
        super().__init__(
            f"Group '{group_name}' already has a child named '{child_name}'"
        )


class InvalidParentError(TokenTreeError):
    """Raised when a node cannot be attached to the requested parent."""

    def __init__(self, node_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            node_name: Name of the node being attached
            reason: Why the attachment is not allowed
        """
        self.node_name = node_name
        self.reason = reason
        super().__init__(f"Cannot attach '{node_name}': {reason}")


class DtcgFormatError(TokenTreeError):
    """Raised when a DTCG document cannot be loaded into a tree."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: Location within the document (dot-separated, empty for the root)
            reason: What is wrong with the input at that location
        """
        self.path = path
        self.reason = reason
        location = path or "<document>"
        super().__init__(f"Malformed DTCG input at '{location}': {reason}")


def _type_label(token_type: Any) -> str:
    return getattr(token_type, "value", str(token_type))
