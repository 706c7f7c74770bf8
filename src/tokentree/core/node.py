"""
Core node classes for tokentree.

This module contains the parent-tracking mixin shared by tree nodes and
composite values, and the TomNode base class that every token and group
derives from. Parent links are non-owning back-references: the owning group
(or token, for composite values) sets and clears them through
`assign_parent` / `clear_parent`, never node code itself.
"""

from typing import Any, Optional

from tokentree.core.path_utils import join_path_segments, validate_node_name
from tokentree.core.types import TokenType, coerce_token_type


class NodeWithParent:
    """Mixin for objects that know which node currently owns them."""

    def get_parent(self) -> Any:
        return self._parent

    def has_parent(self) -> bool:
        return self._parent is not None

    def _on_parent_assigned(self) -> None:
        """Hook invoked right after a parent has been assigned."""
        pass


def assign_parent(child: NodeWithParent, parent: Any) -> None:
    """
    Point a child's back-reference at its new owner.

    Params:
        child: Node or composite value being attached
        parent: The group (or token) that now owns the child
    """
    child._parent = parent
    child._on_parent_assigned()


def clear_parent(child: NodeWithParent) -> None:
    """Drop a child's back-reference to its owner."""
    child._parent = None


class TomNode(NodeWithParent):
    """
    Base class for everything placed in a token tree.

    A node has a name that is unique among its siblings, an optional
    description and an optional declared type. Its path is derived on demand
    from the chain of parents rather than stored.
    """

    # Overridden by RootGroup; the document root contributes no path segment
    _is_document_root = False

    def __init__(
        self,
        name: str,
        *,
        description: str | None = None,
        type: TokenType | str | None = None,
    ):
        if not self._is_document_root:
            validate_node_name(name)
        self._name = name
        self._description = description
        self._type = coerce_token_type(type)
        self._parent: Optional["TomNode"] = None

    def get_name(self) -> str:
        return self._name

    def get_description(self) -> str | None:
        return self._description

    def set_description(self, description: str | None) -> None:
        self._description = description

    def get_type(self) -> TokenType | None:
        """Return the type declared on this node itself, if any."""
        return self._type

    def set_type(self, type: TokenType | str | None) -> None:
        """
        Declare (or clear) this node's own type.

        Params:
            type: A TokenType, its string value, or None to clear it

        Raises:
            UnsupportedTypeError: If a string names no known token type
        """
        self._type = coerce_token_type(type)

    def get_path_segments(self) -> list[str]:
        """
        Compute the names from the document root down to this node.

        The RootGroup itself contributes no segment. A node that is not part
        of a document starts its path with the name of its topmost ancestor.

        Returns:
            Ordered list of names, empty for the root
        """
        segments = []
        node: TomNode | None = self
        while node is not None and not node._is_document_root:
            segments.append(node.get_name())
            node = node.get_parent()
        segments.reverse()
        return segments

    def get_path(self) -> str:
        """Return this node's dot-separated path."""
        return join_path_segments(self.get_path_segments())

    def get_root(self) -> "TomNode":
        """Return the topmost ancestor (the node itself when detached)."""
        node = self
        while node.has_parent():
            node = node.get_parent()
        return node

    def is_attached(self) -> bool:
        """Check whether this node is part of a document rooted at a RootGroup."""
        return self.get_root()._is_document_root

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, path={self.get_path()!r})"
