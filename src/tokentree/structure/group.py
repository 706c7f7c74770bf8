"""
Groups and document roots.

Groups are ordered containers of uniquely named children (tokens or nested
groups). A group's declared type is inherited by descendant tokens that do
not declare one themselves. The RootGroup anchors a whole document and turns
paths back into nodes.
"""

import logging
from collections.abc import Iterator, Sequence

from tokentree.core.node import TomNode, assign_parent, clear_parent
from tokentree.core.path_utils import join_path_segments, split_path_segments
from tokentree.core.types import TokenType
from tokentree.exceptions import (
    DuplicateChildError,
    InvalidParentError,
    PathNotFoundError,
)
from tokentree.structure.reference import Reference
from tokentree.structure.token import DesignToken, is_design_token

logger = logging.getLogger(__name__)


def is_group(node: object) -> bool:
    return isinstance(node, Group)


class Group(TomNode):
    """
    Ordered, named container of tokens and nested groups.

    Iteration yields children in insertion order. Re-adding a child moves it
    to the end.
    """

    def __init__(
        self,
        name: str,
        *,
        description: str | None = None,
        type: TokenType | str | None = None,
    ):
        super().__init__(name, description=description, type=type)
        self._children: dict[str, TomNode] = {}

    def add_child(self, child: TomNode) -> None:
        """
        Attach a node as the last child of this group.

        A node that already has a parent is detached from it first, so it is
        never owned by two groups. If attaching fails while resolving the
        child's deferred value, the child is left detached.

        Params:
            child: Token or group to attach

        Raises:
            InvalidParentError: If the child is a RootGroup, this group itself,
                or one of this group's ancestors
            DuplicateChildError: If a different child already has the same name
        """
        name = child.get_name()
        if child._is_document_root:
            raise InvalidParentError(name, "a root group cannot be a child")
        if self._is_self_or_ancestor(child):
            raise InvalidParentError(
                name, f"it is '{self.get_name()}' or one of its ancestors"
            )

        existing = self._children.get(name)
        if existing is not None and existing is not child:
            raise DuplicateChildError(self.get_name(), name)

        if child.has_parent():
            child.get_parent()._detach(child)

        self._children[name] = child
        try:
            assign_parent(child, self)
        except Exception:
            del self._children[name]
            clear_parent(child)
            raise
        logger.debug(f"Attached '{name}' to '{self.get_path() or self.get_name()}'")

    def remove_child(self, child: TomNode | str) -> TomNode:
        """
        Detach a child from this group.

        The detached subtree stays intact and can be attached elsewhere.

        Params:
            child: The child node, or its name

        Returns:
            The detached node

        Raises:
            PathNotFoundError: If no such child exists in this group
        """
        name = child if isinstance(child, str) else child.get_name()
        existing = self._children.get(name)
        if existing is None or (not isinstance(child, str) and existing is not child):
            raise PathNotFoundError(
                join_path_segments(self.get_path_segments() + [name]),
                f"'{self.get_name()}' has no such child",
            )
        self._detach(existing)
        return existing

    def get_child(self, name: str) -> TomNode | None:
        return self._children.get(name)

    def has_child(self, name: str) -> bool:
        return name in self._children

    def child_names(self) -> list[str]:
        return list(self._children)

    def tokens(self) -> list[DesignToken]:
        """Direct children that are design tokens, in order."""
        return [child for child in self._children.values() if is_design_token(child)]

    def groups(self) -> list["Group"]:
        """Direct children that are groups, in order."""
        return [child for child in self._children.values() if is_group(child)]

    def walk(self) -> Iterator[TomNode]:
        """Yield all descendants depth-first, each group before its children."""
        for child in list(self._children.values()):
            yield child
            if is_group(child):
                yield from child.walk()

    def get_inherited_type(self) -> TokenType | None:
        """
        Return the type offered to descendant tokens without a declared type.

        Returns:
            This group's declared type, else the nearest ancestor's, else None
        """
        node: TomNode | None = self
        while node is not None:
            if node.get_type() is not None:
                return node.get_type()
            node = node.get_parent()
        return None

    def _detach(self, child: TomNode) -> None:
        del self._children[child.get_name()]
        clear_parent(child)
        logger.debug(f"Detached '{child.get_name()}' from '{self.get_path() or self.get_name()}'")

    def _is_self_or_ancestor(self, node: TomNode) -> bool:
        current: TomNode | None = self
        while current is not None:
            if current is node:
                return True
            current = current.get_parent()
        return False

    def __iter__(self) -> Iterator[TomNode]:
        return iter(list(self._children.values()))

    def __len__(self) -> int:
        return len(self._children)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._children
        if isinstance(item, TomNode):
            return self._children.get(item.get_name()) is item
        return False


class RootGroup(Group):
    """
    The root of a token document.

    Its name identifies the document (e.g. a file name such as
    "tokens.json") and is not part of any path. Paths are resolved by
    descending from the root through named children.
    """

    _is_document_root = True

    def get_node_by_path(self, path: str | Reference | Sequence[str]) -> TomNode:
        """
        Find the node a path points at.

        Params:
            path: Dot-separated path, Reference, or sequence of names; the
                empty path yields the root itself

        Returns:
            The node at that path

        Raises:
            PathNotFoundError: If a segment is missing, or an intermediate
                segment names a token rather than a group
        """
        if isinstance(path, Reference):
            segments = path.get_segments()
        elif isinstance(path, str):
            segments = split_path_segments(path)
        else:
            segments = list(path)
        full_path = join_path_segments(segments)

        node: TomNode = self
        for index, segment in enumerate(segments):
            if not is_group(node):
                raise PathNotFoundError(
                    full_path,
                    f"'{join_path_segments(segments[:index])}' is not a group",
                )
            child = node.get_child(segment)
            if child is None:
                raise PathNotFoundError(full_path, f"no node named '{segment}'")
            node = child
        return node
