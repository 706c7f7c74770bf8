"""
Reference resolution for tokentree.

Alias chains are followed iteratively through the document root's
path-to-node lookup. Every walk threads the list of paths it has visited,
seeded with the path of the token holding the reference, and fails fast with
CyclicReferenceError when a path comes round again.
"""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from tokentree.core.node import TomNode
from tokentree.core.types import TokenType
from tokentree.exceptions import CyclicReferenceError, NotATokenError, PathNotFoundError
from tokentree.structure.reference import Reference

if TYPE_CHECKING:
    from tokentree.structure.token import DesignToken


def iter_reference_chain(
    reference: Reference, origin: TomNode, seed_origin: bool = True
) -> Iterator["DesignToken"]:
    """
    Walk an alias chain, yielding each token it passes through.

    The walk ends after yielding the first token whose payload is not itself
    a reference.

    Params:
        reference: The reference to start from
        origin: The token holding the reference; resolution uses its document
        seed_origin: Count the origin as already visited, so a chain leading
            back to it is a cycle. Turn off when the origin merely asks for
            another token and does not hold the reference itself

    Yields:
        Design tokens along the chain, in order

    Raises:
        PathNotFoundError: If the origin is not part of a document, or a path
            on the chain does not exist
        NotATokenError: If a path on the chain names a group
        CyclicReferenceError: If the chain comes back to a visited token
    """
    from tokentree.structure.token import is_design_token

    root = origin.get_root()
    if not origin.is_attached():
        raise PathNotFoundError(
            reference.get_path(),
            f"'{origin.get_name()}' is not part of a document",
        )

    visited = [origin.get_path()] if seed_origin else []
    current = reference
    while True:
        path = current.get_path()
        if path in visited:
            raise CyclicReferenceError(visited + [path])
        visited.append(path)

        node = root.get_node_by_path(path)
        if not is_design_token(node):
            raise NotATokenError(path)

        yield node

        if not node.is_alias():
            return
        current = node.get_value()


def resolve_reference_token(
    reference: Reference, origin: TomNode, seed_origin: bool = True
) -> "DesignToken":
    """Return the token at the end of an alias chain."""
    token = None
    for token in iter_reference_chain(reference, origin, seed_origin):
        pass
    return token


def chain_type(tokens: Iterable["DesignToken"]) -> TokenType:
    """
    Determine the type of the value at the end of a chain of tokens.

    A token on the chain that declares its own type answers for the rest of
    the chain; otherwise the terminal token's resolved type is used.

    Params:
        tokens: Tokens as yielded by iter_reference_chain, consumed lazily

    Returns:
        The effective type of the referenced value
    """
    token = None
    for token in tokens:
        if token.get_type() is not None:
            return token.get_type()
    return token.get_resolved_type()


def resolve_reference_type(reference: Reference, origin: TomNode) -> TokenType:
    """Resolve the type of the value a reference leads to."""
    return chain_type(iter_reference_chain(reference, origin))
