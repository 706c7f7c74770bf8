"""
tokentree structure components.

This package provides design tokens, groups, the document root, references
and alias-chain resolution.
"""

from tokentree.structure.group import Group, RootGroup, is_group
from tokentree.structure.reference import Reference, is_alias_string, is_reference
from tokentree.structure.resolution import (
    iter_reference_chain,
    resolve_reference_token,
    resolve_reference_type,
)
from tokentree.structure.token import (
    DeferredValue,
    DesignToken,
    SetValueStrategy,
    TokenValue,
    is_design_token,
)

__all__ = [
    "DesignToken",
    "DeferredValue",
    "SetValueStrategy",
    "TokenValue",
    "is_design_token",
    "Group",
    "RootGroup",
    "is_group",
    "Reference",
    "is_reference",
    "is_alias_string",
    "iter_reference_chain",
    "resolve_reference_token",
    "resolve_reference_type",
]
