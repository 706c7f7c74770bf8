"""
Design tokens.

A DesignToken is a leaf node whose payload is exactly one of a concrete value,
a reference to another token, or a deferred value that is computed once the
token learns its effective type by being attached to a group. Types are
resolved on read (declared type, then alias chain, then inherited group type,
then structural inference) and are never cached across mutations.
"""

import logging
from collections.abc import Callable, Iterator
from enum import Enum
from typing import Any

from attrs import frozen

from tokentree.core.node import TomNode, assign_parent, clear_parent
from tokentree.core.types import UNSUPPORTED_TYPE, JsonValue, TokenType
from tokentree.exceptions import (
    InvalidParentError,
    PendingValueError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from tokentree.structure.reference import Reference
from tokentree.structure.resolution import (
    chain_type,
    iter_reference_chain,
    resolve_reference_token,
    resolve_reference_type,
)
from tokentree.values import CompositeValue, identify_type, is_composite_value

logger = logging.getLogger(__name__)

_MISSING = object()

TokenValue = JsonValue | CompositeValue

DeferredValue = Callable[[TokenType | None], "TokenValue | Reference | DesignToken"]


class SetValueStrategy(Enum):
    """How a new value is checked against the token's current resolved type."""

    # Set the new value or reference regardless of its type
    NO_CHECK = "no_check"
    # Only accept a value or reference whose type matches; raise otherwise
    REJECT_INCOMPATIBLE = "reject_incompatible"
    # Always accept, re-declaring the token's own type when it differs
    UPDATE_TYPE = "update_type"


@frozen
class _Concrete:
    value: Any


@frozen
class _Alias:
    reference: Reference


@frozen
class _Deferred:
    compute: DeferredValue


_Payload = _Concrete | _Alias | _Deferred


def is_design_token(node: Any) -> bool:
    return isinstance(node, DesignToken)


def _to_payload(value: Any, allow_deferred: bool) -> _Payload:
    if isinstance(value, DesignToken):
        return _Alias(value.get_reference())
    if isinstance(value, Reference):
        return _Alias(value)
    if allow_deferred and callable(value) and not isinstance(value, CompositeValue):
        return _Deferred(value)
    return _Concrete(value)


class DesignToken(TomNode):
    """
    Leaf node holding a value, an alias, or a deferred value.

    Params:
        name: Token name, unique among its siblings
        value: Concrete value, Reference, another DesignToken (stored as a
            reference to it), or a DeferredValue callable
        description: Optional human readable description
        type: Optional declared type
        strategy: How a concrete value is checked against the declared type

    Example:
        red = DesignToken("red", "#ff0000", type=TokenType.COLOR)
        primary = DesignToken("primary", red)  # alias to "red"
    """

    def __init__(
        self,
        name: str,
        value: Any,
        *,
        description: str | None = None,
        type: TokenType | str | None = None,
        strategy: SetValueStrategy = SetValueStrategy.UPDATE_TYPE,
    ):
        super().__init__(name, description=description, type=type)
        self._payload: _Payload | None = None
        self._extensions: dict[str, JsonValue] = {}

        payload = _to_payload(value, allow_deferred=True)
        if isinstance(payload, _Deferred):
            self._payload = payload
            return

        # A token under construction is not in a document yet, so its
        # references cannot be resolved for type checking
        if isinstance(payload, _Concrete):
            self._apply_set_value_strategy(payload, self.get_type(), strategy)
        self._do_set_value(payload)

    def is_alias(self) -> bool:
        return isinstance(self._payload, _Alias)

    def is_pending(self) -> bool:
        """Check whether the token still waits for its deferred value."""
        return isinstance(self._payload, _Deferred)

    def get_reference(self) -> Reference:
        """Return a reference pointing at this token."""
        return Reference(self.get_path())

    def resolve_referenced_value(self, reference: Reference) -> TokenValue:
        """
        Resolve a reference, relative to this token's document, to a value.

        The token itself is a valid target; only a chain that loops is an error.

        Params:
            reference: Reference to another token

        Returns:
            The concrete value at the end of the alias chain

        Raises:
            PathNotFoundError: If this token is not in a document or the path is missing
            NotATokenError: If the reference names a group
            CyclicReferenceError: If the alias chain loops
            PendingValueError: If the terminal token's value is still deferred
        """
        return resolve_reference_token(reference, self, seed_origin=False).get_value()

    def get_value(self, resolve: bool = False) -> TokenValue | Reference:
        """
        Retrieve the token's value.

        Params:
            resolve: Follow references through to the concrete value

        Returns:
            The concrete value, or the Reference itself when not resolving

        Raises:
            PendingValueError: If the token still holds a deferred value
        """
        payload = self._payload
        if isinstance(payload, _Deferred):
            raise PendingValueError(self.get_name())
        if isinstance(payload, _Alias):
            if resolve:
                return resolve_reference_token(payload.reference, self).get_value()
            return payload.reference
        return payload.value

    def set_value(
        self,
        value: Any,
        strategy: SetValueStrategy = SetValueStrategy.UPDATE_TYPE,
    ) -> None:
        """
        Replace the token's value or reference.

        Either the whole update happens or, when an error is raised, the token
        is left exactly as it was.

        Params:
            value: Concrete value, Reference, or DesignToken to alias
            strategy: How the new value is checked against the current type

        Raises:
            UnsupportedTypeError: If a concrete value has an unsupported shape
            TypeMismatchError: If REJECT_INCOMPATIBLE and the types differ
            InvalidParentError: If a composite value is owned by another token
        """
        payload = _to_payload(value, allow_deferred=False)
        if strategy is SetValueStrategy.NO_CHECK:
            current_type = None
        elif self.is_pending():
            current_type = self._get_own_or_inherited_type()
        else:
            current_type = self.get_resolved_type()

        self._apply_set_value_strategy(payload, current_type, strategy)
        self._do_set_value(payload)

    def get_resolved_type(self) -> TokenType:
        """
        Determine the token's effective type.

        In order of priority: the token's own declared type; for an alias, the
        type of the referenced value; the nearest ancestor group's declared
        type; finally, a type inferred from the shape of the value.

        Returns:
            The effective TokenType

        Raises:
            UnsupportedTypeError: If the type has to be inferred from a value
                of unsupported shape
            PendingValueError: If there is no declared type and the value is
                still deferred
        """
        if self.get_type() is not None:
            return self.get_type()

        value = self.get_value()
        if isinstance(value, Reference):
            return resolve_reference_type(value, self)

        inherited = self._get_inherited_type()
        if inherited is not None:
            return inherited

        inferred = identify_type(value)
        if inferred is UNSUPPORTED_TYPE:
            raise UnsupportedTypeError(value, "Unsupported value")
        return inferred

    def is_valid(self) -> bool:
        """Check whether the fully resolved value's shape matches the resolved type."""
        return identify_type(self.get_value(resolve=True)) == self.get_resolved_type()

    def has_extension(self, key: str) -> bool:
        return key in self._extensions

    def get_extension(self, key: str) -> JsonValue | None:
        return self._extensions.get(key)

    def set_extension(self, key: str, value: JsonValue) -> None:
        self._extensions[key] = value

    def delete_extension(self, key: str) -> bool:
        """Remove an extension, returning whether it existed."""
        return self._extensions.pop(key, _MISSING) is not _MISSING

    def clear_extensions(self) -> None:
        self._extensions.clear()

    def has_extensions(self) -> bool:
        return len(self._extensions) > 0

    def extensions(self) -> Iterator[tuple[str, JsonValue]]:
        """Iterate (key, value) pairs in insertion order."""
        return iter(self._extensions.items())

    def _get_inherited_type(self) -> TokenType | None:
        if self.has_parent():
            return self.get_parent().get_inherited_type()
        return None

    def _get_own_or_inherited_type(self) -> TokenType | None:
        return self.get_type() or self._get_inherited_type()

    def _apply_set_value_strategy(
        self,
        payload: _Payload,
        current_type: TokenType | None,
        strategy: SetValueStrategy,
    ) -> None:
        if isinstance(payload, _Concrete):
            new_type = identify_type(payload.value)
            if new_type is UNSUPPORTED_TYPE:
                raise UnsupportedTypeError(
                    payload.value, "Cannot set token value as it has an unsupported type"
                )
            self._check_ownership(payload.value)
        elif strategy is not SetValueStrategy.NO_CHECK:
            # Walk the whole chain so that loops back to this token are rejected now
            new_type = chain_type(list(iter_reference_chain(payload.reference, self)))

        if (
            strategy is SetValueStrategy.NO_CHECK
            or current_type is None
            or current_type == new_type
        ):
            return

        if strategy is SetValueStrategy.REJECT_INCOMPATIBLE:
            raise TypeMismatchError(self.get_name(), current_type, new_type)

        logger.debug(
            f"Updating type of token '{self.get_path()}' from "
            f"'{current_type.value}' to '{new_type.value}'"
        )
        self.set_type(new_type)

    def _check_ownership(self, value: Any) -> None:
        if is_composite_value(value) and value.has_parent() and value.get_parent() is not self:
            raise InvalidParentError(
                self.get_name(),
                f"value is already owned by token '{value.get_parent().get_name()}'",
            )

    def _do_set_value(self, payload: _Payload) -> None:
        old_payload = self._payload
        new_value = payload.value if isinstance(payload, _Concrete) else None

        if (
            isinstance(old_payload, _Concrete)
            and is_composite_value(old_payload.value)
            and old_payload.value is not new_value
        ):
            clear_parent(old_payload.value)

        self._payload = payload
        if is_composite_value(new_value):
            assign_parent(new_value, self)

    def _on_parent_assigned(self) -> None:
        if not isinstance(self._payload, _Deferred):
            return

        own_or_inherited_type = self._get_own_or_inherited_type()
        result = self._payload.compute(own_or_inherited_type)
        payload = _to_payload(result, allow_deferred=False)
        if isinstance(payload, _Concrete):
            self._apply_set_value_strategy(
                payload, None, SetValueStrategy.NO_CHECK
            )

        logger.debug(
            f"Resolved deferred value of token '{self.get_path()}' "
            f"with type {own_or_inherited_type}"
        )
        self._do_set_value(payload)

