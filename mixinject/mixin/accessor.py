r"""Read-only registry mixin with rich error context.

This module implements `RegistryAccessorMixin`, an abstract, read-focused
interface over a mapping of mixin names to constructors. It provides
consistent error reporting and context when lookups fail.

Key points:
  - Subclasses must implement `_get_mapping()` to return the backing mapping.
  - Presence checks and retrieval raise `MixinLookupError` with suggestions.
  - No mutation APIs are exposed here; see `RegistryMutatorMixin` for writes.

Simple inheritance diagram (Doxygen dot):
\dot
digraph RegistryPattern {
    rankdir=LR;
    node [shape=rectangle];
    "RegistryAccessorMixin" -> "RegistryMutatorMixin";
}
\enddot
"""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, MutableMapping, TypeVar

from ..utils import MixinLookupError, get_type_name

__all__ = [
    "RegistryAccessorMixin",
]


# -----------------------------------------------------------------------------
# Type Variables
# -----------------------------------------------------------------------------

KeyType = TypeVar("KeyType", bound=Hashable)
ValType = TypeVar("ValType")


# -----------------------------------------------------------------------------
# Base Mixin for Accessing Registry Items
# -----------------------------------------------------------------------------


class RegistryAccessorMixin(Generic[KeyType, ValType]):
    """Abstract accessor over a registry mapping.

    Subclasses must provide a concrete storage via `_get_mapping()`.

    Error semantics:
        Missing keys are reported via `MixinLookupError` with
        a suggestions list and context payload suitable for logs.
    """

    # -----------------------------------------------------------------------------
    # Getter Functions for Registry
    # -----------------------------------------------------------------------------

    def _get_mapping(self) -> MutableMapping[KeyType, ValType]:
        """Return the underlying mapping for this registry."""
        raise NotImplementedError(
            f"Subclasses must implement `{type(self).__name__}._get_mapping` method."
        )

    def _len_mapping(self) -> int:
        """Return the number of entries in the registry."""
        return len(self._get_mapping())

    def _iter_mapping(self) -> Iterator[KeyType]:
        """Iterate over all identifiers in the registry."""
        return iter(list(self._get_mapping()))

    # -----------------------------------------------------------------------------
    # Getter Functions for Registry Contents
    # -----------------------------------------------------------------------------

    def _get_artifact(self, key: KeyType) -> ValType:
        """Return the artifact registered under `key`, or raise.

        Raises:
            MixinLookupError: if `key` is not present.
        """
        return self._assert_presence(key)[key]

    def _has_identifier(self, key: KeyType) -> bool:
        """Return True if `key` exists in the registry."""
        return key in self._get_mapping()

    # -----------------------------------------------------------------------------
    # Helper Functions
    # -----------------------------------------------------------------------------

    def _assert_presence(self, key: KeyType) -> MutableMapping[KeyType, ValType]:
        """Return mapping if `key` is present; otherwise raise `MixinLookupError`."""
        mapping = self._get_mapping()
        if key not in mapping:
            registry_name = get_type_name(type(self))
            suggestions = [
                f"Mixin '{key}' is not registered in this {registry_name}",
                "Call register() for the name before extending or injecting it",
                "Check the spelling of the mixin name",
                f"Registry contains {len(mapping)} mixins",
            ]
            context = {
                "operation": "assert_presence",
                "registry_type": registry_name,
                "mixin_name": str(key),
                "key_type": type(key).__name__,
                "registry_size": len(mapping),
                "available_keys": (
                    list(mapping.keys())
                    if len(mapping) <= 10
                    else f"{list(mapping.keys())[:10]}. ({len(mapping)} total)"
                ),
            }
            raise MixinLookupError(
                f"Unknown mixin name '{key}'", suggestions, context
            )
        return mapping
