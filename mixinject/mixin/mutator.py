r"""Mutable registry mixin.

This module adds write operations on top of the read-only accessor mixin.

Behavior:
  - `_set_artifact` binds a key, silently replacing any previous binding.
  - `_swap_artifact` replaces a binding only while it still holds an
    expected value (compare-and-set).

There is no delete operation: bindings are only ever replaced.

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

from typing import Hashable, TypeVar

from .accessor import RegistryAccessorMixin

__all__ = [
    "RegistryMutatorMixin",
]


# -----------------------------------------------------------------------------
# Type Variables
# -----------------------------------------------------------------------------

KeyType = TypeVar("KeyType", bound=Hashable)
ValType = TypeVar("ValType")


# -----------------------------------------------------------------------------
# Base Mixin for Mutating Registry Items
# -----------------------------------------------------------------------------


class RegistryMutatorMixin(RegistryAccessorMixin[KeyType, ValType]):
    """Write-side extensions for a registry.

    Error semantics:
        Presence checks raise `MixinLookupError` with rich context.
    """

    # -----------------------------------------------------------------------------
    # Setter Functions for Registry Items
    # -----------------------------------------------------------------------------

    def _set_artifact(self, key: KeyType, item: ValType) -> None:
        """Bind `item` under `key`, overwriting any existing binding."""
        self._get_mapping()[key] = item

    def _swap_artifact(self, key: KeyType, expected: ValType, item: ValType) -> bool:
        """Replace the binding under `key` only if it is still `expected`.

        Returns:
            True if the binding was replaced, False if it changed meanwhile.

        Raises:
            MixinLookupError: if `key` is not present.
        """
        mapping = self._assert_presence(key)
        if mapping[key] is not expected:
            return False
        mapping[key] = item
        return True
