r"""Validation mixins for the mixin registry.

This module provides `ImmutableValidatorMixin` and `MutableValidatorMixin`:
front-ends that wrap accessor/mutator calls with identifier/artifact
validation and surface failures as the rich exceptions from `mixinject.utils`.

Validation switches are instance attributes, so two registries in the same
process can run with different settings:

  - `_strict`: constructors (registered or returned by an extension) must be callable.
  - `_abstract`: class constructors returned by an extension must subclass the
    class they replace.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Hashable, Iterator, TypeVar

from .._validator import (
    validate_class_hierarchy,
    validate_constructor,
    validate_identifier,
)
from ..utils import ValidationError
from .accessor import RegistryAccessorMixin
from .mutator import RegistryMutatorMixin

logger = logging.getLogger(__name__)

__all__ = [
    "ImmutableValidatorMixin",
    "MutableValidatorMixin",
]

KeyType = TypeVar("KeyType", bound=Hashable)
ValType = TypeVar("ValType")


class ImmutableValidatorMixin(
    RegistryAccessorMixin[KeyType, ValType], Generic[KeyType, ValType]
):
    """Read-side validation wrapper for registries.

    Responsibilities:
        - Validate identifiers on read paths.
        - Convert bad names into `ValidationError` with context.
        - Delegate presence errors to the accessor (`MixinLookupError`).

    Override points:
        `_internalize_identifier`, `_internalize_artifact`, `_externalize_artifact`.
    """

    _strict: bool = False

    def _internalize_identifier(self, value: Any) -> KeyType:
        """Validate an identifier before it touches the table.

        Raises:
            ValidationError: if `value` is not a valid mixin name.
        """
        return validate_identifier(value)

    def _internalize_artifact(self, value: ValType) -> ValType:
        """Validate a constructor for storage. Passthrough unless strict."""
        if self._strict:
            return validate_constructor(value)
        return value

    def _externalize_artifact(self, value: ValType) -> ValType:
        """Validate a constructor on retrieval. Default passthrough."""
        return value

    def get_artifact(self, key: KeyType) -> ValType:
        """Return the constructor registered under `key`.

        Raises:
            MixinLookupError: if the name is not registered.
            ValidationError: if the name itself is invalid.
        """
        validated_key = self._internalize_identifier(key)
        return self._externalize_artifact(self._get_artifact(validated_key))

    def has_identifier(self, key: Any) -> bool:
        """Return True if a constructor is registered under `key`."""
        try:
            validated_key = self._internalize_identifier(key)
        except ValidationError:
            return False
        return self._has_identifier(validated_key)

    def iter_identifiers(self) -> Iterator[KeyType]:
        """Iterate over a snapshot of the registered names."""
        return self._iter_mapping()


class MutableValidatorMixin(
    ImmutableValidatorMixin[KeyType, ValType],
    RegistryMutatorMixin[KeyType, ValType],
    Generic[KeyType, ValType],
):
    """Write-side validation wrapper for registries.

    Responsibilities:
        - Validate names and constructors on write paths.
        - Validate the constructors produced by extension factories.
    """

    _abstract: bool = False

    def _internalize_extension(self, child: ValType, parent: ValType) -> ValType:
        """Validate the constructor an extension factory returned for `parent`.

        Raises:
            ConformanceError: in strict mode, if `child` is not callable.
            InheritanceError: in abstract mode, if `child` does not derive from `parent`.
        """
        child = self._internalize_artifact(child)
        if self._abstract:
            child = validate_class_hierarchy(child, parent=parent)
        return child

    def register_artifact(self, key: KeyType, item: ValType) -> ValType:
        """Bind `item` under `key` after validation; overwrites silently."""
        validated_key = self._internalize_identifier(key)
        validated_item = self._internalize_artifact(item)
        if logger.isEnabledFor(logging.DEBUG) and self._has_identifier(validated_key):
            logger.debug("Overwriting mixin %r", validated_key)
        self._set_artifact(validated_key, validated_item)
        return item

    def replace_artifact(self, key: KeyType, expected: ValType, item: ValType) -> bool:
        """Compare-and-set the binding under `key`.

        Raises:
            MixinLookupError: if the name is not registered.
        """
        validated_key = self._internalize_identifier(key)
        return self._swap_artifact(validated_key, expected, item)

