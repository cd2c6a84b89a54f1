"""Public API for the registry mixins package.

Exports:
    RegistryAccessorMixin: read-only registry interface.
    RegistryMutatorMixin: write-side extensions over accessor.
    ImmutableValidatorMixin: read-side validation wrapper.
    MutableValidatorMixin: write-side validation wrapper.
"""

from .accessor import RegistryAccessorMixin
from .mutator import RegistryMutatorMixin
from .validator import ImmutableValidatorMixin, MutableValidatorMixin

__all__ = [
    "RegistryAccessorMixin",
    "RegistryMutatorMixin",
    "ImmutableValidatorMixin",
    "MutableValidatorMixin",
]
