r"""Mixin registry.

This module defines `MixinRegistry`, the name-to-constructor table at the
heart of the package. Behavior units ("mixins") are registered under symbolic
names, optionally extended, and later injected onto an arbitrary host object.

Example:
    >>> registry = MixinRegistry()
    >>> registry.register("counter", Counter)
    >>> registry.extend("counter", subclass_with(TenCounter))
    >>> host = {}
    >>> registry.inject("counter", host)
    >>> host["counter"].value
    10

Doxygen Dot Graph of Inheritance:
-----------------------------------
\dot
digraph MixinRegistry {
    rankdir=LR;
    node [shape=rectangle];
    "RegistryAccessorMixin" -> "RegistryMutatorMixin";
    "RegistryAccessorMixin" -> "ImmutableValidatorMixin";
    "ImmutableValidatorMixin" -> "MutableValidatorMixin";
    "RegistryMutatorMixin" -> "MutableValidatorMixin";
    "MutableValidatorMixin" -> "MixinRegistry";
}
\enddot
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from threading import RLock
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from ._validator import validate_instance_structure
from .mixin import MutableValidatorMixin
from .utils import get_func_name

logger = logging.getLogger(__name__)

__all__ = [
    "Constructor",
    "ExtensionFactory",
    "MixinRegistry",
]

Constructor = Callable[[], Any]
"""Anything that produces a mixin instance when called without arguments."""
ExtensionFactory = Callable[[Constructor], Constructor]
"""Derives a new constructor from the one currently registered."""
Names = Union[str, Sequence[str]]

C = TypeVar("C", bound=Callable[..., Any])


def _attach(host: Any, name: str, instance: Any) -> None:
    """Attach `instance` to `host` under `name`."""
    if isinstance(host, MutableMapping):
        host[name] = instance
    else:
        setattr(host, name, instance)


class MixinRegistry(MutableValidatorMixin[str, Constructor]):
    """
    Registry binding mixin names to mixin constructors.

    Each instance owns an independent table; create one per application (or
    per test) instead of sharing a module-level registry.

    Every operation is synchronous. Table reads and writes happen under a
    per-registry `RLock`; constructors and extension factories are always
    invoked outside of it.

    Parameters:
        strict (bool): If True, constructors must be callable when registered
            and when returned by an extension factory.
        abstract (bool): If True, a class returned by an extension factory must
            subclass the class it replaces.

    Attributes:
        _repository (dict): Mapping of mixin names to constructors.
        _protocols (dict): Capability protocols checked on injection, by name.
    """

    def __init__(self, strict: bool = False, abstract: bool = False) -> None:
        self._repository: Dict[str, Constructor] = {}
        self._protocols: Dict[str, Any] = {}
        self._lock = RLock()
        self._strict = strict
        self._abstract = abstract

    def _get_mapping(self) -> Dict[str, Constructor]:
        """Return the repository dictionary."""
        return self._repository

    # -----------------------------------------------------------------------------
    # Registration
    # -----------------------------------------------------------------------------

    def register(
        self, name: str, constructor: C, *, protocol: Optional[Any] = None
    ) -> C:
        """
        Bind `constructor` under `name`, replacing any previous binding.

        Re-registering a name is silent: the last registration wins. The
        protocol of a name is replaced together with its constructor.

        Parameters:
            name (str): Non-empty mixin name.
            constructor (Callable): Called with no arguments on injection.
            protocol (Optional[Any]): Type or `typing.Protocol` every instance
                injected under `name` must satisfy.

        Returns:
            The constructor, unchanged.

        Raises:
            ValidationError: If `name` is not a non-empty string.
            ConformanceError: In strict mode, if `constructor` is not callable.
        """
        with self._lock:
            self.register_artifact(name, constructor)
            if protocol is None:
                self._protocols.pop(name, None)
            else:
                self._protocols[name] = protocol
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Registered mixin %r -> %s", name, get_func_name(constructor)
            )
        return constructor

    def mixin(
        self, name: str, *, protocol: Optional[Any] = None
    ) -> Callable[[C], C]:
        """Decorator form of `register`.

        Example:
            >>> @registry.mixin("validation")
            ... class Validator: ...
        """

        def decorator(constructor: C) -> C:
            return self.register(name, constructor, protocol=protocol)

        return decorator

    # -----------------------------------------------------------------------------
    # Extension
    # -----------------------------------------------------------------------------

    def extend(self, name: str, extension_factory: ExtensionFactory) -> Constructor:
        """
        Replace the constructor under `name` with `extension_factory(current)`.

        Extensions stack: a second call wraps the result of the first. The
        factory runs outside the table lock; if the binding changed while it
        ran, the factory is applied again to the newer constructor.

        Parameters:
            name (str): A registered mixin name.
            extension_factory (Callable): Receives the current constructor and
                returns its replacement.

        Returns:
            The new constructor.

        Raises:
            MixinLookupError: If `name` is not registered.
            ConformanceError: In strict mode, if the factory returned a non-callable.
            InheritanceError: In abstract mode, if the new class does not
                derive from the current one.
        """
        name = self._internalize_identifier(name)
        while True:
            with self._lock:
                parent = self._get_artifact(name)
            child = self._internalize_extension(extension_factory(parent), parent)
            with self._lock:
                if self.replace_artifact(name, parent, child):
                    break
            logger.debug("Mixin %r was rebound while extending; retrying", name)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Extended mixin %r: %s -> %s",
                name,
                get_func_name(parent),
                get_func_name(child),
            )
        return child

    # -----------------------------------------------------------------------------
    # Injection
    # -----------------------------------------------------------------------------

    def _normalize_names(self, names: Names) -> List[str]:
        """Turn one name or a sequence of names into a validated list."""
        if isinstance(names, str):
            names = [names]
        return [self._internalize_identifier(name) for name in names]

    def _resolve(self, names: List[str]) -> List[Tuple[str, Constructor, Any]]:
        """Snapshot constructor and protocol of every name, or raise."""
        with self._lock:
            return [
                (name, self._get_artifact(name), self._protocols.get(name))
                for name in names
            ]

    def instantiate(self, names: Names) -> Dict[str, Any]:
        """
        Build one instance per requested name and return them by name.

        All names are resolved before any constructor runs, so an unknown
        name fails without side effects. Constructors are looked up at call
        time, not at registration time. When a name repeats, the instance
        built last is kept.

        Parameters:
            names (Union[str, Sequence[str]]): One name or an ordered sequence.

        Returns:
            Dict[str, Any]: Instances keyed by mixin name, in request order.

        Raises:
            MixinLookupError: If any name is not registered.
            ConformanceError: If an instance does not satisfy its name's protocol.
        """
        plan = self._resolve(self._normalize_names(names))
        instances: Dict[str, Any] = {}
        for name, constructor, protocol in plan:
            instance = constructor()
            if protocol is not None:
                instance = validate_instance_structure(instance, protocol)
            instances[name] = instance
        return instances

    def inject(self, names: Names, host: Any) -> None:
        """
        Instantiate each named mixin and attach it to `host` under its name.

        Mapping hosts receive items (`host[name]`), every other host receives
        attributes (`host.name`). Injection is all-or-nothing: instances are
        attached only after every one of them was built and checked, so a
        failure leaves `host` untouched. Constructors never receive `host`.

        Parameters:
            names (Union[str, Sequence[str]]): One name or an ordered sequence.
            host (Any): The object to attach the instances to.

        Raises:
            MixinLookupError: If any name is not registered.
            ConformanceError: If an instance does not satisfy its name's protocol.
        """
        instances = self.instantiate(names)
        for name, instance in instances.items():
            _attach(host, name, instance)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Injected %s into %s", list(instances), type(host).__name__
            )

    # -----------------------------------------------------------------------------
    # Read-only Access
    # -----------------------------------------------------------------------------

    def get_constructor(self, name: str) -> Constructor:
        """Return the constructor currently bound to `name`.

        Raises:
            MixinLookupError: If `name` is not registered.
        """
        with self._lock:
            return self.get_artifact(name)

    def get_protocol(self, name: str) -> Optional[Any]:
        """Return the protocol registered with `name`, or None."""
        with self._lock:
            self.get_artifact(name)
            return self._protocols.get(name)

    def has_mixin(self, name: Any) -> bool:
        """Return True if `name` is registered."""
        with self._lock:
            return self.has_identifier(name)

    def iter_names(self) -> Iterator[str]:
        """Iterate over a snapshot of the registered names."""
        with self._lock:
            return self.iter_identifiers()

    def __contains__(self, name: Any) -> bool:
        return self.has_mixin(name)

    def __iter__(self) -> Iterator[str]:
        return self.iter_names()

    def __len__(self) -> int:
        with self._lock:
            return self._len_mapping()

    def __repr__(self) -> str:
        with self._lock:
            names = list(self._repository)
        return f"{type(self).__name__}({names!r})"
