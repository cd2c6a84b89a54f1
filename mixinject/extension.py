r"""Ready-made extension factories.

`MixinRegistry.extend` accepts any callable mapping the current constructor to
a new one. This module provides the common shapes:

  - `subclass_with`: cooperative inheritance, `class Child(*bases, parent)`.
  - `delegate_with`: composition by delegation; the extension holds an
    instance of the parent and forwards every member it does not define.
  - `compose_extensions`: apply several factories as one.

Example:
    >>> class TenCounter:
    ...     def __init__(self):
    ...         super().__init__()
    ...         self.value = 10
    >>> registry.extend("counter", subclass_with(TenCounter))
"""

import inspect
from functools import reduce
from typing import Any, Callable, ClassVar, Optional, Type

from .utils import InheritanceError, get_func_name, get_type_name

__all__ = [
    "Delegating",
    "subclass_with",
    "delegate_with",
    "compose_extensions",
]

Constructor = Callable[[], Any]
ExtensionFactory = Callable[[Constructor], Constructor]


# -----------------------------------------------------------------------------
# Subclass Extensions
# -----------------------------------------------------------------------------


def subclass_with(*bases: type, name: Optional[str] = None) -> ExtensionFactory:
    """
    Build an extension factory deriving `class Child(*bases, parent)`.

    The bases come first in the MRO, so their methods override the parent's
    and reach it through `super()`. Instances of the result are instances of
    the parent.

    A class can appear only once in an MRO, so a base the parent already
    derives from (for instance because the same factory extended it before)
    is rejected with `InheritanceError`. Use a fresh class per extension, or
    `delegate_with`, to stack the same behavior twice.

    Parameters:
        *bases (type): Classes mixed in front of the parent.
        name (Optional[str]): Name of the derived class; defaults to the parent's.

    Returns:
        ExtensionFactory: A factory for `MixinRegistry.extend`.
    """

    def extension(parent: Constructor) -> Type[Any]:
        if not inspect.isclass(parent):
            raise InheritanceError(
                f"Cannot subclass {get_func_name(parent)}: it is not a class",
                [
                    "Use delegate_with() to extend factory functions",
                    "Register the mixin as a class to extend it by subclassing",
                ],
                {"expected_type": "class", "actual_type": type(parent).__name__},
            )
        clashing = [base for base in bases if base in parent.__mro__]
        if clashing:
            raise InheritanceError(
                f"Cannot subclass {get_type_name(parent)}: it already derives from "
                f"{', '.join(get_type_name(base) for base in clashing)}",
                [
                    "Mix in a fresh class for each extension of the same mixin",
                    "Use delegate_with() to wrap the mixin more than once",
                ],
                {
                    "mixin_type": get_type_name(parent),
                    "repeated_bases": [get_type_name(base) for base in clashing],
                },
            )
        return type(
            name or parent.__name__,
            (*bases, parent),
            {"__module__": parent.__module__},
        )

    return extension


# -----------------------------------------------------------------------------
# Delegation Extensions
# -----------------------------------------------------------------------------


class Delegating:
    """Base for extensions that wrap a parent mixin instead of inheriting it.

    On construction an instance of `__wrapcls__` is created and stored in
    `__wrapobj__`. Attribute reads the extension cannot satisfy, and writes to
    names the extension does not define, go to that instance.
    """

    __wrapcls__: ClassVar[Constructor]
    __wrapobj__: Any

    def __init__(self) -> None:
        wrapcls = getattr(type(self), "__wrapcls__", None)
        if wrapcls is None:
            raise InheritanceError(
                f"{type(self).__name__} has no parent mixin to delegate to",
                ["Create delegating extensions through delegate_with()"],
            )
        object.__setattr__(self, "__wrapobj__", wrapcls())

    def __getattr__(self, name: str) -> Any:
        if name == "__wrapobj__":
            raise AttributeError(name)
        return getattr(self.__wrapobj__, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__ or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        elif "__wrapobj__" not in self.__dict__:
            raise InheritanceError(
                f"{type(self).__name__} assigned {name!r} before its parent mixin was built",
                ["Call super().__init__() before assigning attributes"],
            )
        else:
            setattr(self.__wrapobj__, name, value)

    def __dir__(self):
        return sorted(set(super().__dir__()) | set(dir(self.__wrapobj__)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}[{self.__wrapobj__!r}]"


def delegate_with(body: Type[Delegating], name: Optional[str] = None) -> ExtensionFactory:
    """
    Build an extension factory wrapping the parent in a `Delegating` body.

    Works for class and factory-function parents alike. The body overrides
    members by defining them and reaches the parent through `self.__wrapobj__`.

    Parameters:
        body (Type[Delegating]): The delegating class holding the overrides.
        name (Optional[str]): Name of the generated class; defaults to the body's.

    Returns:
        ExtensionFactory: A factory for `MixinRegistry.extend`.

    Raises:
        InheritanceError: If `body` is not a `Delegating` subclass.
    """
    if not (inspect.isclass(body) and issubclass(body, Delegating)):
        raise InheritanceError(
            f"{body!r} not subclass-of Delegating",
            [f"Declare the body as `class {getattr(body, '__name__', 'Body')}(Delegating)`"],
        )

    def extension(parent: Constructor) -> Type[Delegating]:
        return type(
            name or body.__name__,
            (body,),
            {"__wrapcls__": staticmethod(parent), "__module__": body.__module__},
        )

    return extension


# -----------------------------------------------------------------------------
# Composition
# -----------------------------------------------------------------------------


def _compose_two(first: ExtensionFactory, second: ExtensionFactory) -> ExtensionFactory:
    def extension(parent: Constructor) -> Constructor:
        return second(first(parent))

    return extension


def compose_extensions(*factories: ExtensionFactory) -> ExtensionFactory:
    """Combine factories left to right into a single extension factory.

    `extend(name, compose_extensions(f, g))` yields the same constructor as
    `extend(name, f)` followed by `extend(name, g)`.
    """
    if not factories:
        raise ValueError("compose_extensions() needs at least one factory")
    return reduce(_compose_two, factories)
