r"""Validator module.

This module provides the validation functions used by the mixin registry:
identifier checks for mixin names, constructor checks, inheritance checks for
extensions and runtime conformance checks for injected instances.

Every function returns its (possibly coerced) input on success and raises one
of the rich exceptions from `mixinject.utils` on failure.

Doxygen Dot Graph of Validation Flow:
--------------------------------------
\dot
digraph Validation {
    rankdir=LR;
    node [shape=rectangle];
    "register" -> "validate_identifier";
    "register" -> "validate_constructor";
    "extend" -> "validate_class_hierarchy";
    "inject" -> "validate_instance_structure";
}
\enddot
"""

import inspect
from typing import Any, Type, TypeVar

from pydantic import StringConstraints, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from typeguard import TypeCheckError, check_type
from typing_extensions import Annotated

from .utils import (
    ConformanceError,
    InheritanceError,
    ValidationError,
    get_func_name,
    get_type_name,
    log_debug,
)

__all__ = [
    "MixinName",
    "validate_identifier",
    "validate_constructor",
    "validate_class_hierarchy",
    "validate_instance_structure",
]

# -----------------------------------------------------------------------------
# Identifier Schema
# -----------------------------------------------------------------------------

MixinName = Annotated[str, StringConstraints(strict=True, min_length=1)]
"""A mixin name: a non-empty string, never coerced from other types."""

_MIXIN_NAME_ADAPTER: TypeAdapter = TypeAdapter(MixinName)

Obj = TypeVar("Obj")


# -----------------------------------------------------------------------------
# Identifier and Constructor Validation
# -----------------------------------------------------------------------------


@log_debug
def validate_identifier(value: Any) -> str:
    """
    Validate that `value` can be used as a mixin name.

    Parameters:
        value (Any): The candidate name.

    Returns:
        str: The validated name.

    Raises:
        ValidationError: If the value is not a non-empty string.
    """
    try:
        return _MIXIN_NAME_ADAPTER.validate_python(value)
    except PydanticValidationError as exc:
        suggestions = [
            "Mixin names must be non-empty strings",
            f"Got {type(value).__name__}: {value!r}",
        ]
        context = {
            "expected_type": "non-empty str",
            "actual_type": type(value).__name__,
            "errors": [err["msg"] for err in exc.errors()],
        }
        raise ValidationError(
            f"Invalid mixin name {value!r}", suggestions, context
        ) from exc


@log_debug
def validate_constructor(value: Any) -> Any:
    """
    Validate that a mixin constructor can be invoked.

    Parameters:
        value (Any): The constructor to validate.

    Returns:
        Any: The validated constructor.

    Raises:
        ConformanceError: If the value is not callable.
    """
    if not callable(value):
        raise ConformanceError(
            f"Mixin constructor {value!r} is not callable",
            [
                "Register a class or a zero-argument factory function",
                "Make sure you're registering the class itself, not an instance",
            ],
            {"expected_type": "callable", "actual_type": type(value).__name__},
        )
    return value


@log_debug
def validate_class_hierarchy(subcls: Any, /, parent: Any) -> Any:
    """
    Validate that an extended constructor derives from its parent.

    Only class constructors are compared; factory functions carry no
    inheritance information and pass through.

    Parameters:
        subcls (Any): The constructor returned by an extension factory.
        parent (Any): The constructor it replaces.

    Returns:
        Any: The validated constructor.

    Raises:
        InheritanceError: If both are classes and `subcls` is not a subclass of `parent`.
    """
    if inspect.isclass(subcls) and inspect.isclass(parent):
        if not issubclass(subcls, parent):
            raise InheritanceError(
                f"{get_type_name(subcls)} not subclass-of {get_type_name(parent)}",
                [
                    f"Return a class deriving from {get_type_name(parent)} from the extension",
                    "Use mixinject.extension.subclass_with to build derived constructors",
                ],
                {
                    "expected_type": get_type_name(parent),
                    "actual_type": get_type_name(subcls),
                },
            )
    elif inspect.isclass(parent) and not callable(subcls):
        raise InheritanceError(
            f"Extension of {get_type_name(parent)} returned {subcls!r}",
            ["Extension factories must return a constructor"],
            {"expected_type": get_type_name(parent), "actual_type": type(subcls).__name__},
        )
    return subcls


# -----------------------------------------------------------------------------
# Instance Validation
# -----------------------------------------------------------------------------


@log_debug
def validate_instance_structure(obj: Obj, /, expected_type: Type[Obj]) -> Obj:
    """
    Validate that an instance conforms to an expected type using runtime type checking.

    This function leverages 'check_type' from the typeguard package, so
    `typing.Protocol` classes are checked structurally.

    Parameters:
        obj (Obj): The instance to validate.
        expected_type (Type[Obj]): The expected type or protocol of the instance.

    Returns:
        Obj: The validated instance.

    Raises:
        ConformanceError: If the instance does not conform to the expected type.
    """
    try:
        return check_type(obj, expected_type)  # type: ignore
    except TypeCheckError as exc:
        raise ConformanceError(
            f"{get_func_name(type(obj))} instance does not conform to "
            f"{get_func_name(expected_type)}",
            [
                f"Implement every member of {get_func_name(expected_type)}",
                "Check that extensions keep the members of the mixin they extend",
            ],
            {
                "expected_type": get_func_name(expected_type),
                "actual_type": get_func_name(type(obj)),
                "reason": str(exc),
            },
        ) from exc
