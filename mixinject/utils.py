r"""Utility exceptions and helpers for the mixin registry.

This module defines the small hierarchy of rich exceptions raised by the
registry and its mixins, the logging configuration shared by the package, and
a few naming helpers.

Exceptions:
    ValidationError: Base class carrying `suggestions` and `context` metadata.
    ConformanceError: Raised when constructors/instances violate a required surface.
    InheritanceError: Raised when an extension does not derive from its parent.
    RegistryError: Raised when table errors occur.
    MixinLookupError: Raised when a mixin name is not registered.

Doxygen Dot Graph of Exception Hierarchy:
------------------------------------------
\dot
digraph ExceptionHierarchy {
    node [shape=rectangle];
    "Exception" -> "ValidationError";
    "ValidationError" -> "ConformanceError";
    "ValidationError" -> "InheritanceError";
    "ValidationError" -> "RegistryError";
    "RegistryError" -> "MixinLookupError";
    "LookupError" -> "MixinLookupError";
}
\enddot
"""

import logging
import os
from functools import partial, partialmethod, wraps
from inspect import isclass
from typing import Any, Callable, Dict, List, Optional, TypeVar

from typing_extensions import ParamSpec

# -----------------------------------------------------------------------------
# Logging Configuration
# -----------------------------------------------------------------------------

# Configure logging with environment-based settings.
logger = logging.getLogger(__name__)
logging.basicConfig(
    level=os.getenv("MIXINJECT_LOG_LEVEL", "INFO").upper(),
    format="[%(asctime)s] [%(levelname)-5s] [%(name)s:%(lineno)d] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

P = ParamSpec("P")
R = TypeVar("R")


# -----------------------------------------------------------------------------
# Decorators
# -----------------------------------------------------------------------------


def log_debug(func: Callable[P, R]) -> Callable[P, R]:
    """
    Decorator to log function calls in debug mode.

    If the environment variable 'MIXINJECT_QUIET' is set to 'TRUE',
    the function is returned undecorated.

    Parameters:
        func (Callable): The function to decorate.

    Returns:
        Callable: The decorated function.
    """
    if os.getenv("MIXINJECT_QUIET", "FALSE").upper() == "TRUE":
        return func

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if logger.isEnabledFor(logging.DEBUG):
            arg_str = ", ".join(repr(a) for a in args)
            kwarg_str = ", ".join(f"{k}={v!r}" for k, v in kwargs.items())
            all_args = ", ".join(filter(None, [arg_str, kwarg_str]))
            logger.debug(f"{func.__name__}({all_args})")
        return func(*args, **kwargs)

    return wrapper


# -----------------------------------------------------------------------------
# Exception Classes
# -----------------------------------------------------------------------------


class ValidationError(Exception):
    """Base exception for validation with structured context.

    Attributes:
        message: Human-readable error text.
        suggestions: List of short, imperative hints for remediation.
        context: Free-form key/value details safe to log and render.
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}
        super().__init__(self._build_enhanced_message())

    def _build_enhanced_message(self) -> str:
        """Embed key context and suggestions into the exception string."""
        lines = [self.message]

        if self.context:
            if "expected_type" in self.context and "actual_type" in self.context:
                lines.append(f"  Expected: {self.context['expected_type']}")
                lines.append(f"  Actual: {self.context['actual_type']}")
            if "mixin_name" in self.context:
                lines.append(f"  Mixin: {self.context['mixin_name']}")

        if self.suggestions:
            lines.append("  Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"    • {suggestion}")

        return "\n".join(lines)


class ConformanceError(ValidationError):
    """Raised when a constructor or instance does not expose the required surface."""


class InheritanceError(ValidationError):
    """Raised when an extended constructor does not inherit from its parent."""


class RegistryError(ValidationError):
    """Raised for name-related table errors with rich context attached."""


class MixinLookupError(RegistryError, LookupError):
    """Raised when an operation references a mixin name that is not registered."""


# -----------------------------------------------------------------------------
# Naming Helpers
# -----------------------------------------------------------------------------


def get_type_name(cls: type, qualname: bool = False) -> str:
    """Return a readable name for a type.

    Args:
        cls: The class or type object.
        qualname: If True, return the qualified name when available.

    Returns:
        The type's `__qualname__`, `__name__`, or a string fallback.
    """
    if not isclass(cls):
        raise ValidationError(f"{cls} is not a class")
    if qualname and hasattr(cls, "__qualname__"):
        return getattr(cls, "__qualname__")
    elif hasattr(cls, "__name__"):
        return getattr(cls, "__name__")
    else:
        return str(cls)


def get_func_name(func: Callable[..., Any], qualname: bool = False) -> str:
    """Return a readable name for a constructor, class or function.

    Partials are resolved to the function they wrap; objects without a name
    fall back to `repr`.
    """
    if isinstance(func, (partial, partialmethod)):
        return get_func_name(func.func, qualname)
    while hasattr(func, "__wrapped__"):
        func = getattr(func, "__wrapped__")
    return getattr(func, "__qualname__" if qualname else "__name__", repr(func))
