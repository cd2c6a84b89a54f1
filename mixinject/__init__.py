from ._version import __version__, format_version_info, get_version_info
from .extension import Delegating, compose_extensions, delegate_with, subclass_with
from .registry import Constructor, ExtensionFactory, MixinRegistry
from .utils import (
    ConformanceError,
    InheritanceError,
    MixinLookupError,
    RegistryError,
    ValidationError,
)

__all__ = [
    "MixinRegistry",
    "Constructor",
    "ExtensionFactory",
    "Delegating",
    "subclass_with",
    "delegate_with",
    "compose_extensions",
    "RegistryError",
    "MixinLookupError",
    "ValidationError",
    "ConformanceError",
    "InheritanceError",
    "get_version_info",
    "format_version_info",
    "__version__",
]
