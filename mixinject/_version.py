"""Version and system information for mixinject.

This module provides version information and system diagnostics useful for
bug reports and compatibility checks.

Usage:
    from mixinject import __version__, get_version_info, format_version_info

    # Simple version string
    print(__version__)  # "0.1.0"

    # Formatted version info (for bug reports)
    print(format_version_info())
"""

from __future__ import annotations

import importlib.util
import platform
import sys
from importlib import metadata
from typing import Any, Dict, Optional

__version__ = "0.1.0"


def get_python_info() -> Dict[str, str]:
    """Get Python interpreter information.

    Returns:
        Dict with Python version, implementation, and path.
    """
    return {
        "version": platform.python_version(),
        "implementation": platform.python_implementation(),
        "executable": sys.executable,
    }


def get_platform_info() -> Dict[str, str]:
    """Get platform/OS information."""
    return {
        "system": platform.system(),
        "release": platform.release(),
        "machine": platform.machine(),
    }


def _get_package_version(
    module_name: str, package_name: Optional[str] = None
) -> Optional[str]:
    """Get package version from installed metadata.

    Args:
        module_name: Name of the module to look up.
        package_name: Distribution name (defaults to module_name).

    Returns:
        Version string or None if not installed.
    """
    if importlib.util.find_spec(module_name) is None:
        return None
    try:
        return metadata.version(package_name or module_name)
    except metadata.PackageNotFoundError:
        return None


def get_dependency_versions() -> Dict[str, Optional[str]]:
    """Get versions of the runtime dependencies.

    Returns:
        Dict mapping package names to version strings (or None if not installed).
    """
    return {
        "pydantic": _get_package_version("pydantic"),
        "typeguard": _get_package_version("typeguard"),
        "typing_extensions": _get_package_version(
            "typing_extensions", "typing-extensions"
        ),
    }


def get_version_info() -> Dict[str, Any]:
    """Get comprehensive version and system information.

    Example:
        >>> info = get_version_info()
        >>> info["mixinject"]
        '0.1.0'
    """
    return {
        "mixinject": __version__,
        "python": get_python_info(),
        "platform": get_platform_info(),
        "dependencies": get_dependency_versions(),
    }


def format_version_info(info: Optional[Dict[str, Any]] = None) -> str:
    """Format version info as a human-readable string with aligned colons.

    Args:
        info: Version info dict from get_version_info(). If None, fetches it.

    Returns:
        Formatted multi-line string suitable for bug reports.
    """
    if info is None:
        info = get_version_info()

    py_info = info["python"]
    py_fields = [
        ("Version", py_info["version"]),
        ("Implementation", py_info["implementation"]),
        ("Executable", py_info["executable"]),
    ]
    plat_info = info["platform"]
    plat_fields = [
        ("System", plat_info["system"]),
        ("Release", plat_info["release"]),
        ("Machine", plat_info["machine"]),
    ]
    dep_fields = [
        (pkg, ver if ver else "not installed")
        for pkg, ver in info["dependencies"].items()
    ]

    width = max(len(label) for label, _ in py_fields + plat_fields + dep_fields)

    lines = [f"mixinject: {info['mixinject']}"]
    for title, fields in (
        ("Python", py_fields),
        ("Platform", plat_fields),
        ("Dependencies", dep_fields),
    ):
        lines.append("")
        lines.append(f"{title}:")
        for label, value in fields:
            lines.append(f"  {label:>{width}} : {value}")

    return "\n".join(lines)
