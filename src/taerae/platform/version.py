"""
Host operating system label and version queries.

Every function takes an optional ``system`` name (as returned by
``platform.system()``) so callers can ask about a specific family; when it is
omitted the current host is used. All queries are read-only.
"""

import platform
from typing import Optional, Tuple

from loguru import logger


# platform.system() -> human-readable family label
PLATFORM_LABELS = {
    "Linux": "Linux",
    "Darwin": "macOS",
    "Windows": "Windows",
}

UNKNOWN_LABEL = "Unknown"
UNKNOWN_VERSION = "unknown"


def get_platform_label(system: Optional[str] = None) -> str:
    """Return the fixed label for an operating system family."""
    system = platform.system() if system is None else system
    if system in PLATFORM_LABELS:
        return PLATFORM_LABELS[system]
    return system or UNKNOWN_LABEL


def get_os_version(system: Optional[str] = None) -> str:
    """
    Return the host operating system's version string.

    Linux reports the kernel build string from uname, macOS its product
    version, Windows a coarse release bucket ("10+", "8", "7"). The result
    is never empty.
    """
    system = platform.system() if system is None else system

    if system == "Linux":
        version = platform.version()
    elif system == "Darwin":
        version = _macos_version()
    elif system == "Windows":
        version = _windows_version()
    else:
        version = platform.release()

    version = (version or "").strip()
    if not version:
        version = platform.release().strip() or UNKNOWN_VERSION
        logger.debug(f"No version reported for {system!r}, using {version!r}")
    return version


def platform_version_string(label: Optional[str] = None, system: Optional[str] = None) -> str:
    """Return ``"<label> <version>"`` for the host."""
    if not label:
        label = get_platform_label(system)
    return f"{label} {get_os_version(system)}"


def _macos_version() -> str:
    release, _, _ = platform.mac_ver()
    return release or platform.release()


def _windows_version() -> str:
    major, minor = _parse_version_pair(platform.version())
    if major is None:
        return platform.release()
    if major >= 10:
        return "10+"
    if (major, minor) in ((6, 2), (6, 3)):
        return "8"
    if (major, minor) == (6, 1):
        return "7"
    return platform.release()


def _parse_version_pair(version: str) -> Tuple[Optional[int], int]:
    """Parse the leading ``major.minor`` of a dotted version string."""
    parts = version.split(".")
    try:
        major = int(parts[0])
    except ValueError:
        return None, 0
    try:
        minor = int(parts[1]) if len(parts) > 1 else 0
    except ValueError:
        minor = 0
    return major, minor
