"""
Host platform queries.

This package answers which operating system family the process runs on and
which version it reports, for use by the platform version handler.
"""

from taerae.platform.version import (
    PLATFORM_LABELS,
    get_os_version,
    get_platform_label,
    platform_version_string,
)

__all__ = [
    'PLATFORM_LABELS',
    'get_os_version',
    'get_platform_label',
    'platform_version_string',
]
