# Copyright (c) 2024 Taerae Contributors
# MIT License

"""
Taerae: host platform version plugin.

Answers ``getPlatformVersion`` calls arriving on a named method channel with
the host operating system's label and version string. Every other method
receives the not-implemented marker.

Features:
    - Explicit method dispatch table with a not-implemented default
    - JSON method codec for calls and result envelopes
    - In-process messenger and registrar for embedding and testing
"""

from __future__ import annotations

from loguru import logger

from taerae.release import __version__, __author__

# Silent when embedded; the CLI enables output in setup_logging
logger.disable("taerae")

__all__ = [
    "__version__",
    "__author__",
]
