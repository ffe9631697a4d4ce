"""
Taerae logging setup.

Library modules log through loguru's shared ``logger``. Records from the
taerae package are disabled on import; ``setup_logging`` installs a stderr
sink and enables them.
"""

import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} <level>[{level}]</level> {message}"

# -v, -vv, -vvv
_LEVELS = ["WARNING", "INFO", "DEBUG", "TRACE"]


def level_for_verbosity(verbosity: int) -> str:
    """Map a CLI verbosity count to a loguru level name."""
    index = max(0, min(verbosity, len(_LEVELS) - 1))
    return _LEVELS[index]


def setup_logging(verbosity: int = 0, level: Optional[str] = None) -> None:
    """
    Replace loguru's default sink with a stderr sink.

    Args:
        verbosity: CLI verbosity count
        level: Explicit level name, overrides verbosity when given
    """
    logger.remove()
    logger.enable("taerae")
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level or level_for_verbosity(verbosity),
        colorize=sys.stderr.isatty(),
    )
