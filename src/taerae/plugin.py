"""
Taerae platform version plugin.

Answers ``getPlatformVersion`` with ``"<label> <version>"`` for the host,
e.g. ``"macOS 14.2"``. Any other method gets the not-implemented marker.
"""

from typing import Dict, Optional

from loguru import logger

from taerae.channel.handler import MethodCallHandler, MethodImpl
from taerae.channel.messages import MethodCall, MethodResponse, SuccessResponse
from taerae.channel.messenger import Registrar
from taerae.config import ChannelConfig, get_config
from taerae.platform.version import platform_version_string


GET_PLATFORM_VERSION = "getPlatformVersion"


class VersionQueryHandler(MethodCallHandler):
    """
    Reports the host operating system version.

    Holds no mutable state, so one instance may serve concurrent calls.
    """

    def __init__(self, label: Optional[str] = None):
        self.label = label
        super().__init__()

    def method_table(self) -> Dict[str, MethodImpl]:
        return {
            GET_PLATFORM_VERSION: self.get_platform_version,
        }

    def get_platform_version(self, call: MethodCall) -> MethodResponse:
        """Return the platform label and version joined by a space."""
        return SuccessResponse(platform_version_string(label=self.label))


def register_with_registrar(
    registrar: Registrar,
    config: Optional[ChannelConfig] = None,
) -> VersionQueryHandler:
    """
    Create the handler and bind it on the configured channel.

    Args:
        registrar: Registration hook of the embedding environment
        config: Plugin settings (default: current global config)

    Returns:
        The registered handler
    """
    config = config or get_config()
    handler = VersionQueryHandler(label=config.platform_label)
    registrar.register(config.channel_name, handler)
    logger.info(f"Platform version plugin registered on '{config.channel_name}'")
    return handler
