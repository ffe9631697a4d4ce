# Copyright (c) 2024 Taerae Contributors
# MIT License

"""
Taerae Error Classes.

All custom exceptions for clear error handling and CLI exit codes.
An unrecognized method is not an error: it is answered with the
not-implemented marker and never raised.
"""

from __future__ import annotations

import enum
from typing import Any


class ExitCode(enum.IntEnum):
    """Exit codes returned by the taerae CLI."""

    SUCCESS = 0
    GENERIC_ERROR = 1
    METHOD_FAILED = 2
    CONFIG_ERROR = 3
    NOT_IMPLEMENTED = 4
    KEYBOARD_INTERRUPT = 130


class TaeraeError(Exception):
    """Base exception for all Taerae errors."""

    exit_code: int = ExitCode.GENERIC_ERROR

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class CodecError(TaeraeError):
    """A channel message could not be encoded or decoded."""

    exit_code: int = ExitCode.GENERIC_ERROR

    def __init__(self, message: str, payload: bytes | None = None) -> None:
        self.payload = payload
        details = None
        if payload is not None:
            # Truncate long payloads
            text = payload[:100].decode("utf-8", errors="replace")
            details = f"Payload: {text}..." if len(payload) > 100 else f"Payload: {text}"
        super().__init__(f"Codec error: {message}", details)


class MethodCallError(TaeraeError):
    """The platform side answered a method call with an error envelope."""

    exit_code: int = ExitCode.METHOD_FAILED

    def __init__(
        self,
        code: str,
        message: str | None = None,
        details: Any = None,
    ) -> None:
        self.code = code
        self.error_message = message
        self.error_details = details
        text = f"Method call failed [{code}]"
        if message:
            text += f": {message}"
        super().__init__(text, str(details) if details is not None else None)


class ConfigError(TaeraeError):
    """Error in a configuration file or value."""

    exit_code: int = ExitCode.CONFIG_ERROR

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        location = f" in {file_path}" if file_path else ""
        super().__init__(f"Config error{location}: {message}")
