"""
Method channel message types.

A call names the requested operation; the answer is a success value, an
error, or the not-implemented marker.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class MethodCall:
    """A request arriving on a method channel."""

    method: str
    arguments: Any = None


@dataclass(frozen=True)
class SuccessResponse:
    """Successful result of a method call."""

    value: Any


@dataclass(frozen=True)
class ErrorResponse:
    """A method implementation failed while handling a call."""

    code: str
    message: Optional[str] = None
    details: Any = None


class NotImplementedMarker:
    """
    Answer for a method name with no handler.

    There is a single instance, ``NOT_IMPLEMENTED``. It is falsy and never
    equal to any string, so callers can branch on it without ambiguity.
    """

    _instance: Optional["NotImplementedMarker"] = None

    def __new__(cls) -> "NotImplementedMarker":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_IMPLEMENTED"


NOT_IMPLEMENTED = NotImplementedMarker()

MethodResponse = Union[SuccessResponse, ErrorResponse, NotImplementedMarker]


def is_not_implemented(response: Any) -> bool:
    """Check whether a response is the not-implemented marker."""
    return response is NOT_IMPLEMENTED
