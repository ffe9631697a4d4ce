"""
Method call handler base.

Handlers answer calls through an explicit table of method names; any name
missing from the table gets the not-implemented marker.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List

from taerae.channel.messages import NOT_IMPLEMENTED, MethodCall, MethodResponse


MethodImpl = Callable[[MethodCall], MethodResponse]


class MethodCallHandler(ABC):
    """
    Base class for method call handlers.

    Subclasses return their dispatch table from ``method_table()``; it is
    built once per instance and never modified afterwards.
    """

    def __init__(self) -> None:
        self._methods: Dict[str, MethodImpl] = dict(self.method_table())

    @abstractmethod
    def method_table(self) -> Dict[str, MethodImpl]:
        """
        Return the mapping of recognized method names to implementations.

        Returns:
            Dict of method name -> callable taking the MethodCall
        """

    def handle(self, call: MethodCall) -> MethodResponse:
        """Answer a single method call."""
        impl = self._methods.get(call.method, self.not_implemented)
        return impl(call)

    def not_implemented(self, call: MethodCall) -> MethodResponse:
        """Default entry for unrecognized method names."""
        return NOT_IMPLEMENTED

    def methods(self) -> List[str]:
        """List the recognized method names."""
        return list(self._methods)
