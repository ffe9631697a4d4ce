"""
In-process method channels.

The embedding environment owns registration: it hands out a ``Registrar``
and the plugin calls ``register(channel_name, handler)``. ``InMemoryRegistrar``
is a registrar backed by a ``BinaryMessenger`` living in the same process.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from loguru import logger

from taerae.channel.codec import JSONMethodCodec
from taerae.channel.handler import MethodCallHandler
from taerae.channel.messages import (
    NOT_IMPLEMENTED,
    ErrorResponse,
    MethodCall,
    MethodResponse,
    SuccessResponse,
)


BinaryHandler = Callable[[bytes], Optional[bytes]]


class BinaryMessenger:
    """Routes encoded messages to the handler bound to a channel name."""

    def __init__(self) -> None:
        self._handlers: Dict[str, BinaryHandler] = {}

    def set_message_handler(self, channel: str, handler: Optional[BinaryHandler]) -> None:
        """Bind a handler to a channel, or unbind it with None."""
        if handler is None:
            self._handlers.pop(channel, None)
        else:
            self._handlers[channel] = handler

    def send(self, channel: str, message: bytes) -> Optional[bytes]:
        """
        Deliver a message and return the reply.

        Returns:
            The reply bytes, or None if no handler is bound or the handler
            has nothing to say
        """
        handler = self._handlers.get(channel)
        if handler is None:
            logger.debug(f"No handler bound to channel '{channel}'")
            return None
        return handler(message)

    def channels(self) -> List[str]:
        """List channel names with a bound handler."""
        return list(self._handlers)


class MethodChannel:
    """A named channel carrying method calls encoded by a method codec."""

    def __init__(
        self,
        name: str,
        messenger: BinaryMessenger,
        codec: Optional[JSONMethodCodec] = None,
    ):
        self.name = name
        self.messenger = messenger
        self.codec = codec or JSONMethodCodec()

    def set_method_call_handler(self, handler: Optional[MethodCallHandler]) -> None:
        """Bind a method call handler to this channel, or unbind it with None."""
        if handler is None:
            self.messenger.set_message_handler(self.name, None)
            return

        def on_message(message: bytes) -> Optional[bytes]:
            call = self.codec.decode_method_call(message)
            response = self._dispatch(handler, call)
            return self._encode_response(response)

        self.messenger.set_message_handler(self.name, on_message)

    def invoke_method(self, method: str, arguments: Any = None) -> Any:
        """
        Call a method on the other side of the channel.

        Returns:
            The success value, or NOT_IMPLEMENTED if nothing handled the call

        Raises:
            MethodCallError: If the call was answered with an error envelope
        """
        message = self.codec.encode_method_call(MethodCall(method, arguments))
        reply = self.messenger.send(self.name, message)
        if reply is None:
            return NOT_IMPLEMENTED
        return self.codec.decode_envelope(reply)

    def _dispatch(self, handler: MethodCallHandler, call: MethodCall) -> MethodResponse:
        try:
            return handler.handle(call)
        except Exception as e:
            logger.warning(f"Method '{call.method}' on channel '{self.name}' failed: {e}")
            return ErrorResponse(code="error", message=str(e))

    def _encode_response(self, response: MethodResponse) -> Optional[bytes]:
        if isinstance(response, SuccessResponse):
            return self.codec.encode_success_envelope(response.value)
        if isinstance(response, ErrorResponse):
            return self.codec.encode_error_envelope(response)
        return None


class Registrar(ABC):
    """Registration hook supplied by the embedding environment."""

    @abstractmethod
    def register(self, channel_name: str, handler: MethodCallHandler) -> None:
        """Bind a handler to the named channel."""


class InMemoryRegistrar(Registrar):
    """Registrar whose channels live in a process-local messenger."""

    def __init__(
        self,
        messenger: Optional[BinaryMessenger] = None,
        codec: Optional[JSONMethodCodec] = None,
    ):
        self.messenger = messenger or BinaryMessenger()
        self.codec = codec or JSONMethodCodec()

    def register(self, channel_name: str, handler: MethodCallHandler) -> None:
        if channel_name in self.messenger.channels():
            logger.debug(f"Replacing handler on channel '{channel_name}'")
        self.channel(channel_name).set_method_call_handler(handler)
        logger.debug(f"Registered {type(handler).__name__} on channel '{channel_name}'")

    def channel(self, channel_name: str) -> MethodChannel:
        """Return a method channel sharing this registrar's messenger."""
        return MethodChannel(channel_name, self.messenger, self.codec)
