"""
JSON method codec.

Wire format:
    method call:       {"method": "<name>", "args": <json>}
    success envelope:  [<result>]
    error envelope:    ["<code>", "<message>", <details>]

A not-implemented answer has no envelope at all: the reply is empty.
"""

import json
from typing import Any

from taerae.channel.messages import ErrorResponse, MethodCall
from taerae.errors import CodecError, MethodCallError


class JSONMethodCodec:
    """Encodes method calls and result envelopes as UTF-8 JSON."""

    encoding = "utf-8"

    def encode_method_call(self, call: MethodCall) -> bytes:
        """Encode a method call."""
        return self._dump({"method": call.method, "args": call.arguments})

    def decode_method_call(self, message: bytes) -> MethodCall:
        """
        Decode a method call.

        Raises:
            CodecError: If the message is not a JSON object with a string
                ``method`` member
        """
        data = self._load(message)
        if not isinstance(data, dict):
            raise CodecError("Method call must be a JSON object", message)

        method = data.get("method")
        if not isinstance(method, str):
            raise CodecError("Method call has no string 'method' member", message)

        return MethodCall(method=method, arguments=data.get("args"))

    def encode_success_envelope(self, result: Any) -> bytes:
        """Encode a successful result."""
        return self._dump([result])

    def encode_error_envelope(self, error: ErrorResponse) -> bytes:
        """Encode an error result."""
        return self._dump([error.code, error.message, error.details])

    def decode_envelope(self, envelope: bytes) -> Any:
        """
        Decode a result envelope.

        Returns:
            The result carried by a success envelope

        Raises:
            MethodCallError: If the envelope is an error envelope
            CodecError: If the envelope is malformed
        """
        data = self._load(envelope)
        if not isinstance(data, list):
            raise CodecError("Envelope must be a JSON array", envelope)

        if len(data) == 1:
            return data[0]

        if len(data) == 3 and isinstance(data[0], str) and (
            data[1] is None or isinstance(data[1], str)
        ):
            raise MethodCallError(data[0], data[1], data[2])

        raise CodecError(f"Invalid envelope of length {len(data)}", envelope)

    def _dump(self, data: Any) -> bytes:
        try:
            return json.dumps(data, separators=(",", ":")).encode(self.encoding)
        except (TypeError, ValueError) as e:
            raise CodecError(f"Value is not JSON serializable: {e}")

    def _load(self, message: bytes) -> Any:
        try:
            return json.loads(message.decode(self.encoding))
        except (UnicodeDecodeError, ValueError) as e:
            raise CodecError(f"Invalid JSON message: {e}", message)
