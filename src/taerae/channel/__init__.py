"""
Taerae Channel

Method call messages, codec, and in-process channels.
"""

from taerae.channel.codec import JSONMethodCodec
from taerae.channel.handler import MethodCallHandler
from taerae.channel.messages import (
    NOT_IMPLEMENTED,
    ErrorResponse,
    MethodCall,
    MethodResponse,
    SuccessResponse,
    is_not_implemented,
)
from taerae.channel.messenger import (
    BinaryMessenger,
    InMemoryRegistrar,
    MethodChannel,
    Registrar,
)

__all__ = [
    'NOT_IMPLEMENTED',
    'BinaryMessenger',
    'ErrorResponse',
    'InMemoryRegistrar',
    'JSONMethodCodec',
    'MethodCall',
    'MethodCallHandler',
    'MethodChannel',
    'MethodResponse',
    'Registrar',
    'SuccessResponse',
    'is_not_implemented',
]
