"""
opentok-sdk: OpenTok server SDK for Python.

Signed session tokens and REST calls for sessions, archives, broadcasts,
streams and signaling.
"""

from opentok_sdk.client import OpenTok, AsyncOpenTok
from opentok_sdk.errors import OpenTokError, ArgumentError, DecodeError, TlsVersionError, RequestError
from opentok_sdk.models.enums import ArchiveMode, ArchiveStatus, BroadcastStatus, LayoutType, MediaMode, OutputMode
from opentok_sdk.models.options import ArchiveLayout, Rtmp, SignalPayload, StreamProperties
from opentok_sdk.tokens import Role

__version__ = "0.1.0"
__all__ = [
    "OpenTok",
    "AsyncOpenTok",
    "OpenTokError",
    "ArgumentError",
    "DecodeError",
    "TlsVersionError",
    "RequestError",
    "ArchiveMode",
    "ArchiveStatus",
    "BroadcastStatus",
    "LayoutType",
    "MediaMode",
    "OutputMode",
    "ArchiveLayout",
    "Rtmp",
    "SignalPayload",
    "StreamProperties",
    "Role",
]
