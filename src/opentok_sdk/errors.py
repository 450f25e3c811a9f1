"""
OpenTok error types.

Every error carries a stable ``code`` next to its message. Message text of
``ArgumentError`` and ``TlsVersionError`` is matched by callers, keep it exact.
"""

from typing import Any, Optional

TLS_REMEDIATION_MESSAGE = (
    "Error with request submission.\n"
    "This application appears to not support TLS1.2.\n"
    "Please enable TLS 1.2 and try again."
)


class OpenTokError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class ArgumentError(OpenTokError):
    """Invalid or contradictory parameters, detected before any request is sent."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("argument_error", message, details)


class DecodeError(OpenTokError):
    def __init__(self, message: str):
        super().__init__("decode_error", message)


class TlsVersionError(OpenTokError):
    def __init__(self, message: str = TLS_REMEDIATION_MESSAGE):
        super().__init__("tls_version_error", message)


class RequestError(OpenTokError):
    def __init__(self, status_code: int, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__("http_error", message, details)
        self.status_code = status_code

