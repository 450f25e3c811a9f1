"""
Base64 and HMAC-SHA1 primitives used by token signing, plus the structural
decoder for session identifiers.
"""

import base64
import binascii
import hashlib
import hmac
from typing import Union

from opentok_sdk.errors import DecodeError

# Session ids start with a two character sentinel such as "1_" or "2_".
SESSION_ID_SENTINEL_LENGTH = 2
SESSION_ID_FIELD_SEPARATOR = "~"


def _to_bytes(value: Union[str, bytes]) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def encode_base64(data: Union[str, bytes]) -> str:
    """Standard alphabet, padded. No URL-safe transform."""
    return base64.b64encode(_to_bytes(data)).decode("ascii")


def decode_base64(text: str, altchars: Union[bytes, None] = None) -> bytes:
    try:
        return base64.b64decode(text, altchars=altchars, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 input: {e}") from e


def hmac_sha1(secret: Union[str, bytes], message: Union[str, bytes]) -> bytes:
    return hmac.new(_to_bytes(secret), _to_bytes(message), hashlib.sha1).digest()


def decode_session_id(session_id: str) -> list[str]:
    """Decode a session id into its ``~`` separated fields.

    The layout is ``<sentinel><base64url(fields)>`` with the padding stripped.
    The second field is the partner (api key) the session belongs to; an id
    that does not expose a numeric partner field is rejected.
    """
    if not session_id or len(session_id) <= SESSION_ID_SENTINEL_LENGTH:
        raise DecodeError("Session id is too short to decode")

    encoded = session_id[SESSION_ID_SENTINEL_LENGTH:]
    encoded += "=" * (-len(encoded) % 4)
    raw = decode_base64(encoded, altchars=b"-_")
    try:
        fields = raw.decode("utf-8").split(SESSION_ID_FIELD_SEPARATOR)
    except UnicodeDecodeError as e:
        raise DecodeError("Session id does not decode to text") from e

    if len(fields) < 2 or not (fields[1].isascii() and fields[1].isdigit()):
        raise DecodeError("Session id has no partner component")
    return fields


def session_partner_id(session_id: str) -> int:
    return int(decode_session_id(session_id)[1])
