"""
Session access tokens.

A token is ``T1==`` followed by base64 of
``partner_id=<key>&sig=<hex hmac-sha1>&<claims>``, where the claims are
``&``-joined ``key=value`` pairs signed with the api secret.
"""

import logging
import secrets
import time
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from opentok_sdk import validation
from opentok_sdk.codec import decode_base64, encode_base64, hmac_sha1
from opentok_sdk.errors import DecodeError
from opentok_sdk.models.options import Credentials

logger = logging.getLogger(__name__)

TOKEN_SENTINEL = "T1=="
DEFAULT_TOKEN_LIFETIME_SECONDS = 24 * 60 * 60
NONCE_UPPER_BOUND = 1_000_000


class Role(str, Enum):
    SUBSCRIBER = "subscriber"
    PUBLISHER = "publisher"
    MODERATOR = "moderator"


class TokenClaims(BaseModel):
    """Caller-supplied part of a token. Nonce and create time are added at build time."""

    model_config = ConfigDict(frozen=True)

    session_id: Optional[str] = None
    role: Role = Role.PUBLISHER
    expire_time: Optional[int] = None
    data: Optional[str] = None
    initial_layout_class_list: Union[list[str], str, None] = Field(default=None)


def _generate_nonce() -> str:
    return str(secrets.randbelow(NONCE_UPPER_BOUND))


def _layout_classes(value: Union[list[str], str, None]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    return " ".join(value) or None


def build_token(credentials: Credentials, claims: TokenClaims, now: Optional[float] = None) -> str:
    """Sign ``claims`` with the credentials' secret and return the token string."""
    session_id = validation.validate_session_id(claims.session_id)

    create_time = int(now if now is not None else time.time())
    if claims.expire_time is None:
        expire_time = create_time + DEFAULT_TOKEN_LIFETIME_SECONDS
    else:
        expire_time = validation.validate_expire_time(create_time, int(claims.expire_time))
    connection_data = validation.validate_token_data(claims.data)

    fields = [
        ("session_id", session_id),
        ("create_time", str(create_time)),
        ("expire_time", str(expire_time)),
        ("nonce", _generate_nonce()),
        ("role", claims.role.value),
    ]
    if connection_data is not None:
        fields.append(("connection_data", connection_data))
    layout_classes = _layout_classes(claims.initial_layout_class_list)
    if layout_classes is not None:
        fields.append(("initial_layout_class_list", layout_classes))

    data_string = "&".join(f"{key}={value}" for key, value in fields)
    sig = hmac_sha1(credentials.api_secret, data_string).hex()
    logger.debug("Signed token for session %s with role %s", session_id, claims.role.value)

    return TOKEN_SENTINEL + encode_base64(f"partner_id={credentials.api_key}&sig={sig}&{data_string}")


def decode_token(token: str) -> dict[str, str]:
    """Split a token back into its fields. Does not verify the signature."""
    if not token or not token.startswith(TOKEN_SENTINEL):
        raise DecodeError(f"Token must start with {TOKEN_SENTINEL}")
    try:
        decoded = decode_base64(token[len(TOKEN_SENTINEL):]).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("Token payload is not text") from e

    fields: dict[str, str] = {}
    for part in decoded.split("&"):
        key, sep, value = part.partition("=")
        if not sep:
            raise DecodeError(f"Malformed token field: {part!r}")
        fields[key] = value
    return fields


def verify_token(credentials: Credentials, token: str) -> bool:
    """Check that a token was signed with ``credentials``.

    Only the leading ``partner_id`` and ``sig`` fields are parsed; the signed
    remainder is hashed as-is, since claim values may contain ``&``.
    """
    if not token or not token.startswith(TOKEN_SENTINEL):
        raise DecodeError(f"Token must start with {TOKEN_SENTINEL}")
    try:
        payload = decode_base64(token[len(TOKEN_SENTINEL):]).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError("Token payload is not text") from e

    parts = payload.split("&", 2)
    if len(parts) != 3:
        return False
    partner, sig, data_string = parts
    if partner != f"partner_id={credentials.api_key}" or not sig.startswith("sig="):
        return False
    expected = hmac_sha1(credentials.api_secret, data_string).hex()
    return secrets.compare_digest(expected, sig[len("sig="):])
