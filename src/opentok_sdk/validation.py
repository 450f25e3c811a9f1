"""
Request parameter validation.

Pure checks run before any request is built. Each raises ArgumentError with a
message callers may match on.
"""

import ipaddress
from typing import Optional

from opentok_sdk.codec import decode_session_id
from opentok_sdk.errors import ArgumentError, DecodeError
from opentok_sdk.models.enums import ArchiveMode, LayoutType, MediaMode, OutputMode

INVALID_SESSION_ID = "Session Id is not valid"
NEGATIVE_COUNT = "count cannot be smaller than 0"
INVALID_LAYOUT = "Could not set layout, stylesheet must be set if and only if type is custom"

MAX_CONNECTION_DATA_BYTES = 1000
MAX_TOKEN_LIFETIME_SECONDS = 30 * 24 * 60 * 60
VALID_RESOLUTIONS = ("640x480", "1280x720")


def require_session_id(session_id: Optional[str]) -> str:
    if not session_id:
        raise ArgumentError("Session id cannot be empty or null")
    return session_id


def is_valid_session_id(session_id: Optional[str]) -> bool:
    if not session_id:
        return False
    try:
        decode_session_id(session_id)
    except DecodeError:
        return False
    return True


def validate_session_id(session_id: Optional[str]) -> str:
    require_session_id(session_id)
    if not is_valid_session_id(session_id):
        raise ArgumentError(INVALID_SESSION_ID)
    return session_id  # type: ignore[return-value]


def validate_session_modes(media_mode: MediaMode, archive_mode: ArchiveMode) -> None:
    if archive_mode == ArchiveMode.ALWAYS and media_mode != MediaMode.ROUTED:
        raise ArgumentError("A session with always archive mode must also have the routed media mode.")


def validate_location(location: Optional[str]) -> Optional[str]:
    """Only IPv4 literals are accepted as a location hint. Empty means no hint."""
    if not location:
        return None
    try:
        ipaddress.IPv4Address(location)
    except ValueError:
        raise ArgumentError(f"Invalid IP address: {location}")
    return location


def validate_count(count: Optional[int]) -> Optional[int]:
    if count is not None and count < 0:
        raise ArgumentError(NEGATIVE_COUNT)
    return count


def validate_offset(offset: int) -> int:
    if offset < 0:
        raise ArgumentError("offset cannot be smaller than 0")
    return offset


def validate_layout(layout_type: LayoutType, stylesheet: Optional[str]) -> None:
    if (layout_type == LayoutType.CUSTOM) != bool(stylesheet):
        raise ArgumentError(INVALID_LAYOUT)


def validate_resolution(resolution: Optional[str]) -> Optional[str]:
    if resolution is not None and resolution not in VALID_RESOLUTIONS:
        raise ArgumentError(f"Resolution must be one of {', '.join(VALID_RESOLUTIONS)}")
    return resolution


def validate_output_resolution(output_mode: OutputMode, resolution: Optional[str]) -> None:
    if output_mode == OutputMode.INDIVIDUAL and resolution:
        raise ArgumentError("Resolution can't be specified for Individual Archives")


def validate_connection_target(session_id: Optional[str], connection_id: Optional[str]) -> None:
    if not session_id or not connection_id:
        raise ArgumentError("Session id and connection id cannot be empty or null")


def validate_signal_target(session_id: Optional[str]) -> None:
    if not session_id:
        raise ArgumentError("Session id cannot be empty or null")


def validate_token_data(data: Optional[str]) -> Optional[str]:
    if data is not None and len(data.encode("utf-8")) > MAX_CONNECTION_DATA_BYTES:
        raise ArgumentError(
            f"Invalid data for token generation, must be a string of at most {MAX_CONNECTION_DATA_BYTES} bytes"
        )
    return data


def validate_expire_time(create_time: int, expire_time: int) -> int:
    if expire_time <= create_time:
        raise ArgumentError(f"Invalid expiration time for token: {expire_time}, must be in the future")
    if expire_time >= create_time + MAX_TOKEN_LIFETIME_SECONDS:
        raise ArgumentError(f"Invalid expiration time for token: {expire_time}, must be less than 30 days from now")
    return expire_time
