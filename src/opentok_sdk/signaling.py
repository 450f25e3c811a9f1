"""
Signaling and moderation: send signals to clients, force disconnects.
"""

from typing import Optional

from opentok_sdk.models.options import SignalPayload
from opentok_sdk.transport.http import HttpClient
from opentok_sdk.transport import request as compose
from opentok_sdk.validation import validate_connection_target, validate_signal_target


class SignalingAPI:
    def __init__(self, http: HttpClient, api_key: int):
        self._http = http
        self._api_key = api_key

    async def signal(
        self, session_id: str, payload: SignalPayload, connection_id: Optional[str] = None,
    ) -> None:
        """Signal every client in the session, or one connection when ``connection_id`` is given."""
        validate_signal_target(session_id)
        await self._http.send(compose.signal_request(self._api_key, session_id, payload, connection_id))

    async def force_disconnect(self, session_id: str, connection_id: str) -> None:
        validate_connection_target(session_id, connection_id)
        await self._http.send(compose.force_disconnect_request(self._api_key, session_id, connection_id))
