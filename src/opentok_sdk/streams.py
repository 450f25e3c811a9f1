"""
Streams REST API: v2/project/<key>/session/<sid>/stream.
"""

from __future__ import annotations

from opentok_sdk.errors import ArgumentError
from opentok_sdk.models.options import StreamProperties
from opentok_sdk.models.stream import Stream, StreamList
from opentok_sdk.transport.http import HttpClient
from opentok_sdk.transport import request as compose
from opentok_sdk.validation import require_session_id


class StreamsAPI:
    def __init__(self, http: HttpClient, api_key: int):
        self._http = http
        self._api_key = api_key

    async def get(self, session_id: str, stream_id: str) -> Stream:
        if not session_id or not stream_id:
            raise ArgumentError("Session id and stream id cannot be empty or null")
        result = await self._http.send(compose.get_stream_request(self._api_key, session_id, stream_id))
        return Stream.model_validate(result)

    async def list(self, session_id: str) -> StreamList:
        require_session_id(session_id)
        result = await self._http.send(compose.list_streams_request(self._api_key, session_id))
        return StreamList.model_validate(result)

    async def set_class_lists(self, session_id: str, properties: list[StreamProperties]) -> None:
        """Replace the layout classes of the given streams."""
        require_session_id(session_id)
        if not properties:
            raise ArgumentError("At least one stream must be given")
        await self._http.send(compose.set_stream_class_lists_request(self._api_key, session_id, properties))
