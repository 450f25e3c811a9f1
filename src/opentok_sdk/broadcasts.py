"""
Live streaming broadcasts: v2/project/<key>/broadcast.
"""

from typing import Optional

from opentok_sdk.models.broadcast import Broadcast
from opentok_sdk.models.options import ArchiveLayout, BroadcastOptions, Rtmp
from opentok_sdk.transport.http import HttpClient
from opentok_sdk.transport import request as compose


class BroadcastsAPI:
    def __init__(self, http: HttpClient, api_key: int):
        self._http = http
        self._api_key = api_key

    async def start(
        self,
        session_id: str,
        hls: bool = True,
        rtmp_list: Optional[list[Rtmp]] = None,
        resolution: Optional[str] = None,
        max_duration: int = 7200,
        layout: Optional[ArchiveLayout] = None,
    ) -> Broadcast:
        options = BroadcastOptions(
            session_id=session_id,
            hls=hls,
            rtmp=rtmp_list or [],
            resolution=resolution,
            max_duration=max_duration,
            layout=layout,
        )
        result = await self._http.send(compose.start_broadcast_request(self._api_key, options))
        return Broadcast.model_validate(result)

    async def stop(self, broadcast_id: str) -> Broadcast:
        result = await self._http.send(compose.stop_broadcast_request(self._api_key, broadcast_id))
        return Broadcast.model_validate(result)

    async def get(self, broadcast_id: str) -> Broadcast:
        result = await self._http.send(compose.get_broadcast_request(self._api_key, broadcast_id))
        return Broadcast.model_validate(result)

    async def set_layout(self, broadcast_id: str, layout: ArchiveLayout) -> None:
        await self._http.send(compose.set_broadcast_layout_request(self._api_key, broadcast_id, layout))
