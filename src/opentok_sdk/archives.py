"""
Archives REST API: v2/project/<key>/archive.
"""

from __future__ import annotations

from typing import Optional

from opentok_sdk.models.archive import Archive, ArchiveList
from opentok_sdk.models.enums import OutputMode
from opentok_sdk.models.options import ArchiveLayout, ArchiveOptions, ArchiveQuery
from opentok_sdk.transport.http import HttpClient
from opentok_sdk.transport import request as compose


class ArchivesAPI:
    def __init__(self, http: HttpClient, api_key: int):
        self._http = http
        self._api_key = api_key

    async def start(
        self,
        session_id: str,
        name: Optional[str] = None,
        has_video: bool = True,
        has_audio: bool = True,
        output_mode: OutputMode = OutputMode.COMPOSED,
        resolution: Optional[str] = None,
        layout: Optional[ArchiveLayout] = None,
    ) -> Archive:
        """Start recording a session. Resolution and layout apply to composed output only."""
        options = ArchiveOptions(
            session_id=session_id,
            name=name,
            has_video=has_video,
            has_audio=has_audio,
            output_mode=output_mode,
            resolution=resolution,
            layout=layout,
        )
        result = await self._http.send(compose.start_archive_request(self._api_key, options))
        return Archive.model_validate(result)

    async def stop(self, archive_id: str) -> Archive:
        result = await self._http.send(compose.stop_archive_request(self._api_key, archive_id))
        return Archive.model_validate(result)

    async def get(self, archive_id: str) -> Archive:
        result = await self._http.send(compose.get_archive_request(self._api_key, archive_id))
        return Archive.model_validate(result)

    async def list(self, offset: int = 0, count: Optional[int] = None, session_id: Optional[str] = None) -> ArchiveList:
        """List archives, newest first. ``session_id`` narrows the list to one session."""
        query = ArchiveQuery(offset=offset, count=count, session_id=session_id)
        result = await self._http.send(compose.list_archives_request(self._api_key, query))
        return ArchiveList.model_validate(result)

    async def delete(self, archive_id: str) -> None:
        await self._http.send(compose.delete_archive_request(self._api_key, archive_id))

    async def set_layout(self, archive_id: str, layout: ArchiveLayout) -> None:
        await self._http.send(compose.set_archive_layout_request(self._api_key, archive_id, layout))
