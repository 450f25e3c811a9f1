"""
OpenTok / AsyncOpenTok: main SDK clients.
"""

import asyncio
import ssl
from typing import Any, Optional, Union

import httpx

from opentok_sdk.archives import ArchivesAPI
from opentok_sdk.broadcasts import BroadcastsAPI
from opentok_sdk.models.archive import Archive, ArchiveList
from opentok_sdk.models.broadcast import Broadcast
from opentok_sdk.models.enums import ArchiveMode, MediaMode, OutputMode
from opentok_sdk.models.options import ArchiveLayout, Credentials, SignalPayload, StreamProperties
from opentok_sdk.models.session import Session
from opentok_sdk.models.stream import Stream, StreamList
from opentok_sdk.sessions import SessionsAPI
from opentok_sdk.signaling import SignalingAPI
from opentok_sdk.streams import StreamsAPI
from opentok_sdk.tokens import Role, TokenClaims, build_token
from opentok_sdk.transport.http import DEFAULT_BASE_URL, HttpClient


class AsyncOpenTok:
    """Async OpenTok client (primary).

    Token generation is local and synchronous; every REST call is a coroutine.
    """

    def __init__(
        self,
        api_key: int,
        api_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        tls_version: Optional[ssl.TLSVersion] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.credentials = Credentials(api_key=api_key, api_secret=api_secret)
        self.http = HttpClient(
            api_key=api_key,
            api_secret=api_secret,
            base_url=base_url,
            timeout=timeout,
            tls_version=tls_version,
            transport=transport,
        )
        self.sessions = SessionsAPI(self.http, api_key)
        self.archives = ArchivesAPI(self.http, api_key)
        self.broadcasts = BroadcastsAPI(self.http, api_key)
        self.streams = StreamsAPI(self.http, api_key)
        self.signaling = SignalingAPI(self.http, api_key)

    @property
    def api_key(self) -> int:
        return self.credentials.api_key

    def generate_token(
        self,
        session_id: str,
        role: Role = Role.PUBLISHER,
        expire_time: Optional[float] = None,
        data: Optional[str] = None,
        initial_layout_class_list: Union[list[str], str, None] = None,
    ) -> str:
        """Generate a signed token for a client connecting to ``session_id``."""
        claims = TokenClaims(
            session_id=session_id,
            role=role,
            expire_time=int(expire_time) if expire_time is not None else None,
            data=data,
            initial_layout_class_list=initial_layout_class_list,
        )
        return build_token(self.credentials, claims)

    async def create_session(
        self,
        media_mode: MediaMode = MediaMode.RELAYED,
        archive_mode: ArchiveMode = ArchiveMode.MANUAL,
        location: Optional[str] = None,
    ) -> Session:
        return await self.sessions.create(media_mode=media_mode, archive_mode=archive_mode, location=location)

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncOpenTok":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class OpenTok:
    """Sync wrapper around AsyncOpenTok. Runs the event loop internally."""

    def __init__(self, api_key: int, api_secret: str, **kwargs: Any):
        self._async = AsyncOpenTok(api_key, api_secret, **kwargs)
        self._loop = asyncio.new_event_loop()

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def api_key(self) -> int:
        return self._async.api_key

    def generate_token(self, session_id: str, **kwargs: Any) -> str:
        return self._async.generate_token(session_id, **kwargs)

    def create_session(self, **kwargs: Any) -> Session:
        return self._run(self._async.create_session(**kwargs))

    def start_archive(
        self,
        session_id: str,
        name: Optional[str] = None,
        has_video: bool = True,
        has_audio: bool = True,
        output_mode: OutputMode = OutputMode.COMPOSED,
        resolution: Optional[str] = None,
        layout: Optional[ArchiveLayout] = None,
    ) -> Archive:
        return self._run(self._async.archives.start(
            session_id, name=name, has_video=has_video, has_audio=has_audio,
            output_mode=output_mode, resolution=resolution, layout=layout,
        ))

    def stop_archive(self, archive_id: str) -> Archive:
        return self._run(self._async.archives.stop(archive_id))

    def get_archive(self, archive_id: str) -> Archive:
        return self._run(self._async.archives.get(archive_id))

    def list_archives(self, offset: int = 0, count: Optional[int] = None, session_id: Optional[str] = None) -> ArchiveList:
        return self._run(self._async.archives.list(offset=offset, count=count, session_id=session_id))

    def delete_archive(self, archive_id: str) -> None:
        self._run(self._async.archives.delete(archive_id))

    def start_broadcast(self, session_id: str, **kwargs: Any) -> Broadcast:
        return self._run(self._async.broadcasts.start(session_id, **kwargs))

    def stop_broadcast(self, broadcast_id: str) -> Broadcast:
        return self._run(self._async.broadcasts.stop(broadcast_id))

    def get_broadcast(self, broadcast_id: str) -> Broadcast:
        return self._run(self._async.broadcasts.get(broadcast_id))

    def get_stream(self, session_id: str, stream_id: str) -> Stream:
        return self._run(self._async.streams.get(session_id, stream_id))

    def list_streams(self, session_id: str) -> StreamList:
        return self._run(self._async.streams.list(session_id))

    def set_stream_class_lists(self, session_id: str, properties: list[StreamProperties]) -> None:
        self._run(self._async.streams.set_class_lists(session_id, properties))

    def signal(self, session_id: str, payload: SignalPayload, connection_id: Optional[str] = None) -> None:
        self._run(self._async.signaling.signal(session_id, payload, connection_id))

    def force_disconnect(self, session_id: str, connection_id: str) -> None:
        self._run(self._async.signaling.force_disconnect(session_id, connection_id))

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

