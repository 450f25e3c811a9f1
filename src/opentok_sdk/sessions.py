"""
Sessions REST API: session/create.
"""

import logging
from typing import Optional

from opentok_sdk.errors import OpenTokError
from opentok_sdk.models.enums import ArchiveMode, MediaMode
from opentok_sdk.models.options import SessionOptions
from opentok_sdk.models.session import Session, SessionCreated
from opentok_sdk.transport.http import HttpClient
from opentok_sdk.transport.request import create_session_request

logger = logging.getLogger(__name__)


class SessionsAPI:
    def __init__(self, http: HttpClient, api_key: int):
        self._http = http
        self._api_key = api_key

    async def create(
        self,
        media_mode: MediaMode = MediaMode.RELAYED,
        archive_mode: ArchiveMode = ArchiveMode.MANUAL,
        location: Optional[str] = None,
    ) -> Session:
        """Create a session. ALWAYS archive mode requires ROUTED media."""
        options = SessionOptions(media_mode=media_mode, archive_mode=archive_mode, location=location)
        return await self.create_with(options)

    async def create_with(self, options: SessionOptions) -> Session:
        result = await self._http.send(create_session_request(options))
        if isinstance(result, list):
            result = result[0] if result else None
        if not isinstance(result, dict):
            raise OpenTokError("session_error", "Failed to create session: empty response")
        created = SessionCreated.model_validate(result)
        logger.info("Created session %s", created.session_id)
        return Session(
            id=created.session_id,
            api_key=self._api_key,
            media_mode=options.media_mode,
            archive_mode=options.archive_mode,
            location=options.location or "",
        )
