"""
Session models: session/create.
"""

from typing import Optional
from pydantic import BaseModel

from opentok_sdk.models.enums import ArchiveMode, MediaMode


class SessionCreated(BaseModel):
    """One element of the session/create reply. Extra fields are ignored."""
    session_id: str
    partner_id: Optional[str] = None
    project_id: Optional[str] = None
    create_dt: Optional[str] = None
    media_server_url: Optional[str] = None


class Session(BaseModel):
    id: str
    api_key: int
    media_mode: MediaMode = MediaMode.RELAYED
    archive_mode: ArchiveMode = ArchiveMode.MANUAL
    location: str = ""
