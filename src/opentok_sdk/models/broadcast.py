"""
Broadcast models: v2/project/<key>/broadcast.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from opentok_sdk.models.enums import BroadcastStatus


class RtmpTarget(BaseModel):
    """RTMP output as reported back by the service."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    server_url: str = ""
    stream_name: str = ""
    status: Optional[str] = None


class BroadcastUrls(BaseModel):
    hls: Optional[str] = None
    rtmp: list[RtmpTarget] = []


class Broadcast(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    session_id: str = ""
    project_id: Optional[int] = None
    created_at: int = 0
    updated_at: int = 0
    resolution: Optional[str] = None
    status: Optional[BroadcastStatus] = None
    broadcast_urls: Optional[BroadcastUrls] = None

    @field_validator("status", mode="before")
    @classmethod
    def _unknown_status(cls, value: object) -> object:
        if isinstance(value, str) and value not in BroadcastStatus._value2member_map_:
            return BroadcastStatus.UNKNOWN
        return value

    @property
    def hls(self) -> Optional[str]:
        return self.broadcast_urls.hls if self.broadcast_urls else None

    @property
    def rtmp_list(self) -> list[RtmpTarget]:
        return self.broadcast_urls.rtmp if self.broadcast_urls else []
