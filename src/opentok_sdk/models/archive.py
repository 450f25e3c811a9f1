"""
Archive models: v2/project/<key>/archive.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from opentok_sdk.models.enums import ArchiveStatus, OutputMode


class Archive(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    session_id: str = ""
    partner_id: Optional[int] = None
    created_at: int = 0  # epoch milliseconds
    duration: int = 0
    name: Optional[str] = ""
    reason: Optional[str] = ""
    size: int = 0
    status: ArchiveStatus = ArchiveStatus.UNKNOWN
    url: Optional[str] = None
    has_audio: bool = True
    has_video: bool = True
    output_mode: OutputMode = OutputMode.COMPOSED
    resolution: Optional[str] = None

    @field_validator("status", mode="before")
    @classmethod
    def _unknown_status(cls, value: object) -> object:
        if isinstance(value, str) and value not in ArchiveStatus._value2member_map_:
            return ArchiveStatus.UNKNOWN
        return value


class ArchiveList(BaseModel):
    count: int = 0
    items: list[Archive] = []

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Archive:
        return self.items[index]
