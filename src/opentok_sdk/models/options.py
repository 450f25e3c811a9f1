"""
Request option models.

Each model validates itself on construction, so an instance that exists is
always a legal set of request parameters. Violations raise ArgumentError.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator

from opentok_sdk import validation
from opentok_sdk.errors import ArgumentError
from opentok_sdk.models.enums import ArchiveMode, LayoutType, MediaMode, OutputMode

MAX_RTMP_TARGETS = 5


class Credentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: int
    api_secret: str

    @model_validator(mode="after")
    def _check(self) -> "Credentials":
        if self.api_key < 1:
            raise ArgumentError("api_key must be a positive integer")
        if not self.api_secret:
            raise ArgumentError("api_secret cannot be empty")
        return self


class ArchiveLayout(BaseModel):
    """Layout of a composed archive or broadcast.

    Serializes to ``{"type": ...}``; the ``stylesheet`` key is only present
    for the custom type.
    """

    model_config = ConfigDict(frozen=True)

    type: LayoutType = LayoutType.BEST_FIT
    stylesheet: Optional[str] = None

    @model_validator(mode="after")
    def _check_stylesheet(self) -> "ArchiveLayout":
        validation.validate_layout(self.type, self.stylesheet)
        return self

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        body: dict[str, Any] = {"type": self.type.value}
        if self.type == LayoutType.CUSTOM:
            body["stylesheet"] = self.stylesheet
        return body

    @classmethod
    def of(cls, layout_type: LayoutType) -> "ArchiveLayout":
        return cls(type=layout_type)

    @classmethod
    def custom(cls, stylesheet: str) -> "ArchiveLayout":
        return cls(type=LayoutType.CUSTOM, stylesheet=stylesheet)


class SessionOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    media_mode: MediaMode = MediaMode.RELAYED
    archive_mode: ArchiveMode = ArchiveMode.MANUAL
    location: Optional[str] = None

    @model_validator(mode="after")
    def _check(self) -> "SessionOptions":
        validation.validate_session_modes(self.media_mode, self.archive_mode)
        validation.validate_location(self.location)
        return self


class ArchiveQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: int = 0
    count: Optional[int] = None
    session_id: Optional[str] = None

    @model_validator(mode="after")
    def _check(self) -> "ArchiveQuery":
        validation.validate_offset(self.offset)
        validation.validate_count(self.count)
        if self.session_id and not validation.is_valid_session_id(self.session_id):
            raise ArgumentError(validation.INVALID_SESSION_ID)
        return self


class ArchiveOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_id: str
    name: Optional[str] = None
    has_audio: bool = True
    has_video: bool = True
    output_mode: OutputMode = OutputMode.COMPOSED
    resolution: Optional[str] = None
    layout: Optional[ArchiveLayout] = None

    @model_validator(mode="after")
    def _check(self) -> "ArchiveOptions":
        validation.require_session_id(self.session_id)
        validation.validate_output_resolution(self.output_mode, self.resolution)
        validation.validate_resolution(self.resolution)
        if self.layout is not None and self.output_mode == OutputMode.INDIVIDUAL:
            raise ArgumentError("Layout can't be specified for Individual Archives")
        return self


class Rtmp(BaseModel):
    """RTMP target of a live broadcast."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    server_url: str
    stream_name: str

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        body: dict[str, Any] = {"serverUrl": self.server_url, "streamName": self.stream_name}
        if self.id:
            body["id"] = self.id
        return body


class BroadcastOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    session_id: str
    hls: bool = True
    rtmp: list[Rtmp] = Field(default_factory=list)
    max_duration: int = 7200
    resolution: Optional[str] = None
    layout: Optional[ArchiveLayout] = None

    @model_validator(mode="after")
    def _check(self) -> "BroadcastOptions":
        validation.require_session_id(self.session_id)
        validation.validate_resolution(self.resolution)
        if not self.hls and not self.rtmp:
            raise ArgumentError("A broadcast needs at least one output, HLS or RTMP")
        if len(self.rtmp) > MAX_RTMP_TARGETS:
            raise ArgumentError(f"Cannot broadcast to more than {MAX_RTMP_TARGETS} RTMP streams")
        if not 60 <= self.max_duration <= 36000:
            raise ArgumentError("max_duration must be between 60 and 36000 seconds")
        return self


class StreamProperties(BaseModel):
    id: str
    layout_class_list: list[str] = Field(default_factory=list)

    def add_layout_class(self, layout_class: str) -> None:
        self.layout_class_list.append(layout_class)

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {"id": self.id, "layoutClassList": list(self.layout_class_list)}


class SignalPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    data: str
    type: Optional[str] = None
