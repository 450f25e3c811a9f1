"""
Request composition: paths, query strings and bodies for every REST call.

Builders take already-validated option models and never validate again.
"""

import json
from typing import Any, Optional

from pydantic import BaseModel, Field

from opentok_sdk.models.enums import MediaMode
from opentok_sdk.models.options import (
    ArchiveLayout,
    ArchiveOptions,
    ArchiveQuery,
    BroadcastOptions,
    SessionOptions,
    SignalPayload,
    StreamProperties,
)

JSON_HEADERS = {"Content-type": "application/json"}
FORM_HEADERS = {"Content-type": "application/x-www-form-urlencoded"}


class ApiRequest(BaseModel):
    """Transport-neutral description of one REST call."""

    method: str
    path: str
    params: list[tuple[str, str]] = Field(default_factory=list)
    headers: dict[str, str] = Field(default_factory=dict)
    body: Optional[dict[str, Any]] = None
    form: Optional[dict[str, str]] = None

    @property
    def url(self) -> str:
        """Path with the query string appended, e.g. ``v2/project/1/archive?offset=0``."""
        if not self.params:
            return self.path
        return self.path + "?" + "&".join(f"{key}={value}" for key, value in self.params)

    def content(self) -> Optional[str]:
        if self.body is not None:
            return encode_body(self.body)
        return None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"method": self.method, "path": self.path, "queryParams": dict(self.params)}
        if self.headers:
            out["headers"] = dict(self.headers)
        if self.body is not None:
            out["body"] = self.body
        elif self.form is not None:
            out["body"] = self.form
        return out


def encode_body(body: dict[str, Any]) -> str:
    """Compact JSON. Nested option models serialize through their own serializers."""
    def _default(value: Any) -> Any:
        if isinstance(value, BaseModel):
            return value.model_dump()
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")

    return json.dumps(body, separators=(",", ":"), ensure_ascii=False, default=_default)


def _json(method: str, path: str, body: dict[str, Any]) -> ApiRequest:
    return ApiRequest(method=method, path=path, headers=dict(JSON_HEADERS), body=body)


def project_path(api_key: int, *parts: str) -> str:
    return "/".join([f"v2/project/{api_key}", *parts])


# -- sessions --

def create_session_request(options: SessionOptions) -> ApiRequest:
    form = {
        "location": options.location or "",
        "p2p.preference": "disabled" if options.media_mode == MediaMode.ROUTED else "enabled",
        "archiveMode": options.archive_mode.value,
    }
    return ApiRequest(method="POST", path="session/create", headers=dict(FORM_HEADERS), form=form)


# -- archives --

def list_archives_request(api_key: int, query: ArchiveQuery) -> ApiRequest:
    params = [("offset", str(query.offset))]
    if query.count:
        params.append(("count", str(query.count)))
    if query.session_id:
        params.append(("sessionId", query.session_id))
    return ApiRequest(method="GET", path=project_path(api_key, "archive"), params=params)


def get_archive_request(api_key: int, archive_id: str) -> ApiRequest:
    return ApiRequest(method="GET", path=project_path(api_key, "archive", archive_id))


def start_archive_request(api_key: int, options: ArchiveOptions) -> ApiRequest:
    body: dict[str, Any] = {
        "sessionId": options.session_id,
        "name": options.name,
        "hasVideo": options.has_video,
        "hasAudio": options.has_audio,
        "outputMode": options.output_mode.value,
    }
    if options.resolution:
        body["resolution"] = options.resolution
    if options.layout is not None:
        body["layout"] = options.layout.model_dump()
    return _json("POST", project_path(api_key, "archive"), body)


def stop_archive_request(api_key: int, archive_id: str) -> ApiRequest:
    return _json("POST", project_path(api_key, "archive", archive_id, "stop"), {})


def delete_archive_request(api_key: int, archive_id: str) -> ApiRequest:
    return ApiRequest(method="DELETE", path=project_path(api_key, "archive", archive_id))


def set_archive_layout_request(api_key: int, archive_id: str, layout: ArchiveLayout) -> ApiRequest:
    return _json("PUT", project_path(api_key, "archive", archive_id, "layout"), layout.model_dump())


# -- broadcasts --

def start_broadcast_request(api_key: int, options: BroadcastOptions) -> ApiRequest:
    outputs: dict[str, Any] = {}
    if options.hls:
        outputs["hls"] = {}
    if options.rtmp:
        outputs["rtmp"] = [target.model_dump() for target in options.rtmp]
    body: dict[str, Any] = {
        "sessionId": options.session_id,
        "maxDuration": options.max_duration,
        "outputs": outputs,
    }
    if options.resolution:
        body["resolution"] = options.resolution
    if options.layout is not None:
        body["layout"] = options.layout.model_dump()
    return _json("POST", project_path(api_key, "broadcast"), body)


def stop_broadcast_request(api_key: int, broadcast_id: str) -> ApiRequest:
    return _json("POST", project_path(api_key, "broadcast", broadcast_id, "stop"), {})


def get_broadcast_request(api_key: int, broadcast_id: str) -> ApiRequest:
    return ApiRequest(method="GET", path=project_path(api_key, "broadcast", broadcast_id))


def set_broadcast_layout_request(api_key: int, broadcast_id: str, layout: ArchiveLayout) -> ApiRequest:
    return _json("PUT", project_path(api_key, "broadcast", broadcast_id, "layout"), layout.model_dump())


# -- streams --

def get_stream_request(api_key: int, session_id: str, stream_id: str) -> ApiRequest:
    return ApiRequest(method="GET", path=project_path(api_key, "session", session_id, "stream", stream_id))


def list_streams_request(api_key: int, session_id: str) -> ApiRequest:
    return ApiRequest(method="GET", path=project_path(api_key, "session", session_id, "stream"))


def set_stream_class_lists_request(
    api_key: int, session_id: str, properties: list[StreamProperties],
) -> ApiRequest:
    body = {"items": [p.model_dump() for p in properties]}
    return _json("PUT", project_path(api_key, "session", session_id, "stream"), body)


# -- signaling / moderation --

def signal_request(
    api_key: int, session_id: str, payload: SignalPayload, connection_id: Optional[str] = None,
) -> ApiRequest:
    parts = ["session", session_id]
    if connection_id:
        parts += ["connection", connection_id]
    parts.append("signal")
    body: dict[str, Any] = {"data": payload.data}
    if payload.type:
        body["type"] = payload.type
    return _json("POST", project_path(api_key, *parts), body)


def force_disconnect_request(api_key: int, session_id: str, connection_id: str) -> ApiRequest:
    return ApiRequest(
        method="DELETE", path=project_path(api_key, "session", session_id, "connection", connection_id),
    )
