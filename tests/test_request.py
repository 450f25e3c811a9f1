import json

from opentok_sdk.models.enums import ArchiveMode, LayoutType, MediaMode, OutputMode
from opentok_sdk.models.options import (
    ArchiveLayout,
    ArchiveOptions,
    ArchiveQuery,
    BroadcastOptions,
    Rtmp,
    SessionOptions,
    SignalPayload,
    StreamProperties,
)
from opentok_sdk.transport import request as compose

from conftest import API_KEY, SESSION_ID

CUSTOM_CSS = "stream.instructor {position: absolute; width: 100%;  height:50%;}"


class TestArchiveRequests:
    def test_start_archive_custom_layout(self):
        options = ArchiveOptions(
            session_id="abcd12345",
            name="an_archive_name",
            layout=ArchiveLayout.custom(CUSTOM_CSS),
        )
        req = compose.start_archive_request(API_KEY, options)
        assert req.method == "POST"
        assert req.path == f"v2/project/{API_KEY}/archive"
        assert req.headers == {"Content-type": "application/json"}
        assert req.content() == (
            '{"sessionId":"abcd12345","name":"an_archive_name","hasVideo":true,"hasAudio":true,'
            '"outputMode":"composed","layout":{"type":"custom","stylesheet":"' + CUSTOM_CSS + '"}}'
        )

    def test_start_archive_pip_layout(self):
        options = ArchiveOptions(session_id="abcd12345", layout=ArchiveLayout.of(LayoutType.PIP))
        body = json.loads(compose.start_archive_request(API_KEY, options).content())
        assert body["layout"] == {"type": "pip"}

    def test_start_archive_individual_voice_only(self):
        options = ArchiveOptions(session_id="SESSIONID", has_video=False, output_mode=OutputMode.INDIVIDUAL)
        body = compose.start_archive_request(API_KEY, options).body
        assert body == {
            "sessionId": "SESSIONID",
            "name": None,
            "hasVideo": False,
            "hasAudio": True,
            "outputMode": "individual",
        }

    def test_start_archive_resolution(self):
        options = ArchiveOptions(session_id="SESSIONID", resolution="640x480")
        assert compose.start_archive_request(API_KEY, options).body["resolution"] == "640x480"

    def test_paths(self):
        archive_id = "936da01f-9abd-4d9d-80c7-02af85c822a8"
        base = f"v2/project/{API_KEY}/archive"

        req = compose.get_archive_request(API_KEY, archive_id)
        assert (req.method, req.path) == ("GET", f"{base}/{archive_id}")

        req = compose.stop_archive_request(API_KEY, archive_id)
        assert (req.method, req.path) == ("POST", f"{base}/{archive_id}/stop")

        req = compose.delete_archive_request(API_KEY, archive_id)
        assert (req.method, req.path) == ("DELETE", f"{base}/{archive_id}")
        assert req.content() is None

        req = compose.set_archive_layout_request(API_KEY, archive_id, ArchiveLayout.of(LayoutType.PIP))
        assert (req.method, req.path) == ("PUT", f"{base}/{archive_id}/layout")
        assert req.content() == '{"type":"pip"}'

    def test_list_archives_query(self):
        req = compose.list_archives_request(API_KEY, ArchiveQuery())
        assert req.url == f"v2/project/{API_KEY}/archive?offset=0"

        req = compose.list_archives_request(API_KEY, ArchiveQuery(offset=1, count=5, session_id=SESSION_ID))
        assert req.url == f"v2/project/{API_KEY}/archive?offset=1&count=5&sessionId={SESSION_ID}"
        assert req.to_dict()["queryParams"] == {"offset": "1", "count": "5", "sessionId": SESSION_ID}

        req = compose.list_archives_request(API_KEY, ArchiveQuery(session_id=""))
        assert req.url == f"v2/project/{API_KEY}/archive?offset=0"


class TestSessionRequest:
    def test_relayed(self):
        req = compose.create_session_request(SessionOptions())
        assert (req.method, req.path) == ("POST", "session/create")
        assert req.form == {"location": "", "p2p.preference": "enabled", "archiveMode": "manual"}
        assert req.content() is None

    def test_routed_always_with_location(self):
        options = SessionOptions(media_mode=MediaMode.ROUTED, archive_mode=ArchiveMode.ALWAYS, location="12.34.56.78")
        req = compose.create_session_request(options)
        assert req.form == {"location": "12.34.56.78", "p2p.preference": "disabled", "archiveMode": "always"}
        assert req.to_dict()["body"] == req.form


class TestBroadcastRequests:
    def test_start_hls_only(self):
        req = compose.start_broadcast_request(API_KEY, BroadcastOptions(session_id="SESSIONID"))
        assert req.path == f"v2/project/{API_KEY}/broadcast"
        assert req.body == {"sessionId": "SESSIONID", "maxDuration": 7200, "outputs": {"hls": {}}}

    def test_start_rtmp_only(self):
        options = BroadcastOptions(
            session_id="SESSIONID",
            hls=False,
            rtmp=[
                Rtmp(id="foo", server_url="rtmp://myfooserver/myfooapp", stream_name="myfoostream"),
                Rtmp(server_url="rtmp://mybarserver/mybarapp", stream_name="mybarstream"),
            ],
            resolution="1280x720",
        )
        body = compose.start_broadcast_request(API_KEY, options).body
        assert body["outputs"] == {
            "rtmp": [
                {"serverUrl": "rtmp://myfooserver/myfooapp", "streamName": "myfoostream", "id": "foo"},
                {"serverUrl": "rtmp://mybarserver/mybarapp", "streamName": "mybarstream"},
            ]
        }
        assert body["resolution"] == "1280x720"

    def test_stop_and_get(self):
        broadcast_id = "30b3ebf1-ba36-4f5b-8def-6f70d9986fe9"
        req = compose.stop_broadcast_request(API_KEY, broadcast_id)
        assert (req.method, req.path) == ("POST", f"v2/project/{API_KEY}/broadcast/{broadcast_id}/stop")
        req = compose.get_broadcast_request(API_KEY, broadcast_id)
        assert (req.method, req.path) == ("GET", f"v2/project/{API_KEY}/broadcast/{broadcast_id}")


class TestStreamRequests:
    def test_get_and_list(self):
        req = compose.get_stream_request(API_KEY, "SESSIONID", "STREAMID")
        assert req.path == f"v2/project/{API_KEY}/session/SESSIONID/stream/STREAMID"
        req = compose.list_streams_request(API_KEY, "SESSIONID")
        assert req.path == f"v2/project/{API_KEY}/session/SESSIONID/stream"

    def test_set_class_lists(self):
        props = StreamProperties(id="STREAMID")
        props.add_layout_class("full")
        props.add_layout_class("focus")
        req = compose.set_stream_class_lists_request(API_KEY, "SESSIONID", [props])
        assert req.method == "PUT"
        assert req.content() == '{"items":[{"id":"STREAMID","layoutClassList":["full","focus"]}]}'


class TestSignalingRequests:
    def test_signal_all(self):
        req = compose.signal_request(API_KEY, "SESSIONID", SignalPayload(data="data", type="type"))
        assert (req.method, req.path) == ("POST", f"v2/project/{API_KEY}/session/SESSIONID/signal")
        assert req.body == {"data": "data", "type": "type"}

    def test_signal_connection(self):
        req = compose.signal_request(API_KEY, "SESSIONID", SignalPayload(data="data"), "CONNECTIONID")
        assert req.path == f"v2/project/{API_KEY}/session/SESSIONID/connection/CONNECTIONID/signal"
        assert req.body == {"data": "data"}

    def test_force_disconnect(self):
        req = compose.force_disconnect_request(API_KEY, "SESSIONID", "CONNECTIONID")
        assert (req.method, req.path) == ("DELETE", f"v2/project/{API_KEY}/session/SESSIONID/connection/CONNECTIONID")


def test_encode_body_keeps_unicode():
    assert compose.encode_body({"name": "café"}) == '{"name":"café"}'
