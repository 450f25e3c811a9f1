"""
Integration tests for opentok-sdk: tests against the real OpenTok service.

Requires environment variables:
  OPENTOK_API_KEY    : project api key
  OPENTOK_API_SECRET : project api secret
  OPENTOK_BASE_URL   : (optional) defaults to https://api.opentok.com

Run: OPENTOK_INTEGRATION=1 pytest tests/integration/ -v
"""

import os
import pytest

from opentok_sdk import AsyncOpenTok, MediaMode, RequestError
from opentok_sdk.tokens import decode_token

SKIP = not os.environ.get("OPENTOK_INTEGRATION")
API_KEY = int(os.environ.get("OPENTOK_API_KEY", "0") or 0)
API_SECRET = os.environ.get("OPENTOK_API_SECRET", "")
BASE_URL = os.environ.get("OPENTOK_BASE_URL", "https://api.opentok.com")

pytestmark = pytest.mark.skipif(SKIP, reason="OPENTOK_INTEGRATION not set")


def make_client() -> AsyncOpenTok:
    return AsyncOpenTok(api_key=API_KEY, api_secret=API_SECRET, base_url=BASE_URL)


class TestSessions:
    @pytest.mark.asyncio
    async def test_create_session_and_token(self):
        async with make_client() as client:
            session = await client.create_session(media_mode=MediaMode.ROUTED)
            assert session.id
            token = client.generate_token(session.id)
        assert decode_token(token)["session_id"] == session.id

    @pytest.mark.asyncio
    async def test_rejects_bad_secret(self):
        async with AsyncOpenTok(api_key=API_KEY, api_secret="invalid", base_url=BASE_URL) as client:
            with pytest.raises(RequestError):
                await client.create_session()


class TestArchives:
    @pytest.mark.asyncio
    async def test_list_archives(self):
        async with make_client() as client:
            archives = await client.archives.list(count=5)
        assert len(archives) <= 5

    @pytest.mark.asyncio
    async def test_start_archive_without_clients_fails(self):
        # archiving needs at least one connected client
        async with make_client() as client:
            session = await client.create_session(media_mode=MediaMode.ROUTED)
            with pytest.raises(RequestError):
                await client.archives.start(session.id)


class TestStreams:
    @pytest.mark.asyncio
    async def test_list_streams_of_empty_session(self):
        async with make_client() as client:
            session = await client.create_session(media_mode=MediaMode.ROUTED)
            streams = await client.streams.list(session.id)
        assert len(streams) == 0
