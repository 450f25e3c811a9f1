"""
REST HTTP client for the OpenTok API.

Sends composed ApiRequest objects, unwraps JSON replies and runs transport
failures through the TLS guard.
"""

import logging
import ssl
from typing import Any, Optional

import httpx

from opentok_sdk.errors import RequestError
from opentok_sdk.transport.request import ApiRequest
from opentok_sdk.transport.tls import is_below_minimum, is_system_default, reclassify_tls_failure

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.opentok.com"
USER_AGENT = "opentok-sdk-python/0.1.0"


def ssl_verify(tls_version: Optional[ssl.TLSVersion]) -> Any:
    """``verify`` argument for httpx: platform defaults, or a context capped at ``tls_version``."""
    if is_system_default(tls_version):
        return True
    context = ssl.create_default_context()
    if is_below_minimum(tls_version):
        context.minimum_version = tls_version
    context.maximum_version = tls_version
    return context


class HttpClient:
    def __init__(
        self,
        api_key: int,
        api_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        tls_version: Optional[ssl.TLSVersion] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._tls_version = tls_version
        verify = ssl_verify(tls_version)
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "application/json",
                "X-TB-PARTNER-AUTH": f"{api_key}:{api_secret}",
            },
            timeout=timeout,
            verify=verify,
            transport=transport,
        )

    @property
    def tls_version(self) -> Optional[ssl.TLSVersion]:
        return self._tls_version

    async def send(self, request: ApiRequest) -> Any:
        logger.debug("%s %s", request.method, request.url)
        try:
            resp = await self._client.request(
                request.method,
                "/" + request.path,
                params=request.params or None,
                headers=request.headers or None,
                content=request.content(),
                data=request.form,
            )
        except httpx.TransportError as e:
            reclassify_tls_failure(e, self._tls_version)
        if resp.status_code >= 400:
            raise RequestError(resp.status_code, f"HTTP {resp.status_code}: {resp.text[:200]}")
        if not resp.content:
            return None
        return resp.json()

    async def close(self) -> None:
        await self._client.aclose()
