"""
TLS version guard for failed requests.

The service refuses anything older than TLS 1.2. When a request fails and the
client was configured with an older protocol ceiling, the failure is reported
as TlsVersionError instead of a generic transport error. Nothing is retried.
"""

import logging
import ssl
from typing import NoReturn, Optional

from opentok_sdk.errors import TlsVersionError

logger = logging.getLogger(__name__)

MINIMUM_TLS_VERSION = ssl.TLSVersion.TLSv1_2

# Sentinels that defer to the platform default rather than naming a version.
_SYSTEM_DEFAULT = (ssl.TLSVersion.MINIMUM_SUPPORTED, ssl.TLSVersion.MAXIMUM_SUPPORTED)


def is_system_default(protocol_version: Optional[ssl.TLSVersion]) -> bool:
    return protocol_version is None or protocol_version in _SYSTEM_DEFAULT


def is_below_minimum(protocol_version: Optional[ssl.TLSVersion]) -> bool:
    if is_system_default(protocol_version):
        return False
    return protocol_version < MINIMUM_TLS_VERSION


def reclassify_tls_failure(error: BaseException, protocol_version: Optional[ssl.TLSVersion]) -> NoReturn:
    """Raise TlsVersionError for ``error`` if ``protocol_version`` is too old, else re-raise ``error``."""
    if is_below_minimum(protocol_version):
        logger.warning("Request failed with TLS capped at %s: %s", protocol_version.name, error)  # type: ignore[union-attr]
        raise TlsVersionError() from error
    raise error
