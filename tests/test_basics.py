"""Basic unit tests for the opentok-sdk package."""

from opentok_sdk import (
    AsyncOpenTok,
    OpenTok,
    OpenTokError,
    ArgumentError,
    DecodeError,
    TlsVersionError,
    RequestError,
    Role,
    __version__,
)
from opentok_sdk.errors import TLS_REMEDIATION_MESSAGE


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert OpenTok is not None
    assert AsyncOpenTok is not None


def test_initialization():
    client = OpenTok(123456, "secret")
    assert isinstance(client, OpenTok)
    assert client.api_key == 123456
    client.close()


def test_error_hierarchy():
    assert issubclass(ArgumentError, OpenTokError)
    assert issubclass(DecodeError, OpenTokError)
    assert issubclass(TlsVersionError, OpenTokError)
    assert issubclass(RequestError, OpenTokError)


def test_error_attributes():
    err = OpenTokError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    arg = ArgumentError("bad input", details={"field": "count"})
    assert arg.code == "argument_error"
    assert arg.details == {"field": "count"}

    req = RequestError(404, "HTTP 404: not found")
    assert req.code == "http_error"
    assert req.status_code == 404


def test_tls_error_default_message():
    err = TlsVersionError()
    assert str(err) == TLS_REMEDIATION_MESSAGE
    assert str(err) == (
        "Error with request submission.\nThis application appears to not support TLS1.2.\n"
        "Please enable TLS 1.2 and try again."
    )


def test_role_values():
    assert Role.PUBLISHER.value == "publisher"
    assert Role.SUBSCRIBER.value == "subscriber"
    assert Role.MODERATOR.value == "moderator"
