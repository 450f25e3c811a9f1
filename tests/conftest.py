import pytest

from opentok_sdk.models.options import Credentials

API_KEY = 123456
API_SECRET = "1234567890abcdef1234567890abcdef1234567890"
SESSION_ID = "1_MX4xMjM0NTZ-flNhdCBNYXIgMTUgMTQ6NDI6MjMgUERUIDIwMTR-MC40OTAxMzAyNX4"
BASE_URL = "https://api.opentok.com"


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key=API_KEY, api_secret=API_SECRET)
