"""Pytest configuration and fixtures."""

import pytest
import respx

from saidp_client import ClientConfig, SecureAuthClient

APP_ID = "a1b2c3d4e5f6"
APP_KEY = "00112233445566778899aabbccddeeff00112233445566778899aabbccddeeff"
HOST = "idp.example.com"
REALM = "secureauth1"
BASE_URL = f"https://{HOST}:443/{REALM}"

FIXED_DATE = "Mon, 02 Jan 2006 15:04:05 GMT"

FACTORS_ENDPOINT = "/api/v1/users/jdoe/factors"
AUTH_ENDPOINT = "/api/v1/auth"
AUTH_BODY = '{"user_id":"jdoe","type":"user_id"}'

# Precomputed with an independent HMAC implementation
GET_DIGEST = "Y0nSRpN2Y9LriTFylvRvIM1/zgiUX+NsgLFX/q8hzhQ="
GET_AUTHORIZATION = (
    "Basic YTFiMmMzZDRlNWY2OlkwblNScE4yWTlMcmlURnlsdlJ2SU0xL3pnaVVYK05zZ0xGWC9xOGh6aFE9"
)
POST_AUTHORIZATION = (
    "Basic YTFiMmMzZDRlNWY2Onp4KzRFMVZwamtpQWRyV3lPQllFV1RiZDRCd1JBTWV3a0dTU1Q0RGJzZ009"
)


@pytest.fixture
def config() -> ClientConfig:
    """Client configuration used across tests."""
    return ClientConfig(app_id=APP_ID, app_key=APP_KEY, host=HOST, realm=REALM)


@pytest.fixture
def client(config: ClientConfig) -> SecureAuthClient:
    return SecureAuthClient(config)


@pytest.fixture
def fixed_date(monkeypatch) -> str:
    """Pin the signing timestamp used when building requests."""
    monkeypatch.setattr("saidp_client.transport.http_date", lambda: FIXED_DATE)
    return FIXED_DATE


@pytest.fixture
def mock_api():
    """Create a respx mock for the SecureAuth API."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock
