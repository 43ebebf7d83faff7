"""
Client for the SecureAuth IdP REST API.
"""

import httpx

from .config import ClientConfig, ClientSettings, get_settings
from .models import SignedResponse
from .services import AuthService, FactorsService, ThrottleService
from .signing import METHOD_GET, METHOD_POST, METHOD_PUT
from .transport import Dispatcher
from .verification import verify_response


class SecureAuthClient:
    """
    Signed-request client for a SecureAuth realm.

    Every request is signed with the realm's app id and key. Successful
    responses come back as ``SignedResponse`` objects holding the raw body,
    which ``verify`` checks against the server's X-SA-SIGNATURE header.

    Args:
        config: Connection details for the realm

    Example:
        >>> config = ClientConfig(
        ...     app_id="0123...", app_key="abcd...",
        ...     host="idp.example.com", realm="secureauth1",
        ... )
        >>> client = SecureAuthClient(config)
        >>> response = client.auth.send_push_accept("jdoe", device_id)
        >>> result = client.auth.check_push_accept_status(
        ...     response.reference_id, timeout=60, interval=5,
        ... )
        >>> result.message
        'ACCEPTED'
    """

    def __init__(self, config: ClientConfig):
        self.config = config
        self.dispatcher = Dispatcher(config)
        self.auth = AuthService(self)
        self.factors = FactorsService(self)
        self.throttle = ThrottleService(self)

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> "SecureAuthClient":
        """
        Create a client from ``SAIDP_*`` environment settings.

        Raises:
            ConfigError: If required settings are missing
        """
        settings = settings or get_settings()
        return cls(settings.to_config())

    def get(self, endpoint: str) -> SignedResponse:
        """
        Send a signed GET request.

        Args:
            endpoint: API path after the realm, e.g. ``/api/v1/users/jdoe/factors``

        Returns:
            SignedResponse for status 200

        Raises:
            RequestValidationError: If the request is rejected before sending
            HttpError: On a non-200 response
            httpx.TransportError: On network errors
        """
        return self.dispatcher.send(METHOD_GET, endpoint)

    def post(self, endpoint: str, body: str) -> SignedResponse:
        """Send a signed POST request with a JSON body."""
        return self.dispatcher.send(METHOD_POST, endpoint, body)

    def put(self, endpoint: str, body: str | None = None) -> SignedResponse:
        """Send a signed PUT request; the body may be omitted."""
        return self.dispatcher.send(METHOD_PUT, endpoint, body)

    async def get_async(self, endpoint: str) -> SignedResponse:
        return await self.dispatcher.send_async(METHOD_GET, endpoint)

    async def post_async(self, endpoint: str, body: str) -> SignedResponse:
        return await self.dispatcher.send_async(METHOD_POST, endpoint, body)

    async def put_async(self, endpoint: str, body: str | None = None) -> SignedResponse:
        return await self.dispatcher.send_async(METHOD_PUT, endpoint, body)

    def verify(self, response: SignedResponse | httpx.Response) -> bool:
        """Check a response's X-SA-SIGNATURE against its raw body."""
        return verify_response(response, self.config)
