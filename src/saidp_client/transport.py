"""
Building, sending and classifying signed requests.
"""

import httpx

from .config import ClientConfig
from .errors import HttpError, ResponseDecodeError
from .logging import get_logger
from .models import SignedRequest, SignedResponse
from .signing import (
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_DATE,
    HEADER_SA_DATE,
    JSON_CONTENT_TYPE,
    http_date,
    sign,
)

logger = get_logger(__name__)

# Statuses whose body carries a vendor {"status", "message"} object
HANDLED_ERROR_STATUSES = frozenset({400, 404, 500})


def status_text(code: int) -> str:
    """Standard reason phrase for an HTTP status code."""
    return httpx.codes.get_reason_phrase(code)


def parse_error(response: httpx.Response) -> HttpError:
    """
    Normalize a non-200 response into an ``HttpError``.

    For 400, 404 and 500 the body is decoded as ``{"status", "message"}``.
    Any other status only carries generic HTTP metadata: the raw status line
    becomes ``status`` and the reason phrase becomes ``message``.

    Raises:
        ResponseDecodeError: If a 400/404/500 body is not a JSON object
    """
    code = response.status_code
    text = status_text(code)

    if code in HANDLED_ERROR_STATUSES:
        try:
            data = response.json()
        except ValueError as e:
            raise ResponseDecodeError(
                f"Invalid error response body for status {code}: {e}",
                status_code=code,
            ) from e
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"Error response body for status {code} is not an object",
                status_code=code,
            )
        return HttpError(
            code=code,
            status_text=text,
            status=str(data.get("status") or ""),
            message=str(data.get("message") or ""),
        )

    status_line = f"{code} {response.reason_phrase or text}".strip()
    return HttpError(code=code, status_text=text, status=status_line, message=text)


class Dispatcher:
    """
    Builds signed requests and executes them.

    Each call to ``execute`` creates its own HTTP client; there is no shared
    connection pool and no retry.

    Args:
        config: Client configuration
    """

    def __init__(self, config: ClientConfig):
        self.config = config

    def build_request(
        self,
        method: str,
        endpoint: str,
        body: str | None = None,
    ) -> SignedRequest:
        """
        Build a signed request.

        A missing body (GET, empty PUT) is signed as an empty string.

        Raises:
            RequestValidationError: On invalid method, endpoint or body
        """
        timestamp = http_date()
        authorization = sign(self.config, method, endpoint, body, timestamp=timestamp)

        headers = {
            HEADER_ACCEPT: JSON_CONTENT_TYPE,
            HEADER_CONTENT_TYPE: JSON_CONTENT_TYPE,
            HEADER_DATE: timestamp,
            HEADER_SA_DATE: timestamp,
            HEADER_AUTHORIZATION: authorization,
        }
        request = SignedRequest(
            method=method,
            url=f"{self.config.base_url}{endpoint}",
            endpoint=endpoint,
            timestamp=timestamp,
            authorization=authorization,
            headers=headers,
            body=body if body else None,
        )
        logger.debug("Built signed request", method=method, url=request.url)
        return request

    def execute(self, request: SignedRequest) -> SignedResponse:
        """
        Send a signed request synchronously.

        Returns:
            SignedResponse for status 200

        Raises:
            HttpError: On any other status
            ResponseDecodeError: If a 400/404/500 body cannot be decoded
            httpx.TransportError: On network errors
        """
        with httpx.Client(verify=self._verify_certs()) as client:
            response = client.send(request.to_httpx())
        return self._classify(request, response)

    async def execute_async(self, request: SignedRequest) -> SignedResponse:
        """
        Send a signed request asynchronously.

        Same contract as ``execute``.
        """
        async with httpx.AsyncClient(verify=self._verify_certs()) as client:
            response = await client.send(request.to_httpx())
        return self._classify(request, response)

    def send(self, method: str, endpoint: str, body: str | None = None) -> SignedResponse:
        """Build and execute a request."""
        return self.execute(self.build_request(method, endpoint, body))

    async def send_async(
        self,
        method: str,
        endpoint: str,
        body: str | None = None,
    ) -> SignedResponse:
        """Build and execute a request asynchronously."""
        return await self.execute_async(self.build_request(method, endpoint, body))

    def _verify_certs(self) -> bool:
        if self.config.bypass_cert_validation:
            logger.warning("TLS certificate validation is disabled", host=self.config.host)
            return False
        return True

    def _classify(self, request: SignedRequest, response: httpx.Response) -> SignedResponse:
        if response.status_code == 200:
            logger.debug(
                "Request succeeded",
                method=request.method,
                url=request.url,
                status_code=response.status_code,
            )
            return SignedResponse.from_httpx(response)

        error = parse_error(response)
        logger.warning(
            "Request failed",
            method=request.method,
            url=request.url,
            status_code=error.code,
            status=error.status,
        )
        raise error
