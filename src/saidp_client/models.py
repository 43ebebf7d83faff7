"""
Data models for signed requests and responses.
"""

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from .errors import ResponseDecodeError

RESPONSE_DATE_HEADER = "X-SA-DATE"
RESPONSE_SIGNATURE_HEADER = "X-SA-SIGNATURE"


@dataclass(frozen=True)
class SignedRequest:
    """
    A request ready to be sent.

    Attributes:
        method: GET, POST or PUT
        url: Full URL including scheme, host, port and realm
        endpoint: API path after the realm (what was signed)
        timestamp: GMT date sent in Date and X-SA-Date
        authorization: Authorization header value
        headers: All headers to send
        body: JSON body, or None for GET and empty PUT
    """
    method: str
    url: str
    endpoint: str
    timestamp: str
    authorization: str = field(repr=False)
    headers: dict[str, str] = field(repr=False)
    body: str | None = None

    def to_httpx(self) -> httpx.Request:
        content = self.body.encode("utf-8") if self.body is not None else None
        return httpx.Request(self.method, self.url, headers=self.headers, content=content)


@dataclass(frozen=True)
class SignedResponse:
    """
    A successful response with its raw body.

    ``content`` holds the exact bytes the server sent; signature checks
    must run against it, never against a re-encoded copy of ``json()``.

    Attributes:
        status_code: HTTP status code
        headers: Response headers (case-insensitive)
        content: Raw response body
    """
    status_code: int
    headers: httpx.Headers
    content: bytes

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "SignedResponse":
        return cls(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
        )

    @property
    def sa_date(self) -> str:
        return self.headers.get(RESPONSE_DATE_HEADER, "")

    @property
    def sa_signature(self) -> str:
        return self.headers.get(RESPONSE_SIGNATURE_HEADER, "")

    @property
    def text(self) -> str:
        return self.content.decode("utf-8")

    def json(self) -> Any:
        """Decode the body as JSON."""
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise ResponseDecodeError(
                f"Invalid JSON response: {e}",
                status_code=self.status_code,
            ) from e

