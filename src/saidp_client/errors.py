"""
Exception types raised by the SecureAuth client.
"""

import json
from typing import Any


class SAClientError(Exception):
    """Base class for all client errors."""


class ConfigError(SAClientError, ValueError):
    """Client configuration is incomplete or malformed."""


class RequestValidationError(SAClientError, ValueError):
    """A request was rejected before any network call was made."""


class InvalidMethodError(RequestValidationError):
    def __init__(self, method: str):
        super().__init__(f"Method '{method}' invalid. Try using: POST, GET, or PUT")
        self.method = method


class MissingEndpointError(RequestValidationError):
    def __init__(self) -> None:
        super().__init__("An API endpoint is required")


class MissingBodyError(RequestValidationError):
    def __init__(self, method: str):
        super().__init__(f"{method} requests require content")
        self.method = method


class InvalidRequestTypeError(RequestValidationError):
    """Unsupported auth request type or type/option combination."""


class HttpError(SAClientError):
    """
    Non-200 response from the API.

    Attributes:
        code: Numeric HTTP status code
        status_text: Standard reason phrase for ``code``
        status: Vendor status (400/404/500) or the raw HTTP status line
        message: Vendor message (400/404/500) or ``status_text``

    ``str()`` of the error is its JSON serialization, so callers that only
    log the error still see every field.
    """

    def __init__(
        self,
        code: int,
        status_text: str = "",
        status: str = "",
        message: str = "",
    ):
        self.code = code
        self.status_text = status_text
        self.status = status
        self.message = message
        super().__init__(self.to_json())

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "status": self.status,
            "message": self.message,
            "Code": self.code,
            "StatusText": self.status_text,
        }
        return {k: v for k, v in data.items() if v}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpError):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.to_json())

    def __repr__(self) -> str:
        return (
            f"HttpError(code={self.code!r}, status_text={self.status_text!r}, "
            f"status={self.status!r}, message={self.message!r})"
        )


class ResponseDecodeError(SAClientError):
    """A response body could not be decoded as the expected JSON."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class PollTimeoutError(SAClientError, TimeoutError):
    """No terminal status was reported before the deadline."""

    def __init__(self, timeout: float):
        super().__init__(f"Request expired before response (timeout={timeout}s)")
        self.timeout = timeout
