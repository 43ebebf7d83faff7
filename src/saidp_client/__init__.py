"""
SecureAuth IdP client SDK for Python

Sign requests to the SecureAuth REST API and verify signed responses.
"""

from .client import SecureAuthClient
from .config import ClientConfig, ClientSettings, get_settings
from .errors import (
    ConfigError,
    HttpError,
    InvalidMethodError,
    InvalidRequestTypeError,
    MissingBodyError,
    MissingEndpointError,
    PollTimeoutError,
    RequestValidationError,
    ResponseDecodeError,
    SAClientError,
)
from .models import SignedRequest, SignedResponse
from .polling import PushStatus, poll_status, poll_status_async
from .signing import http_date, sign
from .transport import Dispatcher, parse_error
from .verification import verify, verify_response

__version__ = "0.1.0"

__all__ = [
    "SecureAuthClient",
    "ClientConfig",
    "ClientSettings",
    "get_settings",
    "Dispatcher",
    "SignedRequest",
    "SignedResponse",
    "PushStatus",
    "poll_status",
    "poll_status_async",
    "http_date",
    "sign",
    "parse_error",
    "verify",
    "verify_response",
    "SAClientError",
    "ConfigError",
    "RequestValidationError",
    "InvalidMethodError",
    "MissingEndpointError",
    "MissingBodyError",
    "InvalidRequestTypeError",
    "HttpError",
    "ResponseDecodeError",
    "PollTimeoutError",
]
