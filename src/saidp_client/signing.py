"""
Request signing for the SecureAuth REST API.

Every request carries an ``Authorization`` header of the form::

    Basic base64(APP_ID ":" base64(HMAC-SHA256(app_key, string_to_sign)))

where ``string_to_sign`` is::

    METHOD \\n TIMESTAMP \\n APP_ID \\n /REALM ENDPOINT [\\n BODY]

The body line is only present for POST and PUT. The digest is base64
encoded twice (once alone, once inside the ``app_id:digest`` pair); the
server expects exactly that.
"""

import base64
import hashlib
import hmac
from datetime import datetime
from email.utils import formatdate

from .config import ClientConfig
from .errors import InvalidMethodError, MissingBodyError, MissingEndpointError

METHOD_GET = "GET"
METHOD_POST = "POST"
METHOD_PUT = "PUT"

ALLOWED_METHODS = frozenset({METHOD_GET, METHOD_POST, METHOD_PUT})

# Methods whose body is part of the string to sign
BODY_METHODS = frozenset({METHOD_POST, METHOD_PUT})

# Methods that refuse an empty body. PUT is accepted without content.
BODY_REQUIRED_METHODS = frozenset({METHOD_POST})

HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_DATE = "Date"
HEADER_SA_DATE = "X-SA-Date"
HEADER_AUTHORIZATION = "Authorization"

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


def http_date(when: datetime | float | None = None) -> str:
    """
    Format a timestamp as an RFC 1123 date in GMT.

    The zone token is always the literal ``GMT`` and day/month names are
    English regardless of locale.

    Args:
        when: Aware datetime, POSIX timestamp, or None for now

    Examples:
        >>> http_date(0)
        'Thu, 01 Jan 1970 00:00:00 GMT'
    """
    if isinstance(when, datetime):
        when = when.timestamp()
    return formatdate(timeval=when, usegmt=True)


def validate_request(method: str, endpoint: str, body: str | None) -> None:
    """
    Check a request before signing.

    Raises:
        InvalidMethodError: method is not GET, POST or PUT
        MissingEndpointError: endpoint is empty
        MissingBodyError: POST without content
    """
    if method not in ALLOWED_METHODS:
        raise InvalidMethodError(method)
    if not endpoint:
        raise MissingEndpointError()
    if method in BODY_REQUIRED_METHODS and not body:
        raise MissingBodyError(method)


def build_string_to_sign(
    method: str,
    timestamp: str,
    app_id: str,
    realm: str,
    endpoint: str,
    body: str = "",
) -> str:
    """Build the canonical newline-joined string covered by the HMAC."""
    lines = [method, timestamp, app_id, f"/{realm}{endpoint}"]
    if method in BODY_METHODS:
        lines.append(body)
    return "\n".join(lines)


def compute_digest(key: bytes, message: str | bytes) -> str:
    """Base64-encoded HMAC-SHA256 of ``message``."""
    if isinstance(message, str):
        message = message.encode("utf-8")
    digest = hmac.new(key, message, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("ascii")


def build_authorization(app_id: str, digest: str) -> str:
    """Wrap a digest into the ``Basic`` authorization value."""
    credentials = f"{app_id}:{digest}".encode("utf-8")
    return "Basic " + base64.b64encode(credentials).decode("ascii")


def sign(
    config: ClientConfig,
    method: str,
    endpoint: str,
    body: str | None = None,
    timestamp: str | None = None,
) -> str:
    """
    Compute the Authorization header value for a request.

    Args:
        config: Client configuration holding app id, key and realm
        method: GET, POST or PUT
        endpoint: API path after the realm, e.g. ``/api/v1/auth``
        body: Request body; required for POST
        timestamp: Date string to sign. Defaults to ``http_date()``; pass
            the same value sent in the Date/X-SA-Date headers.

    Returns:
        ``Basic ...`` header value

    Raises:
        RequestValidationError: On invalid method, endpoint or body
    """
    validate_request(method, endpoint, body)
    if timestamp is None:
        timestamp = http_date()

    payload = build_string_to_sign(
        method,
        timestamp,
        config.app_id,
        config.realm,
        endpoint,
        body or "",
    )
    return build_authorization(config.app_id, compute_digest(config.key_bytes, payload))
