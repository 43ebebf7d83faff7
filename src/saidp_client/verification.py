"""
Response signature verification.

The server signs each response with the same key used for requests::

    X-SA-SIGNATURE = base64(HMAC-SHA256(app_key, X-SA-DATE \\n APP_ID \\n BODY))

``BODY`` is the raw response body. Verifying against a re-serialized copy of
the decoded JSON gives false negatives whenever the server's field order,
whitespace or number formatting differ from the local encoder's.
"""

import hmac

import httpx

from .config import ClientConfig
from .logging import get_logger
from .models import RESPONSE_DATE_HEADER, RESPONSE_SIGNATURE_HEADER, SignedResponse
from .signing import compute_digest

logger = get_logger(__name__)


def _as_bytes(value: str | bytes, name: str) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"{name} must be str or bytes, not {type(value).__name__}")


def build_response_string(date: str, app_id: str, raw_body: str | bytes) -> bytes:
    """Build the byte string the server signed for a response."""
    return b"\n".join(
        [
            _as_bytes(date, "date"),
            _as_bytes(app_id, "app_id"),
            _as_bytes(raw_body, "raw_body"),
        ]
    )


def verify(
    raw_body: str | bytes,
    date: str,
    signature: str,
    config: ClientConfig,
) -> bool:
    """
    Check a response signature.

    Args:
        raw_body: Response body exactly as received
        date: Value of the X-SA-DATE response header
        signature: Value of the X-SA-SIGNATURE response header
        config: Client configuration holding app id and key

    Returns:
        True if the computed signature matches, False otherwise. A mismatch
        is not an error; deciding whether it is fatal is up to the caller.

    Raises:
        TypeError: If raw_body, date or signature has an unsupported type
    """
    if not isinstance(signature, str):
        raise TypeError(f"signature must be str, not {type(signature).__name__}")

    message = build_response_string(date, config.app_id, raw_body)
    expected = compute_digest(config.key_bytes, message)
    if not signature:
        logger.debug("Response carries no signature")
        return False
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))


def verify_response(
    response: SignedResponse | httpx.Response,
    config: ClientConfig,
) -> bool:
    """Verify a response using its X-SA-DATE/X-SA-SIGNATURE headers and raw body."""
    date = response.headers.get(RESPONSE_DATE_HEADER, "")
    signature = response.headers.get(RESPONSE_SIGNATURE_HEADER, "")
    valid = verify(response.content, date, signature, config)
    if not valid:
        logger.warning(
            "Response signature mismatch",
            status_code=response.status_code,
            has_date=bool(date),
            has_signature=bool(signature),
        )
    return valid
