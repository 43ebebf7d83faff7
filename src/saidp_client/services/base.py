"""Shared pieces for per-resource request/response objects."""

import json
from dataclasses import dataclass, field
from typing import Any

from ..config import ClientConfig
from ..errors import ResponseDecodeError
from ..models import SignedResponse
from ..verification import verify_response

USERS_ENDPOINT = "/api/v1/users/"


def dump_body(payload: dict[str, Any]) -> str:
    """Serialize a request payload compactly."""
    return json.dumps(payload, separators=(",", ":"))


@dataclass
class ApiResponse:
    """
    Base for decoded responses.

    Keeps the ``SignedResponse`` it was decoded from so the signature can be
    checked against the bytes the server actually sent.
    """
    signed: SignedResponse | None = field(default=None, repr=False, compare=False)

    def is_signature_valid(self, config: ClientConfig) -> bool:
        if self.signed is None:
            raise ValueError("Response was not decoded from a server reply")
        return verify_response(self.signed, config)


def json_object(response: SignedResponse) -> dict[str, Any]:
    data = response.json()
    if not isinstance(data, dict):
        raise ResponseDecodeError(
            "Expected a JSON object in response body",
            status_code=response.status_code,
        )
    return data
