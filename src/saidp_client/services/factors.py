"""
Factors endpoint: the authentication factors registered for a user.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..models import SignedResponse
from .base import USERS_ENDPOINT, ApiResponse, json_object

if TYPE_CHECKING:
    from ..client import SecureAuthClient


@dataclass
class Factor:
    """
    One factor from a user's profile.

    Attributes:
        type: Factor type, e.g. phone, email, push, kbq
        id: Identifier to pass as factor_id / device_id in auth requests
        value: Display value (masked phone number, device name, ...)
        capabilities: Delivery capabilities, e.g. ["call", "sms"]
    """
    type: str
    value: str = ""
    id: str = ""
    capabilities: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Factor":
        return cls(
            type=data.get("type") or "",
            value=data.get("value") or "",
            id=data.get("id") or "",
            capabilities=list(data.get("capabilities") or []),
        )


@dataclass
class FactorsResponse(ApiResponse):
    user_id: str = ""
    status: str = ""
    message: str = ""
    factors: list[Factor] = field(default_factory=list)

    @classmethod
    def from_response(cls, response: SignedResponse) -> "FactorsResponse":
        data = json_object(response)
        return cls(
            signed=response,
            user_id=data.get("user_id") or "",
            status=data.get("status") or "",
            message=data.get("message") or "",
            factors=[Factor.from_dict(f) for f in data.get("factors") or []],
        )


class FactorsService:
    """Operations on ``/api/v1/users/{user}/factors``."""

    def __init__(self, client: "SecureAuthClient"):
        self._client = client

    def get(self, user_id: str) -> FactorsResponse:
        response = self._client.get(f"{USERS_ENDPOINT}{user_id}/factors")
        return FactorsResponse.from_response(response)
