"""
Throttle endpoint: a user's failed-attempt counter.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..models import SignedResponse
from .base import USERS_ENDPOINT, ApiResponse, json_object

if TYPE_CHECKING:
    from ..client import SecureAuthClient


@dataclass
class ThrottleResponse(ApiResponse):
    status: str = ""
    message: str = ""
    count: int = 0

    @classmethod
    def from_response(cls, response: SignedResponse) -> "ThrottleResponse":
        data = json_object(response)
        return cls(
            signed=response,
            status=data.get("status") or "",
            message=data.get("message") or "",
            count=int(data.get("count") or 0),
        )


class ThrottleService:
    """Operations on ``/api/v1/users/{user}/throttle``."""

    def __init__(self, client: "SecureAuthClient"):
        self._client = client

    def get(self, user_id: str) -> ThrottleResponse:
        """Get the current throttle count for a user."""
        response = self._client.get(_throttle_endpoint(user_id))
        return ThrottleResponse.from_response(response)

    def reset(self, user_id: str) -> ThrottleResponse:
        """Reset the throttle count with an empty PUT."""
        response = self._client.put(_throttle_endpoint(user_id))
        return ThrottleResponse.from_response(response)


def _throttle_endpoint(user_id: str) -> str:
    return f"{USERS_ENDPOINT}{user_id}/throttle"
