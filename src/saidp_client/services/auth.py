"""
Auth endpoint: factor validation, OTP delivery and push-to-accept.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..errors import InvalidRequestTypeError
from ..models import SignedResponse
from ..polling import poll_status, poll_status_async
from .base import ApiResponse, dump_body, json_object

if TYPE_CHECKING:
    from ..client import SecureAuthClient

AUTH_ENDPOINT = "/api/v1/auth"

# Delivery types accepted for ad-hoc OTP
ADHOC_TYPES = frozenset({"call", "sms", "email"})

# Delivery types that support number profile evaluation
EVALUATE_NUMBER_TYPES = frozenset({"call", "sms"})


@dataclass
class PushAcceptDetails:
    """Details displayed on the user's device for a push-to-accept request."""
    company_name: str = ""
    application_description: str = ""
    enduser_ip: str = ""

    def to_payload(self) -> dict[str, str]:
        return {
            "company_name": self.company_name,
            "application_description": self.application_description,
            "enduser_ip": self.enduser_ip,
        }


@dataclass
class AuthRequest:
    """
    Body of a POST to the auth endpoint.

    Attributes:
        user_id: User to authenticate
        type: One of user_id, password, kba, oath, pin, call, sms, email,
            push, push_accept, help_desk
        token: Value to validate, or OTP destination for ad-hoc delivery
        factor_id: Profile attribute / device the request applies to
        push_accept_details: Shown on the device for push_accept
        evaluate_number: Run number profile evaluation (call and sms only)
    """
    user_id: str
    type: str
    token: str = ""
    factor_id: str = ""
    push_accept_details: PushAcceptDetails | None = None
    evaluate_number: bool = False

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"user_id": self.user_id, "type": self.type}
        if self.token:
            payload["token"] = self.token
        if self.factor_id:
            payload["factor_id"] = self.factor_id
        if self.push_accept_details is not None:
            payload["push_accept_details"] = self.push_accept_details.to_payload()
        if self.evaluate_number:
            payload["evaluate_number"] = True
        return payload

    def to_json(self) -> str:
        return dump_body(self.to_payload())


@dataclass
class AuthResponse(ApiResponse):
    reference_id: str = ""
    status: str = ""
    message: str = ""
    user_id: str = ""
    otp: str = ""

    @classmethod
    def from_response(cls, response: SignedResponse) -> "AuthResponse":
        data = json_object(response)
        return cls(
            signed=response,
            reference_id=data.get("reference_id") or "",
            status=data.get("status") or "",
            message=data.get("message") or "",
            user_id=data.get("user_id") or "",
            otp=data.get("otp") or "",
        )


class AuthService:
    """
    Operations on ``/api/v1/auth``.

    Args:
        client: Client used to send signed requests
    """

    def __init__(self, client: "SecureAuthClient"):
        self._client = client

    def post(self, request: AuthRequest) -> AuthResponse:
        """Send an auth request."""
        response = self._client.post(AUTH_ENDPOINT, request.to_json())
        return AuthResponse.from_response(response)

    def validate_user(self, user_id: str) -> AuthResponse:
        return self.post(AuthRequest(user_id=user_id, type="user_id"))

    def validate_password(self, user_id: str, password: str) -> AuthResponse:
        return self.post(AuthRequest(user_id=user_id, type="password", token=password))

    def validate_kba(self, user_id: str, answer: str, kbq_id: str) -> AuthResponse:
        return self.post(
            AuthRequest(user_id=user_id, type="kba", token=answer, factor_id=kbq_id)
        )

    def validate_oath(self, user_id: str, otp: str, device_id: str) -> AuthResponse:
        return self.post(
            AuthRequest(user_id=user_id, type="oath", token=otp, factor_id=device_id)
        )

    def validate_pin(self, user_id: str, pin: str) -> AuthResponse:
        return self.post(AuthRequest(user_id=user_id, type="pin", token=pin))

    def send_otp_adhoc(
        self,
        user_id: str,
        token: str,
        request_type: str,
        evaluate_number: bool = False,
    ) -> AuthResponse:
        """
        Deliver an OTP to a phone number or email address not on file.

        Raises:
            InvalidRequestTypeError: If request_type is not call, sms or
                email, or number evaluation is requested for email
        """
        if request_type not in ADHOC_TYPES:
            raise InvalidRequestTypeError(
                f"Not a valid type '{request_type}', valid types: call, sms, or email"
            )
        if evaluate_number and request_type not in EVALUATE_NUMBER_TYPES:
            raise InvalidRequestTypeError(
                "Number evaluation can only be used with call or sms types"
            )
        return self.post(
            AuthRequest(
                user_id=user_id,
                type=request_type,
                token=token,
                evaluate_number=evaluate_number,
            )
        )

    def send_call_otp(
        self,
        user_id: str,
        factor_id: str,
        evaluate_number: bool = False,
    ) -> AuthResponse:
        return self.post(
            AuthRequest(
                user_id=user_id,
                type="call",
                factor_id=factor_id,
                evaluate_number=evaluate_number,
            )
        )

    def send_sms_otp(
        self,
        user_id: str,
        factor_id: str,
        evaluate_number: bool = False,
    ) -> AuthResponse:
        return self.post(
            AuthRequest(
                user_id=user_id,
                type="sms",
                factor_id=factor_id,
                evaluate_number=evaluate_number,
            )
        )

    def send_email_otp(self, user_id: str, factor_id: str) -> AuthResponse:
        return self.post(AuthRequest(user_id=user_id, type="email", factor_id=factor_id))

    def send_push_notify(self, user_id: str, device_id: str) -> AuthResponse:
        return self.post(AuthRequest(user_id=user_id, type="push", factor_id=device_id))

    def send_push_accept(
        self,
        user_id: str,
        device_id: str,
        company_name: str = "",
        application_description: str = "",
        enduser_ip: str = "",
    ) -> AuthResponse:
        """Send a push-to-accept request; poll its ``reference_id`` for the answer."""
        details = PushAcceptDetails(
            company_name=company_name,
            application_description=application_description,
            enduser_ip=enduser_ip,
        )
        return self.post(
            AuthRequest(
                user_id=user_id,
                type="push_accept",
                factor_id=device_id,
                push_accept_details=details,
            )
        )

    def send_help_desk(self, user_id: str, factor_id: str) -> AuthResponse:
        return self.post(
            AuthRequest(user_id=user_id, type="help_desk", factor_id=factor_id)
        )

    def get_status(self, reference_id: str) -> AuthResponse:
        """Fetch the current status of a push-to-accept request."""
        response = self._client.get(_status_endpoint(reference_id))
        return AuthResponse.from_response(response)

    async def get_status_async(self, reference_id: str) -> AuthResponse:
        response = await self._client.get_async(_status_endpoint(reference_id))
        return AuthResponse.from_response(response)

    def check_push_accept_status(
        self,
        reference_id: str,
        timeout: float,
        interval: float,
    ) -> AuthResponse:
        """
        Poll a push-to-accept request until the user answers.

        Args:
            reference_id: ``reference_id`` returned by ``send_push_accept``
            timeout: Seconds to wait before giving up
            interval: Seconds between status checks; the vendor recommends
                no less than 5

        Returns:
            The response whose message is ACCEPTED, DENIED, FAILED or EXPIRED

        Raises:
            PollTimeoutError: If no terminal status arrives before timeout
            HttpError: If a status check fails
        """
        return poll_status(
            lambda: self.get_status(reference_id),
            timeout,
            interval,
            state_of=_push_state,
        )

    async def check_push_accept_status_async(
        self,
        reference_id: str,
        timeout: float,
        interval: float,
    ) -> AuthResponse:
        """Async counterpart of ``check_push_accept_status``."""
        return await poll_status_async(
            lambda: self.get_status_async(reference_id),
            timeout,
            interval,
            state_of=_push_state,
        )


def _status_endpoint(reference_id: str) -> str:
    return f"{AUTH_ENDPOINT}/{reference_id}"


def _push_state(response: AuthResponse) -> str:
    # The push state is reported in the message field
    return response.message
