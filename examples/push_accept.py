"""
Push-to-accept demo.

Sends a push-to-accept request to a user's registered device, then polls
until the user accepts, denies, or the request expires.

Usage:
    pip install -e .
    python examples/push_accept.py jdoe

Environment variables:
    SAIDP_APP_ID       - Application ID for the realm
    SAIDP_APP_KEY      - Hex-encoded application key
    SAIDP_HOST         - SecureAuth server host name
    SAIDP_REALM        - Realm, e.g. secureauth1
    SAIDP_PORT         - Port (default: 443)
    SAIDP_BYPASS_CERT_VALIDATION - "true" to skip TLS checks (lab servers only)
"""

import sys

from saidp_client import HttpError, PollTimeoutError, SecureAuthClient, get_settings
from saidp_client.logging import setup_logging


def main(user_id: str) -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)
    client = SecureAuthClient.from_settings(settings)

    factors = client.factors.get(user_id)
    if not factors.is_signature_valid(client.config):
        print("Factors response signature is invalid")
        return 1

    devices = [f for f in factors.factors if "push_accept" in f.capabilities]
    if not devices:
        print(f"No push-to-accept device registered for {user_id}")
        return 1

    try:
        sent = client.auth.send_push_accept(
            user_id,
            devices[0].id,
            company_name="Example Corp",
            application_description="Example login",
        )
        result = client.auth.check_push_accept_status(
            sent.reference_id, timeout=60, interval=5,
        )
    except PollTimeoutError:
        print("No answer from the device in time")
        return 1
    except HttpError as e:
        print(f"API error {e.code}: {e.message}")
        return 1

    print(f"Push-to-accept result: {result.message}")
    return 0 if result.message == "ACCEPTED" else 1


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: push_accept.py USER_ID")
        sys.exit(2)
    sys.exit(main(sys.argv[1]))
