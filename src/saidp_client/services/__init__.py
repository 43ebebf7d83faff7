"""
Per-resource request and response objects built on the signed transport.
"""

from .auth import AuthRequest, AuthResponse, AuthService, PushAcceptDetails
from .factors import Factor, FactorsResponse, FactorsService
from .throttle import ThrottleResponse, ThrottleService

__all__ = [
    "AuthRequest",
    "AuthResponse",
    "AuthService",
    "PushAcceptDetails",
    "Factor",
    "FactorsResponse",
    "FactorsService",
    "ThrottleResponse",
    "ThrottleService",
]
