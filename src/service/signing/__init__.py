"""
Request Signing Module for the Navitas Connect API
"""

from .message import build_get_message, build_post_message, serialize_body
from .signature import (
    AUTHORIZATION_SCHEME,
    build_authorization,
    sign_message,
    sign_request,
)

__all__ = [
    # Canonical message
    "serialize_body",
    "build_get_message",
    "build_post_message",
    # Signature
    "AUTHORIZATION_SCHEME",
    "sign_message",
    "build_authorization",
    "sign_request",
]
