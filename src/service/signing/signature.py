"""
HMAC-SHA256 Signatures for Navitas Request Signing.

Signatures are base64-encoded and placed in an ``Authorization`` header
of the form ``HMAC {client_id}:{signature}``.
"""

import base64
import hashlib
import hmac

AUTHORIZATION_SCHEME = "HMAC"


def sign_message(secret: str, message: str) -> str:
    """
    Compute the base64 HMAC-SHA256 of a canonical message.

    Args:
        secret: Shared signing secret
        message: Canonical message

    Returns:
        Base64-encoded signature
    """
    digest = hmac.new(
        secret.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def build_authorization(client_id: str, signature: str) -> str:
    """Format the Authorization header value."""
    return f"{AUTHORIZATION_SCHEME} {client_id}:{signature}"


def sign_request(client_id: str, secret: str, message: str) -> str:
    """Sign a canonical message and return the Authorization header value."""
    return build_authorization(client_id, sign_message(secret, message))
