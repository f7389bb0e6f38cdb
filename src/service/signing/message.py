"""
Canonical Message Construction for Navitas Request Signing.

The canonical message is the exact string the Navitas API rebuilds on
its side before verifying a signature:

- GET:  the path, with any query string exactly as transmitted
- POST: the path immediately followed by the serialized JSON body

No normalization, re-ordering or encoding is applied here. Callers are
responsible for producing the string that goes on the wire.
"""

import json
from typing import Any


def serialize_body(payload: Any) -> str:
    """
    Serialize a request payload to its wire representation.

    Uses compact separators, preserves key insertion order and keeps
    non-ASCII characters as-is. The returned string must be both signed
    and transmitted; never serialize the same payload twice.

    Args:
        payload: JSON-serializable value

    Returns:
        The JSON text of the request body
    """
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def build_get_message(path: str) -> str:
    """Canonical message for a GET request."""
    return path


def build_post_message(path: str, body: str) -> str:
    """Canonical message for a POST request (no separator)."""
    return path + body
