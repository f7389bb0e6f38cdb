"""External API client implementations."""

from .navitas_client import HttpNavitasClient

__all__ = [
    "HttpNavitasClient",
]
