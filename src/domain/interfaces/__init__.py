"""Domain Interfaces - Abstract contracts for external collaborators."""

from .clients import NavitasAPIClient

__all__ = [
    "NavitasAPIClient",
]
