"""Result of a signed call to the Navitas API."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UpstreamResult:
    """A successful (2xx) upstream response."""

    status: int
    data: Any
    success: bool = True
