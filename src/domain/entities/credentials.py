"""Immutable configuration values for partner and upstream credentials."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CredentialSet:
    """
    Caller-facing secrets accepted at the inbound boundary.

    An empty set is a deployment error, not a "reject everyone" state.
    """

    keys: Tuple[str, ...] = ()

    @classmethod
    def from_csv(cls, raw: str | None) -> "CredentialSet":
        """Parse a comma-separated list, trimming entries and dropping blanks."""
        keys = tuple(k.strip() for k in (raw or "").split(",") if k.strip())
        return cls(keys=keys)

    @property
    def is_empty(self) -> bool:
        return len(self.keys) == 0

    def __len__(self) -> int:
        return len(self.keys)


@dataclass(frozen=True)
class SigningIdentity:
    """
    Upstream-facing credentials required to produce signed calls.

    All four fields must be non-empty for the identity to be usable.
    """

    base_url: str = ""
    client_id: str = ""
    secret: str = ""
    api_token: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", (self.base_url or "").rstrip("/"))

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.client_id and self.secret and self.api_token)
