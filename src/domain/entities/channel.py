"""Submission channels and their upstream paths."""

from dataclasses import dataclass
from enum import Enum


class Channel(str, Enum):
    """Partner application channel."""

    INDIRECT = "Indirect"
    DIRECT = "Direct"

    @classmethod
    def parse(cls, value: object) -> "Channel | None":
        """Return the matching channel, or None for anything else."""
        for channel in cls:
            if value == channel.value:
                return channel
        return None


@dataclass(frozen=True)
class SubmissionRoutes:
    """
    Upstream submission path per channel.

    Both channels may point at the same path; that is a deployment choice.
    """

    indirect: str
    direct: str

    def path_for(self, channel: Channel) -> str:
        paths = {
            Channel.INDIRECT: self.indirect,
            Channel.DIRECT: self.direct,
        }
        return paths[channel]
