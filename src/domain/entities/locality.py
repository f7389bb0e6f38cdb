"""Locality entity resolved from a zip code."""

import re
from dataclasses import dataclass
from typing import Any

_WORD_START = re.compile(r"\b\w")


def to_title_case(value: str) -> str:
    """
    Convert an ALL CAPS string to Title Case.

    "NEW YORK" -> "New York"
    """
    if not value:
        return value
    return _WORD_START.sub(lambda m: m.group().upper(), value.lower())


def _text(value: Any, default: str = "") -> str:
    # Navitas occasionally sends numbers (zip) or nulls
    if value is None or value == "":
        return default
    return str(value)


@dataclass(frozen=True)
class Locality:
    """City, state and county for a US zip code."""

    city: str
    state: str
    zip: str
    county: str

    @classmethod
    def from_upstream(cls, item: dict, default_zip: str) -> "Locality":
        """Build a locality from a raw Navitas record."""
        return cls(
            city=to_title_case(_text(item.get("city"))),
            state=_text(item.get("state")),
            zip=_text(item.get("zip"), default_zip),
            county=to_title_case(_text(item.get("county"))),
        )

    def to_dict(self) -> dict:
        return {
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
            "county": self.county,
        }
