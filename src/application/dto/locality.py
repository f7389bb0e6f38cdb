"""Data transfer objects for locality lookups."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocalityDTO:
    """A single locality in lookup responses."""

    city: str
    state: str
    zip: str
    county: str

    @classmethod
    def from_entity(cls, locality) -> "LocalityDTO":
        return cls(
            city=locality.city,
            state=locality.state,
            zip=locality.zip,
            county=locality.county,
        )
