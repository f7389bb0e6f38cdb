"""Locality-related Pydantic schemas."""

from pydantic import BaseModel, Field


class LocalitySchema(BaseModel):
    """Schema for a single entry of the GET /api/localities response."""

    city: str = Field(..., description="City name in Title Case", examples=["New York"])
    state: str = Field(..., description="Two-letter state code", examples=["NY"])
    zip: str = Field(..., description="5-digit zip code", examples=["10471"])
    county: str = Field(..., description="County name in Title Case", examples=["Bronx"])
