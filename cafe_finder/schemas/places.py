"""Pydantic response models for place lookup tools."""

from pydantic import BaseModel, Field


class ResolvedPlace(BaseModel):
    latitude: float = Field(description="Latitude coordinate.")
    longitude: float = Field(description="Longitude coordinate.")
    label: str = Field(description="Display label of the resolved place.")


class PlaceLookupResponse(BaseModel):
    query: str = Field(description="The free-text query that was resolved.")
    found: bool = Field(description="Whether the provider returned a match.")
    place: ResolvedPlace | None = Field(None, description="The best match, if any.")
    message: str | None = Field(None, description="Explanation when nothing was found.")
