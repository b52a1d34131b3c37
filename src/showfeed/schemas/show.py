"""Pydantic schemas for show data."""

from pydantic import BaseModel, ConfigDict


class ShowResponse(BaseModel):
    """A single upcoming show."""

    model_config = ConfigDict(from_attributes=True)

    date: str
    time: str = ""
    venue: str = ""
    city: str = ""
    tickets_url: str = ""


class ShowsResponse(BaseModel):
    """Response for the shows endpoint."""

    shows: list[ShowResponse]
    total_shows: int
