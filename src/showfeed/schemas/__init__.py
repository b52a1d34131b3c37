"""Pydantic schemas for API responses."""

from showfeed.schemas.show import ShowResponse, ShowsResponse

__all__ = [
    "ShowResponse",
    "ShowsResponse",
]
