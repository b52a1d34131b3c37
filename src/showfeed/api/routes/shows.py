"""Upcoming shows API endpoint."""

import logging

from fastapi import APIRouter, Depends

from showfeed.feed.client import ShowFeedClient
from showfeed.schemas import ShowResponse, ShowsResponse

logger = logging.getLogger(__name__)
router = APIRouter()


def get_feed_client() -> ShowFeedClient:
    """Build a feed client from settings; overridden in tests."""
    return ShowFeedClient()


@router.get("/shows", response_model=ShowsResponse)
async def get_shows(client: ShowFeedClient = Depends(get_feed_client)) -> ShowsResponse:
    """
    List upcoming shows, earliest first.

    The feed is fetched fresh on every request. Feed failures are never
    surfaced: the list is simply empty.
    """
    shows = await client.get_upcoming_shows()
    logger.info(f"Serving {len(shows)} upcoming shows")
    return ShowsResponse(
        shows=[ShowResponse.model_validate(show) for show in shows],
        total_shows=len(shows),
    )
