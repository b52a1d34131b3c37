"""Health check endpoint."""

from fastapi import APIRouter

from showfeed.config import settings

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str | bool]:
    """
    Health check endpoint.

    ``feed_configured`` is False when no feed URL is set, in which case
    /api/shows always answers with an empty list.
    """
    return {"status": "ok", "feed_configured": bool(settings.shows_csv_url)}
