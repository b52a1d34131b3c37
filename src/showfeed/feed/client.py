"""Fetch the show feed over HTTP and run it through the parser."""

import logging
from datetime import date

import httpx

from showfeed.config import settings
from showfeed.feed.models import ShowRecord
from showfeed.feed.parser import ShowFeedParser

logger = logging.getLogger(__name__)


class ShowFeedClient:
    """
    Client for the published spreadsheet CSV that lists upcoming shows.

    Never raises on feed problems: a missing URL, an HTTP error or a network
    failure all yield an empty list, which the site shows as "no shows
    currently scheduled".
    """

    def __init__(
        self,
        url: str | None = None,
        parser: ShowFeedParser | None = None,
        timeout: int | None = None,
    ) -> None:
        """
        Initialize the feed client.

        Args:
            url: Feed URL (uses settings if not provided)
            parser: Parser to run on the fetched text (built from settings if
                not provided)
            timeout: Request timeout in seconds (uses settings if not provided)
        """
        self.url = url or settings.shows_csv_url
        self.parser = parser or ShowFeedParser(
            expected_columns=settings.expected_columns,
            timezone=settings.timezone,
        )
        self.timeout = timeout or settings.fetch_timeout

    async def fetch_text(self) -> str:
        """
        Download the raw feed text.

        Raises:
            httpx.HTTPError: on network failure or non-success status
        """
        logger.info(f"Fetching shows from: {self.url}")
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            response = await client.get(self.url)
            logger.debug(f"Feed response status: {response.status_code}")
            response.raise_for_status()
            return response.text

    async def get_upcoming_shows(self, today_date: date | None = None) -> list[ShowRecord]:
        """
        Fetch the feed and return upcoming shows, earliest first.

        Args:
            today_date: Date to filter against (defaults to today)

        Returns:
            List of shows, empty on any error
        """
        if not self.url:
            logger.error("Shows feed URL is not configured (set SHOWS_CSV_URL)")
            return []

        try:
            text = await self.fetch_text()
            shows = self.parser.parse(text, today_date)
        except Exception as e:
            logger.error(f"Failed to fetch or parse shows feed: {e}", exc_info=True)
            return []

        return shows
