"""Show feed parsing and fetching."""

from showfeed.feed.client import ShowFeedClient
from showfeed.feed.models import RowRejected, ShowRecord
from showfeed.feed.parser import ShowFeedParser
from showfeed.feed.tokenizer import split_line

__all__ = [
    "RowRejected",
    "ShowFeedClient",
    "ShowFeedParser",
    "ShowRecord",
    "split_line",
]
