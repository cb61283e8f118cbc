# invsync Sources Module
# Concrete remote change sources

from invsync.sources.feed import FeedChangeSource, FeedCursor, FeedCursorStore

__all__ = [
    "FeedChangeSource",
    "FeedCursor",
    "FeedCursorStore",
]
