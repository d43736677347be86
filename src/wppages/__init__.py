from wppages.wordpress.client import WordPressClient, WPConfig
from wppages.wordpress.errors import (
    WordPressError,
    WordPressNotFoundError,
    WordPressResponseError,
)
from wppages.wordpress.models import PageRef, PageStatus, SearchQuery, WordPressPage

__all__ = [
    "WordPressClient",
    "WPConfig",
    "WordPressError",
    "WordPressNotFoundError",
    "WordPressResponseError",
    "PageRef",
    "PageStatus",
    "SearchQuery",
    "WordPressPage",
]
