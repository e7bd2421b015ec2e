"""I/O components for fetching favicon candidates"""

from faviconfinder.io.async_favicon_fetcher import AsyncFaviconFetcher, find_meta_refresh_url
from faviconfinder.io.protocol import FaviconFetcher

__all__ = ["AsyncFaviconFetcher", "FaviconFetcher", "find_meta_refresh_url"]
