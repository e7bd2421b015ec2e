"""Discover the favicon of a website by probing well known locations."""

from faviconfinder.exceptions import FaviconNotFoundError, FetchError
from faviconfinder.finders import (
    FinderType,
    IcoFaviconFinder,
    create_finder,
    discover,
    discover_blocking,
)
from faviconfinder.models import FaviconType, FaviconURL

__all__ = [
    "FaviconNotFoundError",
    "FaviconType",
    "FaviconURL",
    "FetchError",
    "FinderType",
    "IcoFaviconFinder",
    "create_finder",
    "discover",
    "discover_blocking",
]
