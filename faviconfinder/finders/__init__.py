"""Favicon finders and the factory selecting one by type"""

from typing import Any

from faviconfinder.exceptions import InvalidFinderError
from faviconfinder.finders.ico import IcoFaviconFinder, discover, discover_blocking
from faviconfinder.finders.protocol import FaviconFinder, FinderType
from faviconfinder.io import FaviconFetcher

_FINDERS: dict[FinderType, type[IcoFaviconFinder]] = {
    FinderType.ICO: IcoFaviconFinder,
}


def create_finder(
    finder_type: FinderType | str, fetcher: FaviconFetcher, **options: Any
) -> FaviconFinder:
    """Create the finder for `finder_type`, passing `options` to its constructor.

    Raises:
        InvalidFinderError: If `finder_type` is not a known finder type.
    """
    try:
        finder_cls = _FINDERS[FinderType(finder_type)]
    except ValueError:
        raise InvalidFinderError(f"Unknown finder type: {finder_type}")

    return finder_cls(fetcher, **options)


__all__ = [
    "FaviconFinder",
    "FinderType",
    "IcoFaviconFinder",
    "create_finder",
    "discover",
    "discover_blocking",
]
