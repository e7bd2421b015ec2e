"""Protocol shared by favicon finders."""

from enum import Enum
from typing import Protocol

from faviconfinder.models import FaviconURL


class FinderType(str, Enum):
    """Enum for the discovery technique a finder implements."""

    ICO = "ico"


class FaviconFinder(Protocol):
    """Protocol for a favicon discovery strategy."""

    async def discover(self, site_url: str) -> FaviconURL:
        """Discover the favicon of `site_url`.

        Returns:
            The `FaviconURL` of a location whose content decoded as an image.
        Raises:
            FaviconNotFoundError: If no candidate location yields an image.
        """
        ...
