"""Find `favicon.ico` style favicons at the site root, falling back to the root domain"""

import asyncio
import logging
from typing import Callable, Optional

from faviconfinder.config import settings
from faviconfinder.constants import DEFAULT_FAVICON_FILENAME
from faviconfinder.exceptions import FaviconNotFoundError, FetchError
from faviconfinder.image import is_decodable_image
from faviconfinder.io import AsyncFaviconFetcher, FaviconFetcher
from faviconfinder.models import FaviconType, FaviconURL
from faviconfinder.utils import (
    compose_candidate_url,
    is_same_url,
    join_candidate_url,
    root_domain_url,
)

logger = logging.getLogger(__name__)


class IcoFaviconFinder:
    """Probe a well known favicon path on the site, then on its registrable domain.

    Subdomains often serve no favicon of their own while the bare domain does, so
    when "https://blog.example.com/favicon.ico" yields no image the finder tries
    "https://example.com/favicon.ico". At most two fetches are made, one after
    the other, and a URL is only returned once its content decoded as an image.
    """

    def __init__(
        self,
        fetcher: FaviconFetcher,
        preferred_filename: Optional[str] = None,
        follow_meta_refresh: bool = False,
        image_validator: Callable[[bytes], bool] = is_decodable_image,
    ) -> None:
        self.fetcher = fetcher
        self.preferred_filename = preferred_filename or DEFAULT_FAVICON_FILENAME
        self.follow_meta_refresh = follow_meta_refresh
        self.image_validator = image_validator

    async def discover(self, site_url: str) -> FaviconURL:
        """Return the first candidate URL serving a decodable image.

        Raises:
            FaviconNotFoundError: If neither the site root nor the root domain
            serves an image at the preferred path.
        """
        candidate_url = compose_candidate_url(site_url, self.preferred_filename)
        if candidate_url is None:
            logger.debug(f"Cannot compose a favicon URL for {site_url}")
            raise FaviconNotFoundError(site_url)

        if await self._probe(candidate_url):
            return FaviconURL(url=candidate_url, type=FaviconType.ICO)

        root_base = root_domain_url(site_url)
        if root_base is None:
            logger.debug(f"No root domain to fall back to for {site_url}")
            raise FaviconNotFoundError(site_url)

        root_candidate_url = join_candidate_url(root_base, self.preferred_filename)
        if root_candidate_url is None or is_same_url(root_candidate_url, candidate_url):
            raise FaviconNotFoundError(site_url)

        if await self._probe(root_candidate_url):
            return FaviconURL(url=root_candidate_url, type=FaviconType.ICO)

        raise FaviconNotFoundError(site_url)

    async def _probe(self, url: str) -> bool:
        """Fetch the URL and check that its content is an image."""
        try:
            outcome = await self.fetcher.fetch(url, follow_meta_refresh=self.follow_meta_refresh)
        except FetchError as e:
            logger.debug(f"Favicon candidate {url} is not viable: {e}")
            return False

        if not self.image_validator(outcome.content):
            logger.debug(f"Favicon candidate {url} did not decode as an image")
            return False

        return True


async def discover(
    site_url: str,
    preferred_filename: str = DEFAULT_FAVICON_FILENAME,
    follow_meta_refresh: bool = False,
    fetcher: Optional[FaviconFetcher] = None,
) -> FaviconURL:
    """Discover the `.ico` favicon of a site.

    A fetcher is created, and closed afterwards, when none is given.
    """
    if fetcher is not None:
        finder = IcoFaviconFinder(fetcher, preferred_filename, follow_meta_refresh)
        return await finder.discover(site_url)

    async with AsyncFaviconFetcher() as own_fetcher:
        finder = IcoFaviconFinder(own_fetcher, preferred_filename, follow_meta_refresh)
        return await finder.discover(site_url)


def discover_blocking(
    site_url: str,
    preferred_filename: Optional[str] = None,
    follow_meta_refresh: Optional[bool] = None,
) -> FaviconURL:
    """Run `discover` to completion for callers without a running event loop.

    Unset options fall back to the `finder` settings.
    """
    return asyncio.run(
        discover(
            site_url,
            preferred_filename or settings.finder.preferred_filename,
            (
                follow_meta_refresh
                if follow_meta_refresh is not None
                else settings.finder.follow_meta_refresh
            ),
        )
    )
