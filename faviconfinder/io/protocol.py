"""Protocol for the fetcher that favicon finders depend on."""

from typing import Protocol

from faviconfinder.models import FetchOutcome


class FaviconFetcher(Protocol):
    """Protocol for fetching candidate favicon URLs."""

    async def fetch(self, url: str, follow_meta_refresh: bool = False) -> FetchOutcome:
        """Fetch `url` and return its content with the final URL and response metadata.

        Args:
            - `url`: The absolute URL to fetch.
            - `follow_meta_refresh`: Whether to follow HTML `<meta http-equiv="refresh">`
              redirects in addition to HTTP redirects.
        Returns:
            A `FetchOutcome` for the final response.
        Raises:
            FetchError: On network errors, timeouts and non-2xx responses.
        """
        ...
