"""Async fetcher for candidate favicon URLs"""

import logging
import re
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from faviconfinder.config import settings
from faviconfinder.constants import (
    HTML_CONTENT_TYPES,
    META_REFRESH_HTTP_EQUIV,
    PARSER,
    REQUEST_HEADERS,
)
from faviconfinder.encoding import resolve_text_encoding
from faviconfinder.exceptions import FetchError
from faviconfinder.http_client import create_http_client
from faviconfinder.models import FetchOutcome
from faviconfinder.utils import is_valid_url, join_url

logger = logging.getLogger(__name__)

# The `url=` part of a refresh directive, e.g. `0; URL='/home'`.
_REFRESH_URL_PATTERN = re.compile(r"url\s*=\s*['\"]?\s*([^'\"]+?)\s*['\"]?\s*$", re.IGNORECASE)


def _new_session() -> httpx.AsyncClient:
    return create_http_client(
        max_connections=settings.http.max_connections,
        connect_timeout=float(settings.http.connect_timeout_sec),
        request_timeout=float(settings.http.request_timeout_sec),
        pool_timeout=float(settings.http.pool_timeout_sec),
    )


def find_meta_refresh_url(outcome: FetchOutcome) -> Optional[str]:
    """Return the absolute target of a `<meta http-equiv="refresh">` tag in an
    HTML response, or None if the response is not HTML or has no such redirect.
    """
    content_type = outcome.content_type.lower()
    if not any(html_type in content_type for html_type in HTML_CONTENT_TYPES):
        return None

    page = BeautifulSoup(outcome.text(), PARSER)
    for meta in page.find_all("meta"):
        http_equiv = str(meta.get("http-equiv", "")).strip().lower()
        if http_equiv != META_REFRESH_HTTP_EQUIV:
            continue

        match = _REFRESH_URL_PATTERN.search(str(meta.get("content", "")))
        if not match:
            continue

        target = join_url(outcome.url, match.group(1))
        if is_valid_url(target):
            return target

    return None


class AsyncFaviconFetcher:
    """Fetch favicon candidates asynchronously using async HTTP client."""

    def __init__(
        self,
        session: Optional[httpx.AsyncClient] = None,
        max_meta_refresh_redirects: Optional[int] = None,
    ) -> None:
        self.session = session or _new_session()
        self.max_meta_refresh_redirects = (
            max_meta_refresh_redirects
            if max_meta_refresh_redirects is not None
            else settings.fetcher.max_meta_refresh_redirects
        )

    async def __aenter__(self) -> "AsyncFaviconFetcher":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch(self, url: str, follow_meta_refresh: bool = False) -> FetchOutcome:
        """Fetch URL, following HTTP redirects and, if enabled, meta refresh redirects.

        Raises:
            FetchError: On transport errors, timeouts, non-2xx responses or when the
            meta refresh chain is longer than `max_meta_refresh_redirects`.
        """
        outcome = await self._get(url)
        hops = 0

        while follow_meta_refresh:
            target = find_meta_refresh_url(outcome)
            if target is None:
                break

            hops += 1
            if hops > self.max_meta_refresh_redirects:
                raise FetchError(
                    f"Exceeded {self.max_meta_refresh_redirects} meta refresh redirects "
                    f"fetching {url}"
                )

            logger.debug(f"Following meta refresh from {outcome.url} to {target}")
            outcome = await self._get(target)

        return outcome

    async def _get(self, url: str) -> FetchOutcome:
        try:
            response = await self.session.get(url, headers=REQUEST_HEADERS, follow_redirects=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"Failed to fetch URL {url}: {e}") from e

        if not response.is_success:
            raise FetchError(f"Failed to fetch URL {url}: HTTP {response.status_code}")

        return FetchOutcome(
            content=response.content,
            url=str(response.url),
            status_code=response.status_code,
            content_type=response.headers.get("Content-Type", ""),
            encoding=resolve_text_encoding(response.charset_encoding),
        )

    async def close(self) -> None:
        """Close HTTP session and release resources."""
        await self.session.aclose()

    async def reset(self) -> None:
        """Close current session and create a new one."""
        try:
            await self.close()
        except Exception as ex:
            logger.warning(f"Error occurred when resetting favicon fetcher: {ex}")
        self.session = _new_session()
