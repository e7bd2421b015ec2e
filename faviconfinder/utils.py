"""URL manipulation utilities for favicon discovery"""

import logging
from typing import Optional
from urllib.parse import urljoin, urlparse

import tldextract

from faviconfinder.constants import ALLOWED_SCHEMES

logger = logging.getLogger(__name__)

# Use the public suffix list snapshot bundled with tldextract, never the network.
_extract = tldextract.TLDExtract(suffix_list_urls=())


def is_valid_url(url: str) -> bool:
    """Check if URL is an absolute http(s) URL with a host."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ALLOWED_SCHEMES and bool(parsed.hostname)


def join_url(base: str, path: str) -> str:
    """Join base URL with path."""
    return urljoin(base, path)


def join_candidate_url(base: str, candidate_path: str) -> Optional[str]:
    """Resolve a favicon path against a base URL, or return None if the result is malformed."""
    try:
        candidate = join_url(base, candidate_path)
    except ValueError as e:
        logger.debug(f"Failed to join {candidate_path!r} onto {base}: {e}")
        return None
    return candidate if is_valid_url(candidate) else None


def is_same_url(first: str, second: str) -> bool:
    """Return True if the URLs differ at most in the case of their scheme and host."""
    try:
        keys = [
            (parsed.scheme, parsed.hostname, parsed.port, parsed.path, parsed.query)
            for parsed in (urlparse(first), urlparse(second))
        ]
    except ValueError:
        return first == second
    return keys[0] == keys[1]


def compose_candidate_url(site_url: str, candidate_path: str) -> Optional[str]:
    """Resolve a favicon path against the root path of the site.

    The path is resolved against "/" of the site, not against the page, so
    "https://sub.example.com/blog/page" with "favicon.ico" gives
    "https://sub.example.com/favicon.ico".
    """
    try:
        site_root = join_url(site_url, "/")
    except ValueError as e:
        logger.debug(f"Failed to resolve the root of {site_url}: {e}")
        return None
    return join_candidate_url(site_root, candidate_path)


def root_domain_url(url: str) -> Optional[str]:
    """Return the bare registrable domain URL of `url`, e.g. "https://example.com"
    for "https://a.b.example.com/path/page.html".

    Scheme and port are kept; path, query and fragment are dropped. Returns None
    when the URL has no host or its host has no registrable domain (IP addresses,
    single label hosts such as "localhost", unknown suffixes).
    """
    try:
        parsed = urlparse(url)
        port = parsed.port
    except ValueError as e:
        logger.debug(f"Failed to parse {url}: {e}")
        return None

    if parsed.scheme not in ALLOWED_SCHEMES or not parsed.hostname:
        return None

    extracted = _extract(parsed.hostname)
    if not extracted.domain or not extracted.suffix:
        return None

    netloc = f"{extracted.domain}.{extracted.suffix}"
    if port is not None:
        netloc = f"{netloc}:{port}"
    return f"{parsed.scheme}://{netloc}"
