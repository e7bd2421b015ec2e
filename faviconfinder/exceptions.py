"""faviconfinder specific exceptions."""


class FaviconFinderError(Exception):
    """Base class for errors raised by faviconfinder."""


class FaviconNotFoundError(FaviconFinderError):
    """Raised when no candidate location yields decodable image data."""

    def __init__(self, site_url: str) -> None:
        super().__init__(f"Failed to find a favicon for {site_url}")
        self.site_url = site_url


class FetchError(FaviconFinderError):
    """Raised by a fetcher for transport errors, timeouts and non-2xx responses."""

    pass


class InvalidFinderError(FaviconFinderError):
    """Raised when an unknown finder type is requested."""

    pass
