"""Constants for faviconfinder"""

DEFAULT_FAVICON_FILENAME: str = "favicon.ico"

DEFAULT_TEXT_ENCODING: str = "utf-8"

PARSER: str = "html.parser"

ALLOWED_SCHEMES: tuple[str, ...] = ("http", "https")

# Matches `<meta http-equiv="refresh">`, compared case-insensitively by the fetcher.
META_REFRESH_HTTP_EQUIV: str = "refresh"

HTML_CONTENT_TYPES: tuple[str, ...] = ("text/html", "application/xhtml+xml")

# HTTP request configuration
REQUEST_HEADERS: dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:109.0) Gecko/20100101 Firefox/114.0"
    ),
    "Accept": (
        "image/avif,image/webp,image/x-icon,image/*,text/html;q=0.8,"
        "application/xhtml+xml;q=0.8,*/*;q=0.5"
    ),
    "Accept-Language": "en-GB,en-US;q=0.9,en;q=0.8",
    "DNT": "1",
}
