"""Data models for faviconfinder"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class FaviconType(str, Enum):
    """Kind of favicon a finder reports."""

    ICO = "ico"


class FaviconURL(BaseModel):
    """A favicon location whose content decoded successfully as an image."""

    model_config = ConfigDict(frozen=True)

    url: str
    type: FaviconType


class FetchOutcome(BaseModel):
    """Result of fetching a URL: raw bytes, the final URL and response metadata."""

    content: bytes
    url: str
    status_code: int
    content_type: str = ""
    encoding: str = "utf-8"

    def text(self) -> str:
        """Decode the content with the resolved encoding, replacing invalid bytes."""
        return self.content.decode(self.encoding, errors="replace")
