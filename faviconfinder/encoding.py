"""Resolve declared response charsets to Python codec names."""

import codecs
import logging
from typing import Optional

from faviconfinder.constants import DEFAULT_TEXT_ENCODING

logger = logging.getLogger(__name__)


def resolve_text_encoding(charset: Optional[str]) -> str:
    """Map an IANA charset label (e.g. "ISO-8859-1", "Shift_JIS") to the canonical
    Python codec name, falling back to UTF-8 when no charset is declared or the
    label is unknown.
    """
    if not charset:
        return DEFAULT_TEXT_ENCODING

    label = charset.strip().strip("\"'").strip()
    if not label:
        return DEFAULT_TEXT_ENCODING

    try:
        return codecs.lookup(label).name
    except LookupError:
        logger.debug(f"Unknown charset {charset!r}, using {DEFAULT_TEXT_ENCODING}")
        return DEFAULT_TEXT_ENCODING
