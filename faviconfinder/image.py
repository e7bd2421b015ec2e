"""Decodability check used to validate favicon candidates"""

import logging
from io import BytesIO

from PIL import Image as PILImage

logger = logging.getLogger(__name__)


def is_decodable_image(content: bytes) -> bool:
    """Return True if Pillow can identify, verify and decode `content` as an image."""
    if not content:
        return False
    try:
        with PILImage.open(BytesIO(content)) as img:
            img.verify()
        # `verify` checks nothing past the header for some formats, ICO included.
        with PILImage.open(BytesIO(content)) as img:
            img.load()
    except Exception as e:
        logger.debug(f"Content is not a decodable image: {e}")
        return False
    return True
