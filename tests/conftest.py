# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Fixtures shared by all faviconfinder tests."""

import os

# Select the testing settings before faviconfinder loads them.
os.environ.setdefault("FAVICONFINDER_ENV", "testing")

from io import BytesIO  # noqa: E402
from logging import LogRecord  # noqa: E402
from typing import Callable  # noqa: E402

import pytest  # noqa: E402
from PIL import Image as PILImage  # noqa: E402

FilterCaplogFixture = Callable[[list[LogRecord], str], list[LogRecord]]


@pytest.fixture(scope="session", name="filter_caplog")
def fixture_filter_caplog() -> FilterCaplogFixture:
    """Return a function that will filter pytest captured log records for a given logger
    name
    """

    def filter_caplog(records: list[LogRecord], logger_name: str) -> list[LogRecord]:
        """Filter pytest captured log records for a given logger name"""
        return [record for record in records if record.name == logger_name]

    return filter_caplog


def _encode_image(image_format: str) -> bytes:
    buffer = BytesIO()
    PILImage.new("RGBA", (16, 16), (255, 0, 0, 255)).save(buffer, format=image_format)
    return buffer.getvalue()


@pytest.fixture(scope="session")
def ico_bytes() -> bytes:
    """A 16x16 ICO image."""
    return _encode_image("ICO")


@pytest.fixture(scope="session")
def png_bytes() -> bytes:
    """A 16x16 PNG image."""
    return _encode_image("PNG")
