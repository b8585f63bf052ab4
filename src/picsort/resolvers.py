"""
Date resolvers for picsort.

Each resolver turns a media file path into a destination fragment of the form
``YYYY/MM/DD/<filename>``, or returns None when it cannot tell the date.
Resolvers are tried in order by :func:`resolve_destination`.
"""

import logging
import re
from pathlib import Path
from typing import Any, Protocol, Sequence

from picsort.models import ResolvedDate

logger = logging.getLogger(__name__)

SMARTPHONE_PATTERN = re.compile(
    r"""
    (?:IMG|VID)_
    (?P<y>\d{4})    # the year
    (?P<m>\d{2})    # the month
    (?P<d>\d{2})    # the day
    _\d{6}\.(?:jpg|mp4)
    """,
    re.VERBOSE | re.ASCII,
)

EXIF_DISPLAY_PATTERN = re.compile(
    r"(?P<y>\d{4})-(?P<m>\d{2})-(?P<d>\d{2})\s+(?:\d|:){8}", re.ASCII
)

EXIF_DATE_TAG = "EXIF:DateTimeOriginal"
EXIF_EXTENSIONS = (".jpg", ".png")


class MetadataReadError(Exception):
    """Raised in strict mode when a file's metadata cannot be read."""


class DateResolver(Protocol):
    """Anything that maps a file path to a destination fragment or None."""

    def resolve(self, path: Path) -> str | None: ...


class SmartphoneFilenameResolver:
    """Read the date from names like ``IMG_20230115_102911.jpg``."""

    def match(self, filename: str) -> ResolvedDate | None:
        m = SMARTPHONE_PATTERN.search(filename)
        if m is None:
            return None
        return ResolvedDate(m["y"], m["m"], m["d"], m[0])

    def resolve(self, path: Path) -> str | None:
        resolved = self.match(str(path))
        return resolved.fragment if resolved else None


def exif_display_value(value: Any) -> str:
    """
    Render a raw EXIF date value as display text.

    EXIF stores dates as ``YYYY:MM:DD HH:MM:SS``; the date part is shown
    with dashes, the time part is left untouched.
    """
    text = str(value).strip()
    if text[4:5] == ":" and text[7:8] == ":":
        text = text.replace(":", "-", 2)
    return text


class ExifDateResolver:
    """
    Read the date from the EXIF DateTimeOriginal tag of JPG and PNG files.

    Args:
        exiftool: a running ``exiftool.ExifToolHelper`` (or anything with a
            compatible ``get_tags`` method)
        strict: raise MetadataReadError instead of skipping files whose
            metadata cannot be read
    """

    def __init__(self, exiftool: Any, strict: bool = False):
        self.exiftool = exiftool
        self.strict = strict

    def read_date_tag(self, path: Path) -> Any:
        try:
            data = self.exiftool.get_tags([str(path)], tags=[EXIF_DATE_TAG])
        except Exception as e:
            if self.strict:
                raise MetadataReadError(f"Could not read metadata from {path}: {e}") from e
            logger.warning("Could not read metadata from %s: %s", path, e)
            return None
        if not data:
            return None
        return data[0].get(EXIF_DATE_TAG)

    def resolve(self, path: Path) -> str | None:
        path = Path(path)
        if not str(path).lower().endswith(EXIF_EXTENSIONS):
            return None

        value = self.read_date_tag(path)
        if value is None:
            logger.debug("No EXIF date in %s", path.name)
            return None

        m = EXIF_DISPLAY_PATTERN.search(exif_display_value(value))
        if m is None:
            logger.debug("Unrecognized EXIF date %r in %s", value, path.name)
            return None
        return ResolvedDate(m["y"], m["m"], m["d"], path.name).fragment


def resolve_destination(path: Path, resolvers: Sequence[DateResolver]) -> str | None:
    """Return the fragment from the first resolver that knows the date."""
    for resolver in resolvers:
        fragment = resolver.resolve(path)
        if fragment is not None:
            return fragment
    return None
