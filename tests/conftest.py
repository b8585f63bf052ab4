import logging
from pathlib import Path

import pytest


class FakeExifTool:
    """Stand-in for exiftool.ExifToolHelper, keyed by file name."""

    def __init__(self, dates=None, broken=()):
        self.dates = dict(dates or {})
        self.broken = set(broken)
        self.calls = []

    def get_tags(self, files, tags):
        path = files[0]
        name = Path(path).name
        self.calls.append(name)
        if name in self.broken:
            raise RuntimeError(f"Error: File format error - {path}")
        result = {"SourceFile": path}
        if name in self.dates:
            for tag in tags:
                result[tag] = self.dates[name]
        return [result]


@pytest.fixture
def fake_exiftool():
    return FakeExifTool


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and propagation changes made by setup_logging."""
    yield
    logger = logging.getLogger("picsort")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
