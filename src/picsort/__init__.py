"""
picsort - sort photos and videos into date-based folders

picsort copies media files into a YYYY/MM/DD tree, taking the capture date
from smartphone file names or from EXIF metadata.
"""

from .core import MediaOrganizer, main

__all__ = ["MediaOrganizer", "main"]
