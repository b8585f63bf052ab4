import time
import tomllib
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Any

MEDIA_EXTENSIONS: tuple[str, ...] = ("jpg", "jpeg", "mp4", "png")


@lru_cache(maxsize=1)
def _get_pyproject_data() -> dict[str, Any]:
    """
    Load data from pyproject.toml located in the project root.
    Cached to prevent multiple file reads.
    Assumes structure: project_root/src/picsort/models.py
    """
    try:
        pyproject_path = Path(__file__).parents[2] / "pyproject.toml"

        if not pyproject_path.is_file():
            return {}

        with open(pyproject_path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def _get_script_version() -> str:
    """Get version directly from pyproject.toml [project] section."""
    data = _get_pyproject_data()
    return str(data.get("project", {}).get("version", "0.0.0"))


def _get_script_name() -> str:
    """Get project name from [project]."""
    data = _get_pyproject_data()
    return str(data.get("project", {}).get("name", "picsort"))


def _get_script_author() -> str:
    """Get first author name from [project.authors]."""
    data = _get_pyproject_data()
    authors = data.get("project", {}).get("authors", [])
    if isinstance(authors, list) and len(authors) > 0:
        return str(authors[0].get("name", ""))
    return ""


@dataclass
class Colors:
    """Terminal color codes."""

    reset: str = "\033[0m"
    red: str = "\033[31m"
    green: str = "\033[32m"
    yellow: str = "\033[33m"
    cyan: str = "\033[36m"
    magenta: str = "\033[35m"


# global Colors instance
colors = Colors()


def colorize(text: str, color: str) -> str:
    """Wrap text in color codes."""
    return f"{color}{text}{colors.reset}"


def get_normalized_extension(path: Path) -> str:
    """
    Extract and normalize file extension from path.

    Args:
        path: Path object to extract extension from

    Returns:
        Lowercase extension without leading dot
    """
    return path.suffix.lstrip(".").lower()


def is_media_file(path: Path, extensions: tuple[str, ...] = MEDIA_EXTENSIONS) -> bool:
    """Check if the file extension marks a supported media file."""
    ext = get_normalized_extension(Path(path))
    return bool(ext) and ext in extensions


@dataclass(frozen=True)
class ResolvedDate:
    """Capture date taken from a file name or its metadata.

    The parts are kept as the digit strings found in the source, they are
    not checked against a calendar.
    """

    year: str
    month: str
    day: str
    filename: str

    @property
    def fragment(self) -> str:
        """Destination path relative to the target directory."""
        return f"{self.year}/{self.month}/{self.day}/{self.filename}"


class CopyOutcome(Enum):
    """Result of copying a single file."""

    COPIED = "copied"
    SKIPPED_EXISTING = "skipped"
    FAILED = "failed"


@dataclass
class CopyReport:
    """Per-run tally of copy outcomes."""

    copied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    failed: list[tuple[str, str]] = field(default_factory=list)

    def add(self, source: str, outcome: CopyOutcome, reason: str = "") -> None:
        """Record the outcome of copying one source file."""
        if outcome is CopyOutcome.COPIED:
            self.copied.append(source)
        elif outcome is CopyOutcome.SKIPPED_EXISTING:
            self.skipped.append(source)
        else:
            self.failed.append((source, reason))

    @property
    def copied_files(self) -> int:
        """Number of files copied (or that would be copied in test mode)."""
        return len(self.copied)

    @property
    def total_files(self) -> int:
        """Number of files processed, whatever their outcome."""
        return len(self.copied) + len(self.skipped) + len(self.failed)


@dataclass(frozen=True)
class AppConfig:
    """Application configuration with default values."""

    # Settings
    extensions: tuple[str, ...] = MEDIA_EXTENSIONS
    target_subdir: str = "Pictures"
    indent: str = "    "

    # Flags
    recursive: bool = True
    strict: bool = False
    test: bool = False
    quiet: bool = False
    verbose: bool = False
    show_version: bool = False
    show_settings: bool = False

    # Runtime metadata
    script_name: str = field(default_factory=_get_script_name)
    script_version: str = field(default_factory=_get_script_version)
    script_author: str = field(default_factory=_get_script_author)

    # Runtime state
    start_time: float = field(default_factory=time.time)
    source_dir: Path = field(default_factory=Path.cwd)
    target_dir: Path | None = None

    def print_config(self, show_all: bool = False) -> None:
        """
        Print all configuration properties alphabetically.
        """
        print(f"{colorize('RAW Settings:', colors.yellow)}")

        for key in sorted(self.__dict__.keys()):
            if not show_all and key.startswith("_"):
                continue

            value = getattr(self, key)
            print(f"{self.indent}{key}: {colorize(str(value), colors.cyan)}")
