#!/usr/bin/env python3
"""
Copy media files into YYYY/MM/DD folders using the capture date taken from
smartphone file names or from EXIF metadata.
Requires: ExifTool command-line tool and PyExifTool Python library.
"""

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Sequence

import exiftool

from picsort.args import get_config
from picsort.log import setup_logging
from picsort.models import (
    MEDIA_EXTENSIONS,
    AppConfig,
    CopyOutcome,
    CopyReport,
    colorize,
    colors,
    is_media_file,
)
from picsort.print import print_footer, print_header, printe
from picsort.resolvers import (
    DateResolver,
    ExifDateResolver,
    MetadataReadError,
    SmartphoneFilenameResolver,
    resolve_destination,
)

module_logger = logging.getLogger(__name__)


def check_exiftool_availability() -> None:
    """Check if ExifTool command-line tool is available."""
    try:
        subprocess.run(["exiftool", "-ver"], capture_output=True, check=True)
    except (subprocess.SubprocessError, FileNotFoundError):
        print("\033[0;31mExifTool command-line tool is not installed or not in PATH.\033[0m")
        print("Please download and install it from: \033[0;36mhttps://exiftool.org/\033[0m")
        sys.exit(1)


def check_conditions(cfg: AppConfig) -> None:
    """Check if all conditions are met to run the script."""
    # Show version and exit when requested with --version
    if cfg.show_version:
        msg = (
            f"{colorize(cfg.script_name, colors.green)} "
            f"version {colorize(cfg.script_version, colors.cyan)}"
        )
        if cfg.script_author:
            msg += f" by {colorize(cfg.script_author, colors.cyan)}"
        printe(msg, 0)

    check_exiftool_availability()

    if not cfg.source_dir.is_dir():
        printe(
            f"The specified directory '{colorize(str(cfg.source_dir), colors.cyan)}' does not exist or is not a directory.",
            1,
        )

    if cfg.target_dir is None:
        printe("HOME is not set; use --output to choose a target directory.", 1)

    if cfg.quiet and cfg.verbose:
        printe("Cannot use both quiet mode and verbose mode.", 1)


def find_media_files(
    directory: Path,
    resolvers: Sequence[DateResolver],
    recursive: bool = True,
    logger: logging.Logger | None = None,
    extensions: tuple[str, ...] = MEDIA_EXTENSIONS,
) -> dict[str, str]:
    """
    Collect media files below a directory and their destination fragments.

    Args:
        directory: Directory to scan
        resolvers: Date resolvers, tried in order for each media file
        recursive: Descend into subdirectories
        logger: Logger for per-file messages
        extensions: Lowercase extensions (without dot) treated as media

    Returns:
        Mapping of absolute source path to ``YYYY/MM/DD/<name>`` fragment

    Raises:
        OSError: If a directory cannot be listed
    """
    logger = logger or module_logger
    files: dict[str, str] = {}

    for entry in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            if recursive:
                files.update(find_media_files(entry, resolvers, recursive, logger, extensions))
        elif entry.is_file() and is_media_file(entry, extensions):
            source = str(entry.absolute())
            fragment = resolve_destination(entry, resolvers)
            if fragment is None:
                logger.debug("No date found for %s", source)
                continue
            files[source] = fragment

    return files


def copy_file(source: str, destination: Path, test: bool = False) -> CopyOutcome:
    """
    Copy one file unless the destination already exists.

    Raises:
        OSError: If the directory cannot be created or the copy fails
    """
    if not test:
        destination.parent.mkdir(parents=True, exist_ok=True)
    if destination.exists():
        return CopyOutcome.SKIPPED_EXISTING
    if not test:
        shutil.copy2(source, destination)
    return CopyOutcome.COPIED


def copy_media_files(
    files: dict[str, str],
    target_dir: Path,
    logger: logging.Logger | None = None,
    test: bool = False,
) -> CopyReport:
    """
    Copy every source file to target_dir / fragment and tally the outcomes.

    In test mode nothing is written; destinations claimed earlier in the same
    run count as existing so the tally matches a real run.
    """
    logger = logger or module_logger
    report = CopyReport()
    claimed: set[Path] = set()

    for source, fragment in files.items():
        destination = Path(target_dir) / fragment
        try:
            if test and destination in claimed:
                outcome = CopyOutcome.SKIPPED_EXISTING
            else:
                outcome = copy_file(source, destination, test)
        except OSError as e:
            logger.error("Error copying file %s: %s", source, e)
            report.add(source, CopyOutcome.FAILED, str(e))
            continue

        if outcome is CopyOutcome.SKIPPED_EXISTING:
            logger.warning("Skipping file %s, already exists", destination)
        else:
            logger.info("Copy file %s to %s", source, destination)
            claimed.add(destination)
        report.add(source, outcome)

    logger.info("Copied %d/%d files", report.copied_files, report.total_files)
    return report


class MediaOrganizer:
    """
    Discover media files in a source tree and copy them into a dated target tree.

    The mapping in ``files`` is filled by one discovery pass and consumed by
    one copy pass.
    """

    def __init__(
        self,
        source: Path,
        target: Path,
        resolvers: Sequence[DateResolver],
        recursive: bool = True,
        logger: logging.Logger | None = None,
        extensions: tuple[str, ...] = MEDIA_EXTENSIONS,
    ):
        self.source = Path(source)
        self.target = Path(target)
        self.resolvers = list(resolvers)
        self.recursive = recursive
        self.logger = logger or module_logger
        self.extensions = tuple(extensions)
        self.files: dict[str, str] = {}

    def discover(self) -> dict[str, str]:
        self.files = find_media_files(
            self.source, self.resolvers, self.recursive, self.logger, self.extensions
        )
        self.logger.info("Found %d files", len(self.files))
        return self.files

    def copy_files(self, test: bool = False) -> CopyReport:
        return copy_media_files(self.files, self.target, self.logger, test)

    def organize(self, test: bool = False) -> CopyReport:
        self.discover()
        return self.copy_files(test)


def run(cfg: AppConfig, logger: logging.Logger | None = None) -> CopyReport:
    """Run discovery and copying for the configured source and target."""
    if cfg.target_dir is None:
        raise ValueError("Target directory is not set.")

    with exiftool.ExifToolHelper() as et:
        resolvers: list[DateResolver] = [
            SmartphoneFilenameResolver(),
            ExifDateResolver(et, strict=cfg.strict),
        ]
        organizer = MediaOrganizer(
            cfg.source_dir,
            cfg.target_dir,
            resolvers,
            recursive=cfg.recursive,
            logger=logger,
            extensions=cfg.extensions,
        )
        return organizer.organize(test=cfg.test)


def main() -> None:
    """Main function to run the media sorting process."""
    cfg = get_config()
    check_conditions(cfg)
    logger = setup_logging(cfg)
    print_header(cfg)

    try:
        report = run(cfg, logger)
    except MetadataReadError as e:
        printe(str(e), 1)
        return
    except OSError as e:
        printe(f"Run aborted: {e}", 1)
        return

    print_footer(report, cfg)


if __name__ == "__main__":
    main()
