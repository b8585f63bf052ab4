"""
Argument parsing logic for picsort.
"""

import argparse
import dataclasses
import os
from pathlib import Path
from typing import Any

from picsort.models import AppConfig, colorize, colors


def get_default_value(field_name: str) -> Any:
    """Extract default value from AppConfig dataclass field."""
    f = AppConfig.__dataclass_fields__[field_name]
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory()
    return f.default


def get_default_info(default_val: Any) -> str:
    """Generate a string with default settings for help message."""
    return f"(default: '{colorize(str(default_val), colors.yellow)}')"


def get_default_target(subdir: str) -> Path | None:
    """Return $HOME/<subdir>, or None when HOME is not set."""
    home = os.environ.get("HOME")
    if not home:
        return None
    return Path(home) / subdir


def get_config(argv: list[str] | None = None) -> AppConfig:
    """Parse command line arguments and return the AppConfig object."""

    parser = argparse.ArgumentParser(
        prog="picsort",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="Copy photos and videos into YYYY/MM/DD folders using the date from\n"
        f"smartphone file names or EXIF data. Requires {colorize('ExifTool', colors.green)} command-line tool.",
        epilog=f"Example: {colorize('picsort', colors.green)} -f /media/phone/DCIM -o ~/Pictures",
    )

    parser.add_argument(
        "-f",
        "--folder",
        dest="folder",
        type=str,
        default=os.getcwd(),
        metavar="DIR",
        help="Directory to read media files from (default: current working directory)",
    )

    def_target = get_default_value("target_subdir")
    parser.add_argument(
        "-o",
        "--output",
        dest="output",
        type=str,
        default=None,
        metavar="DIR",
        help=f"Directory to copy sorted files into {get_default_info('$HOME/' + def_target)}",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        dest="recursive",
        action="store_true",
        default=get_default_value("recursive"),
        help="Parse the directory recursively (default)",
    )
    parser.add_argument(
        "-R",
        "--no-recursive",
        dest="recursive",
        action="store_false",
        help="Only process files at the top level of the directory",
    )
    parser.add_argument(
        "-s",
        "--strict",
        dest="strict",
        action="store_true",
        help="Abort when the metadata of a file cannot be read",
    )
    parser.add_argument(
        "-S",
        "--settings",
        dest="show_settings",
        action="store_true",
        help="Show raw settings (variable values)",
    )
    parser.add_argument(
        "-t",
        "--test",
        dest="test",
        action="store_true",
        help="Test mode: show what would be done without making changes",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        dest="quiet",
        action="store_true",
        help="Quiet mode (suppress non-error messages)",
    )
    parser.add_argument(
        "-v", "--version", dest="show_version", action="store_true", help="Print version and exit"
    )
    parser.add_argument(
        "-V",
        "--verbose",
        dest="verbose",
        action="store_true",
        help="Print detailed information during processing",
    )

    args = parser.parse_args(argv)

    source_dir = Path(args.folder).expanduser().resolve()
    if args.output:
        target_dir: Path | None = Path(args.output).expanduser().resolve()
    else:
        target_dir = get_default_target(def_target)

    return AppConfig(
        recursive=args.recursive,
        strict=args.strict,
        test=args.test,
        quiet=args.quiet,
        verbose=args.verbose,
        show_version=args.show_version,
        show_settings=args.show_settings,
        source_dir=source_dir,
        target_dir=target_dir,
    )
