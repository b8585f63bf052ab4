"""
Tests for data classes and helpers in models.py
"""
from pathlib import Path

import pytest

from picsort.models import (
    MEDIA_EXTENSIONS,
    AppConfig,
    CopyOutcome,
    CopyReport,
    ResolvedDate,
    colorize,
    colors,
    get_normalized_extension,
    is_media_file,
)


@pytest.mark.parametrize("ext", ["jpg", "jpeg", "mp4", "png", "JPG", "JPEG", "MP4", "PNG", "Jpg"])
def test_is_media_file_accepts_media_extensions(ext):
    assert is_media_file(Path(f"test.{ext}")), f"File should be a media file: test.{ext}"


@pytest.mark.parametrize("name", ["notes.txt", "photo.heic", "clip.mov", "README", "archive.jpg.zip", ".jpg"])
def test_is_media_file_rejects_other_files(name):
    assert not is_media_file(Path(name))


def test_is_media_file_accepts_str_path():
    assert is_media_file("/some/dir/IMG_1234.JPG")


def test_get_normalized_extension():
    assert get_normalized_extension(Path("a/b/Photo.JPEG")) == "jpeg"
    assert get_normalized_extension(Path("a/b/Photo")) == ""


def test_resolved_date_fragment_keeps_digits_as_found():
    date = ResolvedDate("2023", "99", "00", "IMG_20239900_000000.jpg")
    assert date.fragment == "2023/99/00/IMG_20239900_000000.jpg"


def test_copy_report_counts():
    report = CopyReport()
    report.add("/a.jpg", CopyOutcome.COPIED)
    report.add("/b.jpg", CopyOutcome.SKIPPED_EXISTING)
    report.add("/c.jpg", CopyOutcome.FAILED, "Permission denied")

    assert report.copied_files == 1
    assert report.total_files == 3
    assert report.skipped == ["/b.jpg"]
    assert report.failed == [("/c.jpg", "Permission denied")]


def test_config_defaults(tmp_path):
    cfg = AppConfig(source_dir=tmp_path)
    assert cfg.script_name == "picsort"
    assert cfg.extensions == MEDIA_EXTENSIONS
    assert cfg.recursive is True
    assert cfg.strict is False
    assert cfg.target_subdir == "Pictures"
    assert cfg.target_dir is None


def test_print_config(tmp_path, capsys):
    cfg = AppConfig(source_dir=tmp_path)
    cfg.print_config()
    out = capsys.readouterr().out
    assert "RAW Settings" in out
    assert "recursive" in out
    assert str(tmp_path) in out


def test_colorize():
    assert colorize("text", colors.red) == f"{colors.red}text{colors.reset}"
