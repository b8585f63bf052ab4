"""
Tests for argument parsing in args.py
"""
from pathlib import Path
from unittest.mock import patch

import pytest

from picsort.args import get_config, get_default_info, get_default_target, get_default_value
from picsort.models import AppConfig


def test_get_default_value():
    """Test extraction of default values from AppConfig dataclass."""
    assert get_default_value("recursive") is True
    assert get_default_value("strict") is False
    assert get_default_value("target_subdir") == "Pictures"
    assert "jpg" in get_default_value("extensions")


def test_get_default_info():
    result = get_default_info("test_value")
    assert "default:" in result
    assert "test_value" in result


def test_get_default_target(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_default_target("Pictures") == tmp_path / "Pictures"


def test_get_default_target_without_home(monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    assert get_default_target("Pictures") is None


def test_get_config_defaults(monkeypatch, tmp_path):
    """get_config returns AppConfig with defaults when no args provided."""
    monkeypatch.setenv("HOME", str(tmp_path))
    with patch("picsort.args.os.getcwd", return_value=str(tmp_path)):
        cfg = get_config([])
    assert isinstance(cfg, AppConfig)
    assert cfg.source_dir == tmp_path.resolve()
    assert cfg.target_dir == tmp_path / "Pictures"
    assert cfg.recursive is True
    assert cfg.strict is False
    assert cfg.test is False
    assert cfg.quiet is False
    assert cfg.verbose is False


def test_get_config_folder_and_output(tmp_path):
    source = tmp_path / "phone"
    target = tmp_path / "sorted"
    cfg = get_config(["-f", str(source), "-o", str(target)])
    assert cfg.source_dir == source.resolve()
    assert cfg.target_dir == target.resolve()


def test_get_config_long_options(tmp_path):
    cfg = get_config(["--folder", str(tmp_path), "--output", str(tmp_path / "out")])
    assert cfg.source_dir == tmp_path.resolve()
    assert cfg.target_dir == (tmp_path / "out").resolve()


def test_get_config_without_home(monkeypatch, tmp_path):
    monkeypatch.delenv("HOME", raising=False)
    cfg = get_config(["-f", str(tmp_path)])
    assert cfg.target_dir is None


@pytest.mark.parametrize("argv, expected", [
    (["-R"], False),
    (["--no-recursive"], False),
    (["-r"], True),
    (["--recursive"], True),
    (["-R", "-r"], True),
])
def test_get_config_recursive_flags(tmp_path, argv, expected):
    cfg = get_config(["-f", str(tmp_path), *argv])
    assert cfg.recursive is expected


@pytest.mark.parametrize("flag, attr", [
    ("-s", "strict"),
    ("--strict", "strict"),
    ("-t", "test"),
    ("-q", "quiet"),
    ("-V", "verbose"),
    ("-v", "show_version"),
    ("-S", "show_settings"),
])
def test_get_config_boolean_flags(tmp_path, flag, attr):
    cfg = get_config(["-f", str(tmp_path), flag])
    assert getattr(cfg, attr) is True


def test_get_config_reads_sys_argv(tmp_path):
    with patch("sys.argv", ["picsort", "-f", str(tmp_path), "-t"]):
        cfg = get_config()
    assert cfg.test is True
    assert cfg.source_dir == tmp_path.resolve()
