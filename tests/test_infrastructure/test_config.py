"""Tests for configuration."""

import logging
from pathlib import Path

import pytest

from warpdir.infrastructure.config import resolve_log_level, resolve_rc_path
from warpdir.registry.errors import NoHomeDirError


def _no_home(cls):
    raise RuntimeError("Could not determine home directory.")


class TestResolveRcPath:
    def test_env_override(self, tmp_path):
        rc = tmp_path / "custom-warprc"
        assert resolve_rc_path({"WD_CONFIG": str(rc)}) == rc

    def test_defaults_to_home(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert resolve_rc_path({}) == tmp_path / ".warprc"

    def test_empty_override_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
        assert resolve_rc_path({"WD_CONFIG": ""}) == tmp_path / ".warprc"

    def test_reads_process_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("WD_CONFIG", str(tmp_path / "rc"))
        assert resolve_rc_path() == tmp_path / "rc"

    def test_no_home_dir(self, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(_no_home))
        with pytest.raises(NoHomeDirError, match="WD_CONFIG"):
            resolve_rc_path({})

    def test_unexpanded_home(self, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: Path("~")))
        with pytest.raises(NoHomeDirError):
            resolve_rc_path({})

    def test_override_wins_without_home(self, tmp_path, monkeypatch):
        monkeypatch.setattr(Path, "home", classmethod(_no_home))
        assert resolve_rc_path({"WD_CONFIG": str(tmp_path / "rc")}) == tmp_path / "rc"


class TestResolveLogLevel:
    def test_default_is_warning(self):
        assert resolve_log_level(0, {}) == logging.WARNING

    def test_verbosity_steps(self):
        assert resolve_log_level(1, {}) == logging.INFO
        assert resolve_log_level(2, {}) == logging.DEBUG

    def test_verbosity_past_the_end(self):
        assert resolve_log_level(9, {}) == logging.DEBUG

    def test_env_overrides_verbosity(self):
        assert resolve_log_level(2, {"LOG_LEVEL": "error"}) == logging.ERROR

    def test_unknown_env_level_ignored(self):
        assert resolve_log_level(1, {"LOG_LEVEL": "chatty"}) == logging.INFO
