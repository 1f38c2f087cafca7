"""Tests for logging setup."""

import logging
import sys

from warpdir.infrastructure.logger import install_exception_hooks, setup_logging


class TestSetupLogging:
    def test_logs_go_to_stderr(self, capsys):
        log = setup_logging(logging.INFO)
        log.info("Reading rc", path="/tmp/rc")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Reading rc" in captured.err

    def test_filters_below_level(self, capsys):
        log = setup_logging(logging.WARNING)
        log.info("hidden")
        log.warning("shown")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err


class TestExceptionHooks:
    def test_installs_excepthook(self, monkeypatch):
        monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
        install_exception_hooks()
        assert sys.excepthook is not sys.__excepthook__

    def test_uncaught_exception_logged(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
        setup_logging(logging.WARNING)
        install_exception_hooks()
        try:
            raise ValueError("boom")
        except ValueError:
            sys.excepthook(*sys.exc_info())
        assert "Uncaught exception" in capsys.readouterr().err
