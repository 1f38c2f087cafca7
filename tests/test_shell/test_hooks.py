"""Tests for shell hook generation."""

import sys

import pytest

from warpdir.registry.errors import WarpError
from warpdir.shell.hooks import UnsupportedShellError, current_bin_name, render_hook


class TestRenderHook:
    def test_bash_defines_wd_and_completion(self):
        hook = render_hook("bash", "/usr/bin/warpdir")
        assert "wd() {" in hook
        assert 'output=$(/usr/bin/warpdir "$@")' in hook
        assert "/usr/bin/warpdir list --completion" in hook
        assert "complete -F _wd_completions wd" in hook

    def test_zsh_defines_wd_only(self):
        hook = render_hook("zsh", "/usr/bin/warpdir")
        assert "wd() {" in hook
        assert 'cd "$output"' in hook
        assert "complete" not in hook

    def test_cd_only_on_success(self):
        hook = render_hook("zsh", "warpdir")
        assert "if [[ $status_code -eq 0 ]]; then" in hook

    def test_bin_name_with_spaces_is_quoted(self):
        hook = render_hook("zsh", "/opt/my tools/warpdir")
        assert "output=$('/opt/my tools/warpdir' \"$@\")" in hook

    def test_unknown_shell(self):
        with pytest.raises(UnsupportedShellError, match="unknown shell type 'fish'") as exc_info:
            render_hook("fish", "warpdir")
        assert isinstance(exc_info.value, WarpError)


class TestCurrentBinName:
    def test_falls_back_when_run_as_module(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["/src/warpdir/__main__.py"])
        assert current_bin_name() == "warpdir"

    def test_resolves_installed_script(self, tmp_path, monkeypatch):
        script = tmp_path / "warpdir"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o755)
        monkeypatch.setattr(sys, "argv", [str(script)])
        assert current_bin_name() == str(script.resolve())
