"""Shell hooks that wrap the binary in a ``wd`` function.

A child process can't change its parent shell's directory, so the hook
runs the binary and ``cd``s into whatever it printed when it exits 0.
"""

from __future__ import annotations

import shlex
import shutil
import sys
from pathlib import Path

from warpdir.registry.errors import WarpError

DEFAULT_BIN_NAME = "warpdir"

_WD_FUNCTION = """wd() {{
    output=$({bin_name} "$@")
    status_code=$?
    if [[ $status_code -eq 0 ]]; then
        cd "$output"
    elif [[ "$output" != "" ]]; then
        echo "$output"
    fi
    unset output
    unset status_code
}}
"""

# Only warp points are completed, not subcommands
_BASH_COMPLETION = """
_wd_completions() {{
    WARPS=`{bin_name} list --completion`
    COMPREPLY=($(compgen -W "${{WARPS}}" "${{COMP_WORDS[1]}}"))
}}

"""


class UnsupportedShellError(WarpError):
    def __init__(self, shell: str) -> None:
        super().__init__(f"unknown shell type '{shell}'")
        self.shell = shell


def bash_hook(bin_name: str) -> str:
    quoted = shlex.quote(bin_name)
    return (
        _BASH_COMPLETION.format(bin_name=quoted)
        + _WD_FUNCTION.format(bin_name=quoted)
        + "complete -F _wd_completions wd\n"
    )


def zsh_hook(bin_name: str) -> str:
    return _WD_FUNCTION.format(bin_name=shlex.quote(bin_name))


HOOKS = {
    "bash": bash_hook,
    "zsh": zsh_hook,
}


def render_hook(shell: str, bin_name: str) -> str:
    hook = HOOKS.get(shell)
    if hook is None:
        raise UnsupportedShellError(shell)
    return hook(bin_name)


def current_bin_name() -> str:
    """Absolute path of the running executable, or the bare command name."""
    argv0 = sys.argv[0] if sys.argv else ""
    if argv0 and Path(argv0).name not in ("__main__.py", "-c"):
        found = shutil.which(argv0)
        if found:
            return str(Path(found).resolve())
    return DEFAULT_BIN_NAME
