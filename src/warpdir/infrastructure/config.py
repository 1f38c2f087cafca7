"""Configuration constants and rc file location."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from warpdir.registry.errors import NoHomeDirError

ENV_RC_PATH = "WD_CONFIG"
ENV_LOG_LEVEL = "LOG_LEVEL"
RC_FILENAME = ".warprc"

# -v count -> level; anything past the end is DEBUG
VERBOSITY_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG)


def resolve_rc_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the path of the warprc file.

    ``WD_CONFIG`` wins when set; otherwise ``~/.warprc``.
    """
    env = os.environ if environ is None else environ
    override = env.get(ENV_RC_PATH, "")
    if override:
        return Path(override)

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as err:
        raise NoHomeDirError(ENV_RC_PATH) from err
    # expanduser hands back "~" untouched when it can't find a home
    if not home.is_absolute():
        raise NoHomeDirError(ENV_RC_PATH)
    return home / RC_FILENAME


def resolve_log_level(verbosity: int, environ: Mapping[str, str] | None = None) -> int:
    """Map the -v count to a logging level. ``LOG_LEVEL`` overrides it."""
    env = os.environ if environ is None else environ
    named = env.get(ENV_LOG_LEVEL, "").upper()
    if named:
        level = logging.getLevelName(named)
        if isinstance(level, int):
            return level

    index = min(max(verbosity, 0), len(VERBOSITY_LEVELS) - 1)
    return VERBOSITY_LEVELS[index]
