"""Registry errors."""

from __future__ import annotations

from pathlib import Path


class WarpError(Exception):
    """Base class for expected, user-facing failures."""


class NoHomeDirError(WarpError):
    def __init__(self, env_var: str) -> None:
        super().__init__(
            f"unable to guess path of rc file (unable to find home directory). try using {env_var}"
        )
        self.env_var = env_var


class RegistryIOError(WarpError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"error saving {path} ({cause})")
        self.path = path
        self.cause = cause


class MalformedLineError(WarpError):
    """A registry line that isn't ``name:path``. Always recovered by the loader."""

    def __init__(self, line_no: int, line: str) -> None:
        super().__init__(f"malformed line #{line_no}: {line!r}")
        self.line_no = line_no
        self.line = line


class PointExistsError(WarpError):
    def __init__(self, name: str, path: str) -> None:
        super().__init__(f"warp point exists '{name} -> {path}'")
        self.name = name
        self.path = path


class NoSuchPointError(WarpError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no warp point named '{name}'")
        self.name = name


class InvalidPointError(WarpError):
    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"invalid warp point name {name!r}: {reason}")
        self.name = name
        self.reason = reason
