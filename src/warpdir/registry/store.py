"""warprc persistence.

The file matches the zsh ``wd`` plugin's ``.warprc`` so the two can be used
interchangeably::

    wd-rs:/home/jason/Code/wd-rs
    cs:/run/current-system/sw
"""

from __future__ import annotations

import contextlib
import os
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

from warpdir.infrastructure.config import resolve_rc_path
from warpdir.infrastructure.logger import logger
from warpdir.registry.errors import MalformedLineError, RegistryIOError
from warpdir.registry.types import SEPARATOR, WarpPoint
from warpdir.registry.views import points_by_name, points_by_path

ENCODING = "utf-8"
# Keeps undecodable bytes intact across a load/save cycle
ENCODING_ERRORS = "surrogateescape"


def parse_line(line_no: int, line: str) -> WarpPoint:
    """Split a line on the first separator into a warp point."""
    name, sep, path = line.partition(SEPARATOR)
    if not sep or not name or not path:
        raise MalformedLineError(line_no, line)
    # Unvalidated so undecodable bytes (surrogates) pass through untouched
    return WarpPoint.model_construct(name=name, path=path)


def parse_lines(lines: Iterable[str]) -> list[WarpPoint]:
    """Parse every well-formed line, skipping (and warning about) the rest."""
    points: list[WarpPoint] = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        try:
            points.append(parse_line(line_no, line))
        except MalformedLineError as err:
            logger.warning("Skipping malformed line", line_no=err.line_no, line=err.line)
    return points


def format_lines(by_name: dict[str, str]) -> list[str]:
    return [f"{name}{SEPARATOR}{path}\n" for name, path in by_name.items()]


class RegistryStore(ABC):
    """Reads and rewrites the whole registry.

    Subclasses only move raw lines; parsing lives here.
    """

    @abstractmethod
    def read_lines(self) -> list[str]: ...

    @abstractmethod
    def write_lines(self, lines: list[str]) -> None: ...

    def load_points(self) -> list[WarpPoint]:
        return parse_lines(self.read_lines())

    def load_by_name(self) -> dict[str, str]:
        return points_by_name(self.load_points())

    def load_by_path(self) -> dict[str, list[str]]:
        return points_by_path(self.load_points())

    def save(self, by_name: dict[str, str]) -> None:
        self.write_lines(format_lines(by_name))


class RcFileStore(RegistryStore):
    """Registry backed by the warprc file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = resolve_rc_path()
        return self._path

    def read_lines(self) -> list[str]:
        rc_path = self.path
        try:
            with open(rc_path, encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
                logger.debug("Reading rc", path=str(rc_path))
                return f.readlines()
        except FileNotFoundError:
            # No file yet is just an empty registry
            logger.debug("No rc file", path=str(rc_path))
            return []
        except OSError as err:
            logger.warning("Error opening rc", path=str(rc_path), error=str(err))
            return []

    def write_lines(self, lines: list[str]) -> None:
        """Atomically rewrite the rc file.

        Writes a temp file beside the target then renames it over, so a
        failure leaves the existing registry as it was. A symlinked rc file
        has its target rewritten.
        """
        target = self.path.resolve()
        tmp_path = target.with_name(f".{target.name}.{os.getpid()}.tmp")
        logger.debug("Writing rc", path=str(target), count=len(lines))

        try:
            with open(tmp_path, "w", encoding=ENCODING, errors=ENCODING_ERRORS, newline="") as f:
                for i, line in enumerate(lines, start=1):
                    try:
                        f.write(line)
                    except (OSError, UnicodeError) as err:
                        logger.error("Error writing line", line_no=i, error=str(err))
            with contextlib.suppress(FileNotFoundError):
                # Keep the permissions of the file being replaced
                os.chmod(tmp_path, target.stat().st_mode & 0o7777)
            os.replace(tmp_path, target)
        except OSError as err:
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise RegistryIOError(target, err) from err


class MemoryStore(RegistryStore):
    """In-memory registry, for tests and embedding."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self.lines: list[str] = list(lines or [])
        self.saves = 0

    def read_lines(self) -> list[str]:
        return list(self.lines)

    def write_lines(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self.saves += 1
