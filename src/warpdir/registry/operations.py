"""Warp point registry -- add, remove, resolve, list, show and clean."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from warpdir.infrastructure.logger import logger
from warpdir.registry.errors import InvalidPointError, NoSuchPointError, PointExistsError
from warpdir.registry.store import RegistryStore
from warpdir.registry.types import MissingPath, WarpPoint
from warpdir.registry.views import points_by_name, points_by_path


def default_point_name(current_dir: str | Path) -> str:
    """The warp point name used when none is given: the directory's base name."""
    name = Path(current_dir).name
    if not name:
        raise InvalidPointError(name, f"can't derive a name from '{current_dir}'")
    return name


def _make_point(name: str, path: str) -> WarpPoint:
    try:
        return WarpPoint(name=name, path=path)
    except ValidationError as err:
        reason = "; ".join(e["msg"] for e in err.errors())
        raise InvalidPointError(name, reason) from err


class WarpRegistry:
    """One load -> mutate -> save transaction per call.

    Nothing is cached between calls; every operation re-reads the store.
    """

    def __init__(self, store: RegistryStore, exists: Callable[[str], bool] = os.path.exists) -> None:
        self._store = store
        self._exists = exists

    def add(self, name: str | None, current_dir: str | Path) -> WarpPoint:
        if name is None:
            name = default_point_name(current_dir)
        point = _make_point(name, str(current_dir))

        by_name = self._store.load_by_name()
        if point.name in by_name:
            raise PointExistsError(point.name, by_name[point.name])

        by_name[point.name] = point.path
        self._store.save(by_name)
        logger.info("Added warp point", point=point.name, path=point.path)
        return point

    def remove(self, name: str | None, current_dir: str | Path) -> WarpPoint:
        if name is None:
            name = default_point_name(current_dir)

        by_name = self._store.load_by_name()
        path = by_name.pop(name, None)
        if path is None:
            raise NoSuchPointError(name)

        self._store.save(by_name)
        logger.info("Removed warp point", point=name, path=path)
        return WarpPoint(name=name, path=path)

    def resolve(self, name: str) -> str:
        path = self._store.load_by_name().get(name)
        if path is None:
            raise NoSuchPointError(name)
        return path

    def list_points(self) -> list[WarpPoint]:
        return [WarpPoint(name=name, path=path) for name, path in self._store.load_by_name().items()]

    def completion_names(self) -> list[str]:
        return list(self._store.load_by_name())

    def show(self, current_dir: str | Path) -> list[str]:
        """Names pointing at ``current_dir``; empty when there are none."""
        return list(self._store.load_by_path().get(str(current_dir), []))

    def clean(self, dry_run: bool = False) -> list[MissingPath]:
        """Find warp points whose directory no longer exists and drop them.

        Only names still bound to a missing path are reported, so a dry run
        lists exactly what a real run removes. All removals are applied with
        a single save.
        """
        points = self._store.load_points()
        by_name = points_by_name(points)

        missing: list[MissingPath] = []
        for path, names in points_by_path(points).items():
            if self._exists(path):
                continue
            # A duplicate name may have been rebound to a live path later in the file
            doomed = [name for name in dict.fromkeys(names) if by_name.get(name) == path]
            for name in set(names) - set(doomed):
                logger.debug("Point no longer bound to missing path", point=name, path=path)
            if doomed:
                missing.append(MissingPath(path=path, points=doomed))

        if dry_run or not missing:
            return missing

        for entry in missing:
            for name in entry.points:
                del by_name[name]

        self._store.save(by_name)
        logger.info("Cleaned warp points", paths=len(missing))
        return missing
