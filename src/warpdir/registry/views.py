"""By-name and by-path views over a list of warp points."""

from __future__ import annotations

from collections.abc import Iterable

from warpdir.registry.types import WarpPoint


def points_by_name(points: Iterable[WarpPoint]) -> dict[str, str]:
    """Map name -> path. A later duplicate name overwrites an earlier one."""
    return {point.name: point.path for point in points}


def points_by_path(points: Iterable[WarpPoint]) -> dict[str, list[str]]:
    """Map path -> names in the order they were read.

    Every key has at least one name.
    """
    result: dict[str, list[str]] = {}
    for point in points:
        result.setdefault(point.path, []).append(point.name)
    return result
