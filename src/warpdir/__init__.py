"""Warp to bookmarked directories."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("warpdir")
except PackageNotFoundError:
    # Running from an uninstalled checkout
    __version__ = "0.0.0+dev"
