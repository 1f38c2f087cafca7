"""Entry point: python -m warpdir"""

from __future__ import annotations

from warpdir.cli import run

if __name__ == "__main__":
    run()
