from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from warpdir.infrastructure.config import ENV_LOG_LEVEL, ENV_RC_PATH
from warpdir.infrastructure.logger import setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _fresh_logging() -> Iterator[None]:
    """Rebind structlog to the current stderr; capsys swaps it per test."""
    setup_logging()
    yield
    setup_logging()


@pytest.fixture
def rc_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point WD_CONFIG at a (not yet created) rc file in a temp dir."""
    rc = tmp_path / "warprc"
    monkeypatch.setenv(ENV_RC_PATH, str(rc))
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    return rc
