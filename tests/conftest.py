from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    path = tmp_path / "bin"
    path.mkdir()
    return path


@pytest.fixture
def environ(bin_dir: Path) -> dict[str, str]:
    return {"PATH": str(bin_dir)}
