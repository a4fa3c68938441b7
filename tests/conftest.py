from __future__ import annotations

import sys
from pathlib import Path

import pytest

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="fake tools are /bin/sh scripts")


@pytest.fixture
def make_tool(tmp_path: Path):
    """Write an executable /bin/sh script and return its path."""
    def _make(name: str, body: str = "exit 0", directory: Path | None = None) -> Path:
        d = directory or (tmp_path / "bin")
        d.mkdir(parents=True, exist_ok=True)
        p = d / name
        p.write_text("#!/bin/sh\n" + body + "\n")
        p.chmod(0o755)
        return p
    return _make
