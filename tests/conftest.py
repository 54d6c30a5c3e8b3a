from __future__ import annotations

from pathlib import Path

import pytest

from render_module.app.models.media import MediaAsset
from render_module.app.utils.workspace import RenderWorkspace


@pytest.fixture
def workspace(tmp_path: Path):
    with RenderWorkspace(root=tmp_path / "work", request_id="test") as ws:
        yield ws


@pytest.fixture
def make_asset(tmp_path: Path):
    """Writes a small placeholder file and wraps it as a MediaAsset."""

    def _make(name: str, kind: str, payload: bytes = b"\x00" * 16) -> MediaAsset:
        path = tmp_path / name
        path.write_bytes(payload)
        return MediaAsset(path=path, kind=kind)

    return _make
