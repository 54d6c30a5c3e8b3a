"""
HTTP boundary tests. Fetch, capture and compositing are replaced with fakes
that write into the request workspace, so cleanup can be checked for real.
"""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from render_module.app.config.settings import settings
from render_module.app.core.errors import CaptureError, CompositionError
from render_module.app.models.media import MediaAsset
from render_module.server import app

GRAPH = "render_module.app.graph"
CAPTURE_PROVIDERS = "render_module.app.nodes.site_capture_node.providers"
COMPOSE = "render_module.app.nodes.composer_node.compose_video"

BODY = {"website_url": "example.test", "audio_url": "https://cdn.test/a.mp3"}


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    root = tmp_path / "work"
    monkeypatch.setattr(settings, "WORK_DIR", root)
    return root


def _fake_fetch(state):
    path = state["workspace"].path_for("audio.mp3")
    path.write_bytes(b"ID3")
    return {"audio": MediaAsset(path=path, kind="audio"), "logo": None}


def _capture_ok():
    providers = MagicMock()

    def capture(url, viewport, dest):
        dest.write_bytes(b"\x89PNG")
        return MediaAsset(path=dest, kind="image")

    providers.capture.capture.side_effect = capture
    return providers


def _compose_ok(request, workspace):
    out = workspace.path_for("out.mp4")
    out.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return MediaAsset(path=out, kind="video")


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


@pytest.mark.parametrize(
    "body,missing",
    [
        ({"website_url": "example.test"}, ["audio_url"]),
        ({"audio_url": "https://cdn.test/a.mp3"}, ["website_url"]),
        ({"website_url": "   ", "audio_url": ""}, ["website_url", "audio_url"]),
        ({}, ["website_url", "audio_url"]),
    ],
)
def test_missing_required_fields_is_a_400(client, work_dir, body, missing):
    resp = client.post("/render", json=body)

    assert resp.status_code == 400
    assert resp.json()["missing"] == missing
    assert not work_dir.exists() or list(work_dir.iterdir()) == []


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"content": b"{not json", "headers": {"content-type": "application/json"}},
        {"json": ["example.test", "https://cdn.test/a.mp3"]},
    ],
)
def test_absent_or_unparseable_body_is_a_400(client, work_dir, kwargs):
    resp = client.post("/render", **kwargs)

    assert resp.status_code == 400
    assert resp.json()["missing"] == ["website_url", "audio_url"]
    assert not work_dir.exists() or list(work_dir.iterdir()) == []


def test_wrongly_typed_required_field_counts_as_missing(client, work_dir):
    resp = client.post("/render", json={"website_url": 42, "audio_url": "https://cdn.test/a.mp3"})

    assert resp.status_code == 400
    assert resp.json()["missing"] == ["website_url"]


def test_wrongly_typed_optional_field_is_a_400(client, work_dir):
    resp = client.post("/render", json={**BODY, "brand_line1": ["Acme"]})

    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid request body"


def test_successful_render_returns_mp4_and_cleans_up(client, work_dir):
    with patch(f"{GRAPH}.asset_fetcher_logic", side_effect=_fake_fetch), \
            patch(CAPTURE_PROVIDERS, _capture_ok()), \
            patch(COMPOSE, side_effect=_compose_ok) as compose:
        resp = client.post("/render", json={**BODY, "brand_line1": "Acme"})

    assert resp.status_code == 200
    assert resp.headers["content-type"] == "video/mp4"
    assert resp.content == b"\x00\x00\x00\x18ftypmp42"
    request = compose.call_args.args[0]
    assert request.brand_text[0] == "Acme"
    assert request.cta_text[0] == settings.CTA_LINE1
    assert request.logo is None
    assert list(work_dir.iterdir()) == []


def test_capture_error_returns_500_and_leaves_nothing_behind(client, work_dir):
    providers = MagicMock()
    providers.capture.capture.side_effect = CaptureError("Timed out loading https://example.test", details="30000ms exceeded")

    with patch(f"{GRAPH}.asset_fetcher_logic", side_effect=_fake_fetch), \
            patch(CAPTURE_PROVIDERS, providers), \
            patch(COMPOSE) as compose:
        resp = client.post("/render", json=BODY)

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {
        "error": "capture failed",
        "stage": "capture",
        "details": "30000ms exceeded",
    }
    compose.assert_not_called()
    assert list(work_dir.iterdir()) == []


def test_composition_error_carries_ffmpeg_diagnostics(client, work_dir):
    error = CompositionError("ffmpeg exited with code 1", details="No such filter: 'drawtext'", args=["ffmpeg", "-y"])

    with patch(f"{GRAPH}.asset_fetcher_logic", side_effect=_fake_fetch), \
            patch(CAPTURE_PROVIDERS, _capture_ok()), \
            patch(COMPOSE, side_effect=error):
        resp = client.post("/render", json=BODY)

    assert resp.status_code == 500
    payload = resp.json()
    assert payload["stage"] == "composite"
    assert payload["details"] == "No such filter: 'drawtext'"
    assert payload["args"] == ["ffmpeg", "-y"]
    assert list(work_dir.iterdir()) == []


def test_unexpected_error_is_an_internal_error(client, work_dir):
    with patch(f"{GRAPH}.asset_fetcher_logic", side_effect=ValueError("boom")):
        resp = client.post("/render", json=BODY)

    assert resp.status_code == 500
    assert resp.json() == {"error": "internal error", "details": "boom"}
    assert list(work_dir.iterdir()) == []
