from __future__ import annotations

import wave
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from mutagen import MutagenError

from render_module.app.core.errors import ProbeError
from render_module.app.engine.duration_probe import probe_duration
from render_module.app.models.media import MediaAsset

MUTAGEN_FILE = "render_module.app.engine.duration_probe.mutagen.File"


def _reports(length):
    return SimpleNamespace(info=SimpleNamespace(length=length))


@pytest.fixture
def audio(make_asset):
    return make_asset("audio.mp3", "audio")


def test_returns_reported_length(audio):
    with patch(MUTAGEN_FILE, return_value=_reports(28.4)):
        assert probe_duration(audio) == pytest.approx(28.4)


@pytest.mark.parametrize("length", [0.2, 0.0, 0.999])
def test_short_or_missing_length_is_floored_to_one_second(audio, length):
    with patch(MUTAGEN_FILE, return_value=_reports(length)):
        assert probe_duration(audio) == 1.0


def test_unsupported_format(audio):
    with patch(MUTAGEN_FILE, return_value=None):
        with pytest.raises(ProbeError, match="Unsupported"):
            probe_duration(audio)


@pytest.mark.parametrize("length", [None, "abc", float("nan"), float("inf"), -3.0])
def test_degenerate_length_is_rejected(audio, length):
    with patch(MUTAGEN_FILE, return_value=_reports(length)):
        with pytest.raises(ProbeError):
            probe_duration(audio)


def test_unreadable_file(audio):
    with patch(MUTAGEN_FILE, side_effect=MutagenError("bad header")):
        with pytest.raises(ProbeError) as exc_info:
            probe_duration(audio)
    assert "bad header" in exc_info.value.details
    assert exc_info.value.stage == "probe"


def test_missing_file(tmp_path):
    with pytest.raises(ProbeError, match="not found"):
        probe_duration(MediaAsset(path=tmp_path / "nope.mp3", kind="audio"))


# ─────────────────────────────────────────────────────────────────────
# Real files
# ─────────────────────────────────────────────────────────────────────

def _write_silent_wav(path, seconds: float, rate: int = 8000):
    with wave.open(str(path), "wb") as wav:
        wav.setnchannels(1)
        wav.setsampwidth(2)
        wav.setframerate(rate)
        wav.writeframes(b"\x00\x00" * int(round(seconds * rate)))
    return MediaAsset(path=path, kind="audio")


@pytest.mark.parametrize("seconds,expected", [(28.4, 28.4), (0.2, 1.0)])
def test_wav_header_length(tmp_path, seconds, expected):
    audio = _write_silent_wav(tmp_path / "voice.wav", seconds)

    assert probe_duration(audio) == pytest.approx(expected, abs=1e-3)
