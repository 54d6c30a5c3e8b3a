from __future__ import annotations

import pytest

from render_module.app.engine.overlay_planner import build_overlays
from render_module.app.engine.timeline_planner import plan_timeline
from render_module.app.models.timeline import OverlayStyle


@pytest.fixture
def timeline():
    return plan_timeline(28.4, 1.5, 4.0, 5.0)


def test_emits_intro_then_dim_then_call_to_action(timeline):
    overlays = build_overlays(timeline, ("Acme", "Since 1999"), ("Visit", "acme.test"), (1920, 1080), OverlayStyle())

    assert [o.name for o in overlays] == [
        "intro_line1", "intro_line2", "end_card_dim", "cta_line1", "cta_line2"
    ]
    assert [o.segment for o in overlays] == ["intro", "intro", "end_card", "end_card", "end_card"]


def test_windows_follow_the_timeline(timeline):
    overlays = build_overlays(timeline, ("Acme", ""), ("Visit", ""), (1920, 1080), OverlayStyle())
    by_name = {o.name: o for o in overlays}

    assert by_name["intro_line1"].window == timeline.intro_window
    assert by_name["end_card_dim"].window == timeline.end_card_window
    assert by_name["cta_line1"].window.start == pytest.approx(29.9)
    assert by_name["cta_line1"].window.end == pytest.approx(33.9)


def test_blank_lines_are_skipped_and_single_line_is_centered(timeline):
    overlays = build_overlays(timeline, ("Acme", "  "), ("", ""), (1920, 1080), OverlayStyle())

    assert [o.name for o in overlays] == ["intro_line1", "end_card_dim"]
    assert overlays[0].y == "(h-text_h)/2"


def test_dim_layer_uses_configured_opacity(timeline):
    overlays = build_overlays(timeline, ("", ""), ("", ""), (1920, 1080), OverlayStyle(dim_opacity=0.35))

    assert len(overlays) == 1
    assert overlays[0].type == "box"
    assert overlays[0].box_color == "black@0.35"


def test_font_sizes_scale_with_output_height(timeline):
    style = OverlayStyle(title_font_size=72, subtitle_font_size=44)
    overlays = build_overlays(timeline, ("Acme", "Since 1999"), ("", ""), (1280, 720), style)

    assert overlays[0].font_size == 48
    assert overlays[1].font_size == 29


def test_zero_length_segments_get_no_overlays():
    timeline = plan_timeline(10.0, 0.0, 0.0, 5.0)
    assert build_overlays(timeline, ("Acme", "x"), ("Visit", "y"), (1920, 1080), OverlayStyle()) == []
