# engine/overlay_planner.py
from typing import List, Tuple

from ..models.timeline import Timeline, TimeWindow, OverlaySpec, OverlayStyle, SegmentType
from ..config.settings import settings

# Font sizes in OverlayStyle are tuned for 1080 lines of output
REFERENCE_HEIGHT = 1080

def default_overlay_style() -> OverlayStyle:
    return OverlayStyle(
        title_font_size=settings.TITLE_FONT_SIZE,
        subtitle_font_size=settings.SUBTITLE_FONT_SIZE,
        font_color=settings.FONT_COLOR,
        font_file=settings.FONT_FILE,
        dim_opacity=settings.END_CARD_DIM_OPACITY,
    )

def _text_block(
    prefix: str,
    segment: SegmentType,
    window: TimeWindow,
    lines: Tuple[str, str],
    style: OverlayStyle,
    scale: float
) -> List[OverlaySpec]:
    """Two centered lines: a title and a smaller subtitle below it."""
    title, subtitle = (line.strip() for line in lines)
    half_gap = round(style.line_gap * scale) // 2
    both = bool(title and subtitle)

    specs: List[OverlaySpec] = []
    if title:
        specs.append(OverlaySpec(
            name=f"{prefix}_line1",
            type="text",
            segment=segment,
            window=window,
            text=title,
            y=f"h/2-text_h-{half_gap}" if both else "(h-text_h)/2",
            font_size=round(style.title_font_size * scale),
            font_color=style.font_color,
            font_file=style.font_file,
        ))
    if subtitle:
        specs.append(OverlaySpec(
            name=f"{prefix}_line2",
            type="text",
            segment=segment,
            window=window,
            text=subtitle,
            y=f"h/2+{half_gap}" if both else "(h-text_h)/2",
            font_size=round(style.subtitle_font_size * scale),
            font_color=style.font_color,
            font_file=style.font_file,
        ))
    return specs

def build_overlays(
    timeline: Timeline,
    brand_text: Tuple[str, str],
    cta_text: Tuple[str, str],
    dims: Tuple[int, int],
    style: OverlayStyle
) -> List[OverlaySpec]:
    """
    Intro brand lines, then the end-card dim layer, then the call to action.
    The dim box must come after the intro text so it darkens anything still
    drawn underneath it.
    """
    scale = dims[1] / REFERENCE_HEIGHT
    overlays: List[OverlaySpec] = []

    if timeline.intro_sec > 0:
        overlays += _text_block("intro", "intro", timeline.intro_window, brand_text, style, scale)

    if timeline.end_card_sec > 0:
        end_window = timeline.end_card_window
        overlays.append(OverlaySpec(
            name="end_card_dim",
            type="box",
            segment="end_card",
            window=end_window,
            x="0",
            y="0",
            box_color=f"black@{style.dim_opacity}",
        ))
        overlays += _text_block("cta", "end_card", end_window, cta_text, style, scale)

    return overlays
