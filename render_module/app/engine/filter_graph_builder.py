# engine/filter_graph_builder.py
from pathlib import Path
from typing import List, Sequence, Tuple

from ..core.errors import BuildError
from ..models.media import MediaAsset
from ..models.timeline import Timeline, TimeWindow, OverlaySpec
from ..models.composition import (
    CompositionGraph, Stage, Branding, LogoBranding, NoBranding,
    STILL_INPUT, LOGO_INPUT, input_label
)
from ..utils.logging import logger


class _StageList:
    """
    Appends stages and hands out their output labels (v0, v1, ...).

    A stage can only name labels this list already returned or raw inputs,
    so a consumer can never be emitted before its producer.
    """

    def __init__(self):
        self._stages: List[Stage] = []

    def emit(self, inputs: Sequence[str], operation: str) -> str:
        label = f"v{len(self._stages)}"
        self._stages.append(Stage(inputs=tuple(inputs), operation=operation, output=label))
        return label

    @property
    def stages(self) -> Tuple[Stage, ...]:
        return tuple(self._stages)


def _seconds(value: float) -> str:
    return f"{value:.3f}"

def _escape_text(text: str) -> str:
    """
    Escapes a drawtext value that sits inside single quotes. The graph parser
    keeps quoted text as-is and the option parser then drops one backslash
    level, so only backslash and colon need escaping. '%' is left alone because
    drawtext runs with expansion=none.
    """
    return (
        text.replace("\\", "\\\\")
        .replace("'", "’")
        .replace(":", "\\:")
    )

def _escape_path(path: Path) -> str:
    return str(path).replace("\\", "/").replace(":", "\\:")

def _enable(window: TimeWindow, timeline: Timeline) -> str:
    end = min(window.end, timeline.total_sec)
    return f"enable='gte(t,{_seconds(window.start)})*lt(t,{_seconds(end)})'"

def _overlay_operation(overlay: OverlaySpec, timeline: Timeline) -> str:
    if overlay.type == "text":
        if not overlay.text:
            raise BuildError(f"Text overlay '{overlay.name}' has no text")
        parts = [f"drawtext=text='{_escape_text(overlay.text)}'", "expansion=none"]
        if overlay.font_file:
            parts.append(f"fontfile='{_escape_path(overlay.font_file)}'")
        parts += [
            f"fontsize={overlay.font_size}",
            f"fontcolor={overlay.font_color}",
            f"x={overlay.x}",
            f"y={overlay.y}",
        ]
    else:
        parts = [
            f"drawbox=x={overlay.x}",
            f"y={overlay.y}",
            "w=iw",
            "h=ih",
            f"color={overlay.box_color}",
            "t=fill",
        ]
    parts.append(_enable(overlay.window, timeline))
    return ":".join(parts)

def _emit_branding(stages: _StageList, base: str, branding: Branding) -> str:
    """
    Both variants end on a single branded label, so the overlay stages that
    follow never need to know whether a logo was drawn.
    """
    if isinstance(branding, LogoBranding):
        blur = branding.shadow_blur
        logo = stages.emit(
            [input_label(LOGO_INPUT)],
            f"scale={branding.width}:-1,format=rgba"
        )
        # Padded so the blur can spread past the logo's own edges
        shadow = stages.emit(
            [logo],
            f"colorchannelmixer=rr=0:gg=0:bb=0:aa={branding.shadow_opacity},"
            f"pad=iw+{2 * blur}:ih+{2 * blur}:{blur}:{blur}:color=black@0,"
            f"boxblur={blur}:1"
        )
        shadow_x = branding.x + branding.shadow_offset - blur
        shadow_y = branding.y + branding.shadow_offset - blur
        shadowed = stages.emit(
            [base, shadow],
            f"overlay=x={shadow_x}:y={shadow_y}:format=auto"
        )
        return stages.emit(
            [shadowed, logo],
            f"overlay=x={branding.x}:y={branding.y}:format=auto"
        )
    if isinstance(branding, NoBranding):
        return stages.emit([base], "null")
    raise BuildError(f"Unknown branding variant: {type(branding).__name__}")

def build_filter_graph(
    still: MediaAsset,
    branding: Branding,
    timeline: Timeline,
    overlays: Sequence[OverlaySpec],
    dims: Tuple[int, int]
) -> CompositionGraph:
    """
    Builds the video half of the composition as an ordered stage list:
    normalise the still, apply branding, then draw each overlay in order.
    """
    width, height = dims
    if width <= 0 or height <= 0:
        raise BuildError(f"Output dimensions must be positive, got {width}x{height}")

    stages = _StageList()
    base = stages.emit(
        [input_label(STILL_INPUT)],
        f"scale={width}:{height}:force_original_aspect_ratio=increase,"
        f"crop={width}:{height},setsar=1,format=rgba"
    )
    current = _emit_branding(stages, base, branding)

    in_end_card = False
    for overlay in overlays:
        if overlay.segment == "end_card":
            in_end_card = True
        elif in_end_card:
            raise BuildError(
                f"Intro overlay '{overlay.name}' follows an end-card overlay; "
                "the end-card dim layer would not cover it"
            )
        current = stages.emit([current], _overlay_operation(overlay, timeline))

    logo = branding.logo if isinstance(branding, LogoBranding) else None
    graph = CompositionGraph(
        still=still,
        logo=logo,
        stages=stages.stages,
        video_output=current,
    )
    logger.debug(f"Built filter graph with {len(graph.stages)} stages, output [{current}]")
    return graph
