# engine/composer.py
from ..config.settings import settings
from ..models.media import MediaAsset, RenderRequest
from ..models.composition import Branding, LogoBranding, NoBranding
from ..utils.workspace import RenderWorkspace
from .duration_probe import probe_duration
from .timeline_planner import plan_timeline
from .overlay_planner import build_overlays, default_overlay_style
from .filter_graph_builder import build_filter_graph
from .composition_driver import render_composition

def _branding_for(request: RenderRequest) -> Branding:
    if request.logo is None:
        return NoBranding()
    return LogoBranding(
        logo=request.logo,
        width=settings.LOGO_WIDTH,
        x=settings.LOGO_X,
        y=settings.LOGO_Y,
        shadow_offset=settings.LOGO_SHADOW_OFFSET,
        shadow_opacity=settings.LOGO_SHADOW_OPACITY,
        shadow_blur=settings.LOGO_SHADOW_BLUR,
    )

def compose_video(request: RenderRequest, workspace: RenderWorkspace) -> MediaAsset:
    """
    Probe, plan, build and composite, strictly in that order. Any stage error
    propagates untouched; the caller's workspace discards whatever was written.
    """
    log = workspace.log
    intro_sec = settings.INTRO_SEC

    audio_sec = probe_duration(request.audio)
    timeline = plan_timeline(audio_sec, intro_sec, settings.END_CARD_SEC, settings.MIN_TOTAL_SEC)
    log.info(
        f"Timeline: intro={timeline.intro_sec}s hero={timeline.hero_sec}s "
        f"end_card@{timeline.end_card_start_sec}s total={timeline.total_sec}s"
    )

    overlays = build_overlays(
        timeline, request.brand_text, request.cta_text, request.output_dims, default_overlay_style()
    )
    graph = build_filter_graph(
        request.still_image, _branding_for(request), timeline, overlays, request.output_dims
    )

    return render_composition(
        graph,
        request.audio,
        timeline,
        intro_sec,
        workspace.path_for("out.mp4"),
        fps=settings.VIDEO_FPS,
        ffmpeg_bin=settings.FFMPEG_BIN,
        timeout=settings.RENDER_TIMEOUT_SEC,
        log=log,
    )
