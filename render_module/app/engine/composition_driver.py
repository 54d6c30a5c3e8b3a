# engine/composition_driver.py
"""
Runs the single ffmpeg invocation that turns a CompositionGraph into an MP4.

- The still is looped for the full timeline length.
- Audio is delayed by the intro length and padded with silence up to the total,
  then -t/-shortest trims the output to exactly the planned duration.
"""
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple

from ..config.settings import settings
from ..core.errors import CompositionError
from ..models.media import MediaAsset
from ..models.timeline import Timeline
from ..models.composition import CompositionGraph, AUDIO_INPUT, input_label
from ..utils.logging import logger

AUDIO_OUTPUT_LABEL = "aout"

def _audio_chain(timeline: Timeline, intro_sec: float) -> str:
    delay_ms = int(round(intro_sec * 1000))
    return (
        f"[{input_label(AUDIO_INPUT, 'a')}]"
        f"adelay=delays={delay_ms}:all=1,"
        f"apad=whole_dur={timeline.total_sec:.3f}"
        f"[{AUDIO_OUTPUT_LABEL}]"
    )

def build_ffmpeg_args(
    graph: CompositionGraph,
    audio: MediaAsset,
    timeline: Timeline,
    intro_sec: float,
    output_path: Path,
    fps: int = settings.VIDEO_FPS,
    ffmpeg_bin: str = settings.FFMPEG_BIN
) -> List[str]:
    total = f"{timeline.total_sec:.3f}"
    # Input order must match STILL_INPUT, AUDIO_INPUT, LOGO_INPUT
    args = [
        ffmpeg_bin, "-hide_banner", "-loglevel", "error", "-y",
        "-loop", "1", "-framerate", str(fps), "-t", total, "-i", str(graph.still.path),
        "-i", str(audio.path),
    ]
    if graph.logo is not None:
        args += ["-i", str(graph.logo.path)]

    filter_complex = ";".join([graph.to_filter_complex(), _audio_chain(timeline, intro_sec)])
    args += [
        "-filter_complex", filter_complex,
        "-map", f"[{graph.video_output}]",
        "-map", f"[{AUDIO_OUTPUT_LABEL}]",
        "-c:v", "libx264",
        "-r", str(fps),
        "-pix_fmt", "yuv420p",
        "-c:a", "aac",
        "-t", total,
        "-shortest",
        "-movflags", "+faststart",
        str(output_path),
    ]
    return args

def _run_ffmpeg(args: List[str], timeout: Optional[float]) -> Tuple[int, str]:
    """Blocks on ffmpeg. The child is killed if we stop waiting for any reason."""
    try:
        proc = subprocess.Popen(
            args,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise CompositionError("ffmpeg could not be started", details=str(e), args=args) from e

    try:
        _, stderr = proc.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        proc.kill()
        _, stderr = proc.communicate()
        raise CompositionError(f"ffmpeg timed out after {timeout}s", details=stderr, args=args)
    except BaseException:
        proc.kill()
        proc.wait()
        raise
    return proc.returncode, stderr

def render_composition(
    graph: CompositionGraph,
    audio: MediaAsset,
    timeline: Timeline,
    intro_sec: float,
    output_path: Path,
    fps: int = settings.VIDEO_FPS,
    ffmpeg_bin: str = settings.FFMPEG_BIN,
    timeout: Optional[float] = None,
    log=logger
) -> MediaAsset:
    args = build_ffmpeg_args(graph, audio, timeline, intro_sec, output_path, fps, ffmpeg_bin)
    log.info(f"Running ffmpeg with args: {' '.join(args)}")

    try:
        returncode, stderr = _run_ffmpeg(args, timeout)
        if returncode != 0:
            log.error(f"ffmpeg exited with code {returncode}")
            raise CompositionError(f"ffmpeg exited with code {returncode}", details=stderr, args=args)
        if not output_path.is_file() or output_path.stat().st_size == 0:
            raise CompositionError("ffmpeg produced no output", details=stderr, args=args)
    except BaseException:
        output_path.unlink(missing_ok=True)
        raise

    if stderr:
        log.debug(f"ffmpeg stderr: {stderr}")
    log.info(f"Rendered {timeline.total_sec}s video to {output_path}")
    return MediaAsset(path=output_path, kind="video")
