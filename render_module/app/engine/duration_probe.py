# engine/duration_probe.py
import math

import mutagen
from mutagen import MutagenError

from ..core.errors import ProbeError
from ..models.media import MediaAsset
from ..utils.logging import logger

MIN_DURATION_SEC = 1.0

def probe_duration(audio: MediaAsset) -> float:
    """
    Returns the playing time of an audio asset in seconds, never less than one
    second. Some encoders leave the length header empty and report 0, so short
    or zero lengths are floored rather than rejected.
    """
    path = audio.path
    logger.info(f"Probing audio duration: {path}")
    if not path.is_file():
        raise ProbeError(f"Audio file not found: {path}")

    try:
        media = mutagen.File(str(path))
    except (MutagenError, OSError) as e:
        raise ProbeError(f"Could not read audio metadata from {path.name}", details=str(e)) from e

    info = getattr(media, "info", None)
    if info is None:
        raise ProbeError(f"Unsupported audio format: {path.name}")

    length = getattr(info, "length", None)
    try:
        seconds = float(length)
    except (TypeError, ValueError) as e:
        raise ProbeError(f"Non-numeric duration reported for {path.name}", details=repr(length)) from e

    if not math.isfinite(seconds) or seconds < 0:
        raise ProbeError(f"Invalid duration reported for {path.name}", details=repr(length))

    if seconds < MIN_DURATION_SEC:
        logger.warning(f"Audio reports {seconds:.3f}s, flooring to {MIN_DURATION_SEC}s")
        seconds = MIN_DURATION_SEC

    logger.info(f"Audio duration (seconds): {seconds}")
    return seconds
