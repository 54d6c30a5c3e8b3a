# engine/timeline_planner.py
from ..models.timeline import Timeline

def _ms(value: float) -> float:
    return round(value, 3)

def plan_timeline(
    audio_sec: float,
    intro_sec: float,
    end_card_sec: float,
    minimum_total: float
) -> Timeline:
    """
    Lays out intro, hero and end-card segments around the audio.

    The hero segment is as long as the audio. The total is never shorter than
    `minimum_total`, and the end card start is clamped at zero when that floor
    is smaller than intro plus end card.
    """
    for name, value in (("audio_sec", audio_sec), ("intro_sec", intro_sec),
                        ("end_card_sec", end_card_sec), ("minimum_total", minimum_total)):
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}")

    total = _ms(max(minimum_total, intro_sec + audio_sec + end_card_sec))
    return Timeline(
        intro_sec=_ms(intro_sec),
        hero_sec=_ms(audio_sec),
        end_card_sec=_ms(end_card_sec),
        total_sec=total,
        end_card_start_sec=_ms(max(0.0, total - end_card_sec)),
    )
