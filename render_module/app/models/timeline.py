# models/timeline.py

from __future__ import annotations
from typing import Optional, Literal
from pathlib import Path
from pydantic import BaseModel, ConfigDict

SegmentType = Literal["intro", "end_card"]

class TimeWindow(BaseModel):
    """Half-open visibility window [start, end) in output seconds."""
    model_config = ConfigDict(frozen=True)

    start: float
    end: float

class Timeline(BaseModel):
    """Segment boundaries of one output video."""
    model_config = ConfigDict(frozen=True)

    intro_sec: float
    hero_sec: float
    end_card_sec: float
    total_sec: float
    end_card_start_sec: float

    @property
    def intro_window(self) -> TimeWindow:
        return TimeWindow(start=0.0, end=self.intro_sec)

    @property
    def end_card_window(self) -> TimeWindow:
        return TimeWindow(start=self.end_card_start_sec, end=self.total_sec)

class OverlaySpec(BaseModel):
    """A text line or filled box drawn over the base image during one segment."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: Literal["text", "box"]
    segment: SegmentType
    window: TimeWindow
    text: Optional[str] = None # For text
    x: str = "(w-text_w)/2"
    y: str = "(h-text_h)/2"
    font_size: int = 48
    font_color: str = "white"
    font_file: Optional[Path] = None
    box_color: str = "black@0.6" # For boxes

class OverlayStyle(BaseModel):
    """Presentation parameters for the intro and end-card overlays."""
    model_config = ConfigDict(frozen=True)

    title_font_size: int = 72
    subtitle_font_size: int = 44
    font_color: str = "white"
    font_file: Optional[Path] = None
    dim_opacity: float = 0.6
    line_gap: int = 24
