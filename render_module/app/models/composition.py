# models/composition.py

from __future__ import annotations
from typing import List, Optional, Tuple, Union, Literal
from collections import Counter
from pydantic import BaseModel, ConfigDict

from .media import MediaAsset

# Raw input indices, in the order the driver passes them to ffmpeg
STILL_INPUT = 0
AUDIO_INPUT = 1
LOGO_INPUT = 2

def input_label(index: int, stream: str = "v") -> str:
    return f"{index}:{stream}"

def is_input_label(label: str) -> bool:
    return ":" in label

class Stage(BaseModel):
    """One filter step: consumes labels, produces exactly one new label."""
    model_config = ConfigDict(frozen=True)

    inputs: Tuple[str, ...]
    operation: str
    output: str

class CompositionGraph(BaseModel):
    """Ordered stage list. Build order is execution order."""
    model_config = ConfigDict(frozen=True)

    still: MediaAsset
    logo: Optional[MediaAsset] = None
    stages: Tuple[Stage, ...]
    video_output: str

    def to_filter_complex(self) -> str:
        """
        Renders the stages as an ffmpeg -filter_complex string.

        ffmpeg lets a filter output pad feed exactly one consumer, so a label
        used by several stages gets a split on its producer and one numbered
        pad per consumer.
        """
        fanout = Counter(
            label for stage in self.stages for label in stage.inputs
            if not is_input_label(label)
        )
        taken: Counter = Counter()
        chains: List[str] = []
        for stage in self.stages:
            pads = []
            for label in stage.inputs:
                if fanout[label] > 1:
                    pads.append(f"[{label}_{taken[label]}]")
                    taken[label] += 1
                else:
                    pads.append(f"[{label}]")
            operation = stage.operation
            n = fanout[stage.output]
            if n > 1:
                operation += f",split={n}"
                outs = "".join(f"[{stage.output}_{i}]" for i in range(n))
            else:
                outs = f"[{stage.output}]"
            chains.append("".join(pads) + operation + outs)
        return ";".join(chains)

class LogoBranding(BaseModel):
    """Brand mark present: logo plus a soft drop shadow in the top-left corner."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["logo"] = "logo"
    logo: MediaAsset
    width: int = 220
    x: int = 48
    y: int = 40
    shadow_offset: int = 6
    shadow_opacity: float = 0.45
    shadow_blur: int = 8

class NoBranding(BaseModel):
    """No brand mark supplied."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"

Branding = Union[LogoBranding, NoBranding]
