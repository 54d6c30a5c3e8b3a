# models/media.py

from __future__ import annotations
from typing import Optional, Literal, Tuple
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field

MediaKind = Literal["image", "audio", "video"]

class MediaAsset(BaseModel):
    """A local file produced or consumed by one render request."""
    model_config = ConfigDict(frozen=True)

    path: Path
    kind: MediaKind

class RenderRequest(BaseModel):
    """Everything the composition engine needs to produce one video."""
    model_config = ConfigDict(frozen=True)

    still_image: MediaAsset
    audio: MediaAsset
    logo: Optional[MediaAsset] = None
    brand_text: Tuple[str, str] = ("", "")
    cta_text: Tuple[str, str] = ("", "")
    output_dims: Tuple[int, int] = Field(default=(1920, 1080))
