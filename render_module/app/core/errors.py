# 📁 render_module/core/errors.py
from typing import Optional


class RenderPipelineError(Exception):
    """Base class for any failure that aborts a render request."""

    stage: str = "pipeline"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict:
        return {
            "error": f"{self.stage} failed",
            "stage": self.stage,
            "details": self.details or self.message,
        }


class FetchError(RenderPipelineError):
    stage = "fetch"


class CaptureError(RenderPipelineError):
    stage = "capture"


class ProbeError(RenderPipelineError):
    stage = "probe"


class BuildError(RenderPipelineError):
    """Raised when the filter graph inputs violate a construction invariant.

    This indicates a defect in the caller, never a bad upload.
    """

    stage = "build"


class CompositionError(RenderPipelineError):
    stage = "composite"

    def __init__(self, message: str, details: Optional[str] = None, args: Optional[list] = None):
        super().__init__(message, details)
        self.ffmpeg_args = list(args or [])

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["args"] = self.ffmpeg_args
        return payload
