# 📁 render_module/providers/capture/base.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple

from ...models.media import MediaAsset

class BaseCaptureProvider(ABC):
    """Abstract base class for web page capture providers."""

    @abstractmethod
    def capture(self, url: str, viewport: Tuple[int, int], dest: Path) -> MediaAsset:
        """Saves a single still image of `url` to `dest`."""
        pass
