# 📁 render_module/utils/workspace.py
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import Optional

from ..config.settings import settings
from .logging import logger, RequestLogger


class RenderWorkspace:
    """
    Per-request scratch directory. Every asset a request downloads, captures or
    renders lives here, and the whole directory is removed on exit, whether the
    request succeeded or not.
    """

    def __init__(self, root: Optional[Path] = None, request_id: Optional[str] = None):
        self.root = Path(root or settings.WORK_DIR)
        self.request_id = request_id or uuid.uuid4().hex[:12]
        self.log = RequestLogger(logger, {"request_id": self.request_id})
        self.path: Optional[Path] = None

    def path_for(self, name: str) -> Path:
        if self.path is None:
            raise RuntimeError("Workspace has not been opened")
        return self.path / name

    def __enter__(self) -> "RenderWorkspace":
        self.root.mkdir(parents=True, exist_ok=True)
        self.path = Path(tempfile.mkdtemp(prefix="render-", dir=self.root))
        self.log.info(f"Temp dir: {self.path}")
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.path is not None and self.path.exists():
            self.log.info(f"Cleaning up temp dir: {self.path}")
            try:
                shutil.rmtree(self.path)
            except OSError as e:
                self.log.error(f"Error during cleanup of {self.path}: {e}")
        self.path = None
        return False
