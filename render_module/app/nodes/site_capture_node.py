# nodes/site_capture_node.py

from typing import Dict, Any

from ..config.settings import settings
from ..models.media import MediaAsset
from ..providers.loader import providers
from ..schemas.render_params import RenderParams
from ..utils.workspace import RenderWorkspace

def site_capture_logic(state: Dict[str, Any]) -> Dict[str, MediaAsset]:
    """Captures the first viewport of the requested page at output resolution."""
    workspace: RenderWorkspace = state["workspace"]
    params: RenderParams = state["params"]
    workspace.log.info(f"--- Executing: SiteCapture ({params.website_url}) ---")

    still = providers.capture.capture(
        params.website_url,
        (settings.VIDEO_WIDTH, settings.VIDEO_HEIGHT),
        workspace.path_for("screenshot.png"),
    )
    return {"still_image": still}
