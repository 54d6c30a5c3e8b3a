# nodes/composer_node.py

from typing import Dict, Any, Optional

from ..config.settings import settings
from ..engine.composer import compose_video
from ..models.media import MediaAsset, RenderRequest
from ..schemas.render_params import RenderParams
from ..utils.workspace import RenderWorkspace

def _or_default(value: Optional[str], default: str) -> str:
    return default if value is None else value

def build_render_request(state: Dict[str, Any]) -> RenderRequest:
    params: RenderParams = state["params"]
    return RenderRequest(
        still_image=state["still_image"],
        audio=state["audio"],
        logo=state.get("logo"),
        brand_text=(
            _or_default(params.brand_line1, settings.BRAND_LINE1),
            _or_default(params.brand_line2, settings.BRAND_LINE2),
        ),
        cta_text=(
            _or_default(params.cta_line1, settings.CTA_LINE1),
            _or_default(params.cta_line2, settings.CTA_LINE2),
        ),
        output_dims=(settings.VIDEO_WIDTH, settings.VIDEO_HEIGHT),
    )

def composer_logic(state: Dict[str, Any]) -> Dict[str, MediaAsset]:
    workspace: RenderWorkspace = state["workspace"]
    workspace.log.info("--- Executing: Composer ---")
    video = compose_video(build_render_request(state), workspace)
    return {"video": video}
