# nodes/asset_fetcher_node.py

from typing import Dict, Any
from pathlib import Path
from urllib.parse import urlparse
import asyncio

from ..models.media import MediaAsset
from ..schemas.render_params import RenderParams
from ..utils.asset_fetcher import AssetFetcher
from ..utils.workspace import RenderWorkspace

def _suffix(url: str, default: str) -> str:
    suffix = Path(urlparse(url).path).suffix.lower()
    return suffix if 1 < len(suffix) <= 5 else default

async def _download_assets(params: RenderParams, workspace: RenderWorkspace) -> Dict[str, MediaAsset]:
    """
    (Internal Helper) Downloads the audio track and, if given, the logo
    concurrently into the request workspace.
    """
    async with AssetFetcher() as fetcher:
        jobs = {
            "audio": fetcher.fetch(
                params.audio_url, workspace.path_for("audio" + _suffix(params.audio_url, ".mp3")), "audio"
            )
        }
        if params.logo_url:
            jobs["logo"] = fetcher.fetch(
                params.logo_url, workspace.path_for("logo" + _suffix(params.logo_url, ".png")), "image"
            )
        # Let every download settle before the client closes, then surface the first failure
        results = await asyncio.gather(*jobs.values(), return_exceptions=True)

    for result in results:
        if isinstance(result, BaseException):
            raise result
    return dict(zip(jobs.keys(), results))

def asset_fetcher_logic(state: Dict[str, Any]) -> Dict[str, Any]:
    workspace: RenderWorkspace = state["workspace"]
    params: RenderParams = state["params"]
    workspace.log.info("--- Executing: AssetFetcher ---")

    assets = asyncio.run(_download_assets(params, workspace))
    workspace.log.info(f"--- Successfully downloaded {len(assets)} assets ---")
    return {"audio": assets["audio"], "logo": assets.get("logo")}
