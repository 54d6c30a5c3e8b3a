# graph.py

from typing import TypedDict, Optional
from langgraph.graph import StateGraph, END

from .models.media import MediaAsset
from .schemas.render_params import RenderParams
from .utils.workspace import RenderWorkspace

from .nodes.asset_fetcher_node import asset_fetcher_logic
from .nodes.site_capture_node import site_capture_logic
from .nodes.composer_node import composer_logic

class AppState(TypedDict):
    params: RenderParams
    workspace: RenderWorkspace
    audio: Optional[MediaAsset]
    logo: Optional[MediaAsset]
    still_image: Optional[MediaAsset]
    video: Optional[MediaAsset]

def asset_fetcher(state: AppState) -> AppState:
    return asset_fetcher_logic(state)

def site_capture(state: AppState) -> AppState:
    return site_capture_logic(state)

def composer(state: AppState) -> AppState:
    return composer_logic(state)


# Define the graph
workflow = StateGraph(AppState)

workflow.add_node("AssetFetcher", asset_fetcher)
workflow.add_node("SiteCapture", site_capture)
workflow.add_node("Composer", composer)

# === Flow Definitions ===
# Strictly sequential: each step consumes what the previous one wrote to the workspace.
workflow.set_entry_point("AssetFetcher")
workflow.add_edge("AssetFetcher", "SiteCapture")
workflow.add_edge("SiteCapture", "Composer")
workflow.add_edge("Composer", END)

# Compile the graph
app = workflow.compile()


def render_site_video(params: RenderParams, workspace: RenderWorkspace) -> MediaAsset:
    """Runs the whole pipeline inside an already opened workspace."""
    final_state = app.invoke({"params": params, "workspace": workspace})
    return final_state["video"]
