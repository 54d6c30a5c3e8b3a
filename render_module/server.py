import threading

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from .app.config.settings import settings
from .app.core.errors import RenderPipelineError
from .app.graph import render_site_video
from .app.schemas.render_params import RenderParams
from .app.utils.logging import logger
from .app.utils.workspace import RenderWorkspace


app = FastAPI(title="Website Reel Renderer API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Each render is a CPU-bound ffmpeg process; don't run more than the box has cores for.
render_slots = threading.BoundedSemaphore(settings.MAX_CONCURRENT_RENDERS)


@app.get("/health")
def health():
    return {"status": "ok"}


def _missing_fields_response(missing: list) -> JSONResponse:
    logger.warning(f"Missing required fields: {missing}")
    return JSONResponse(
        status_code=400,
        content={"error": "website_url and audio_url are required", "missing": missing},
    )


@app.exception_handler(RequestValidationError)
async def bad_request_body(request: Request, exc: RequestValidationError):
    # A body the model rejects is still a client error in the /render payload shape.
    missing = RenderParams.missing_from(exc.body)
    if missing:
        return _missing_fields_response(missing)
    logger.warning(f"Invalid request body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "invalid request body", "details": jsonable_encoder(exc.errors())},
    )


@app.post("/render")
def render(req: RenderParams):
    missing = req.missing_fields()
    if missing:
        return _missing_fields_response(missing)

    with render_slots:
        with RenderWorkspace() as workspace:
            workspace.log.info(f"Incoming /render website_url={req.website_url} audio_url={req.audio_url}")
            try:
                video = render_site_video(req, workspace)
                mp4 = video.path.read_bytes()
            except RenderPipelineError as e:
                workspace.log.error(f"{e.stage} failed: {e.message}")
                return JSONResponse(status_code=500, content=e.to_payload())
            except Exception as e:
                workspace.log.exception(f"Unexpected error in /render: {e}")
                return JSONResponse(
                    status_code=500,
                    content={"error": "internal error", "details": str(e)},
                )

    logger.info(f"Video sent to client ({len(mp4)} bytes)")
    return Response(
        content=mp4,
        media_type="video/mp4",
        headers={"Content-Disposition": "inline; filename=website_reel.mp4"}
    )
