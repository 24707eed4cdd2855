"""HTTP server: UI bundle, status endpoint and headless races."""

import logging
from pathlib import Path

import numpy as np
from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from pydantic import BaseModel, Field

from f1viz import __version__
from f1viz.config import Settings
from f1viz.models import RaceConfig
from f1viz.simulation import RaceController, RaceSnapshot

logger = logging.getLogger(__name__)

STATUS_MESSAGE = "F1 Visual Simulator server running!"
ENTRY_DOCUMENT = "index.html"


class RaceRequest(BaseModel):
    """Body of a headless race request."""

    config: RaceConfig = Field(default_factory=RaceConfig)
    seed: int | None = Field(default=None, ge=0, description="Seed for a reproducible race")


def resolve_asset(static_dir: Path, request_path: str) -> Path | None:
    """Map a URL path to a file inside ``static_dir``.

    Returns:
        The file path, or None if it does not exist or escapes the bundle
    """
    root = static_dir.resolve()
    candidate = (root / request_path.lstrip("/")).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Server settings (read from the environment if None)
    """
    settings = settings if settings is not None else Settings.from_env()
    static_dir = settings.static_dir

    app = FastAPI(title="F1 Visual Simulator", version=__version__)
    app.state.settings = settings

    @app.get("/api/status")
    def status() -> dict[str, str]:
        return {"status": "ok", "message": STATUS_MESSAGE}

    @app.post("/api/race", response_model=RaceSnapshot)
    def run_race(request: RaceRequest) -> RaceSnapshot:
        controller = RaceController(config=request.config, rng=np.random.default_rng(request.seed))
        snapshot = controller.run_to_finish()
        logger.info("Headless race done: %d laps, seed=%s", snapshot.lap, request.seed)
        return snapshot

    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    def static_files(full_path: str) -> FileResponse:
        asset = resolve_asset(static_dir, full_path)
        if asset is not None:
            return FileResponse(asset)

        entry = static_dir / ENTRY_DOCUMENT
        if not entry.is_file():
            logger.error("No %s in %s", ENTRY_DOCUMENT, static_dir)
            raise HTTPException(status_code=404, detail="UI bundle not found")
        return FileResponse(entry)

    logger.info("Serving UI bundle from %s", static_dir)
    return app
