from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from a7p_server.config import AppConfig, load_config
from a7p_server.features.files.api import router as files_router


def create_app(cfg: AppConfig | None = None) -> FastAPI:
    """Build the app. For uvicorn: `uvicorn --factory a7p_server.main:create_app`."""
    cfg = cfg or load_config()
    cfg.files_dir.mkdir(parents=True, exist_ok=True)

    app = FastAPI(title="a7p profile server", version="0.1.0")
    app.state.cfg = cfg
    app.include_router(files_router)
    if cfg.static_dir is not None:
        # Mounted last so the API routes take precedence over "/".
        app.mount("/", StaticFiles(directory=cfg.static_dir, html=True), name="static")
    return app

