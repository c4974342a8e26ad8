"""Application entrypoint for the SolarOps progress API."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI

from solarops.api.v1 import get_api_router
from solarops.core.config import get_config
from solarops.core.startup import bootstrap


def create_app() -> FastAPI:
    cfg = get_config()
    bootstrap()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION, debug=cfg.DEBUG)
    app.include_router(get_api_router())

    @app.get("/")
    def root() -> dict:
        return {"service": cfg.APP_NAME, "version": cfg.APP_VERSION, "api_prefix": cfg.API_PREFIX}

    return app


# Expose ASGI app for `uvicorn solarops.main:app`.
app = create_app()


if __name__ == "__main__":
    cfg = get_config()
    uvicorn.run("solarops.main:app", host=cfg.API_HOST, port=cfg.API_PORT)
