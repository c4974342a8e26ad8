"""Health endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter

from solarops.core.config import get_config
from solarops.workflow.pipeline import get_default_pipeline

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict:
    cfg = get_config()
    pipeline = get_default_pipeline()
    return {
        "status": "ok",
        "service": cfg.APP_NAME,
        "version": cfg.APP_VERSION,
        "pipeline_steps": len(pipeline.steps),
    }
