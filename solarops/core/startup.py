"""Startup validation and bootstrap helpers."""

from __future__ import annotations

import logging

from solarops.core.config import get_config
from solarops.core.logging_config import configure_logging
from solarops.workflow.pipeline import get_default_pipeline

logger = logging.getLogger(__name__)


def validate_startup_config() -> None:
    """Fail-fast config and pipeline definition checks."""
    config = get_config()
    pipeline = get_default_pipeline()

    if config.is_production and config.DEBUG:
        logger.warning(
            "startup.production.debug_enabled",
            extra={"event": "startup.production.debug_enabled"},
        )

    logger.info(
        "startup.pipeline.validated",
        extra={
            "event": "startup.pipeline.validated",
            "env": config.ENV,
            "step_count": len(pipeline.steps),
            "phase_count": len(pipeline.phases),
            "conditional_steps": sum(1 for step in pipeline.steps if step.is_conditional),
        },
    )


def bootstrap() -> None:
    """Initialize logging and validate runtime configuration."""
    configure_logging()
    validate_startup_config()
