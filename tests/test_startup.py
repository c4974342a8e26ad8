from __future__ import annotations

import logging

import pytest

import solarops.core.startup as startup_module
from solarops.core.exceptions import PipelineConfigurationError


class _Cfg:
    ENV = "development"
    DEBUG = True

    @property
    def is_production(self) -> bool:
        return False


def test_startup_logs_validated_pipeline(monkeypatch, caplog):
    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg())

    with caplog.at_level(logging.INFO, logger="solarops.core.startup"):
        startup_module.validate_startup_config()

    record = next(r for r in caplog.records if getattr(r, "event", None) == "startup.pipeline.validated")
    assert record.step_count == 25
    assert record.phase_count == 6
    assert record.conditional_steps == 6


def test_startup_raises_when_pipeline_is_inconsistent(monkeypatch):
    def _broken_pipeline():
        raise PipelineConfigurationError("Duplicate step key: inspection")

    monkeypatch.setattr(startup_module, "get_config", lambda: _Cfg())
    monkeypatch.setattr(startup_module, "get_default_pipeline", _broken_pipeline)

    with pytest.raises(PipelineConfigurationError, match="Duplicate step key"):
        startup_module.validate_startup_config()
