"""Workflow progress engine and its static pipeline definition."""

from solarops.workflow.engine import (
    CustomerProgress,
    PhaseProgress,
    StepProgress,
    WorkflowProgressEngine,
    percent_complete,
)
from solarops.workflow.pipeline import Phase, PipelineDefinition, Step, build_pipeline, get_default_pipeline
from solarops.workflow.rules import ConditionalRule, RuleKind
from solarops.workflow.stepper import StepperViewState

__all__ = [
    "ConditionalRule",
    "CustomerProgress",
    "Phase",
    "PhaseProgress",
    "PipelineDefinition",
    "RuleKind",
    "Step",
    "StepProgress",
    "StepperViewState",
    "WorkflowProgressEngine",
    "build_pipeline",
    "get_default_pipeline",
    "percent_complete",
]
