"""Static definition of the solar provisioning pipeline.

Single source of truth for step order, phase grouping, and which steps are
conditional. The definition is validated once when it is built; a broken
table raises ``PipelineConfigurationError`` instead of producing wrong
progress numbers later.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from solarops.core.exceptions import PipelineConfigurationError, UnknownPhaseError, UnknownStepError
from solarops.workflow.rules import DEFAULT_RULES, ConditionalRule, RuleKind

logger = logging.getLogger(__name__)

# (phase_id, label) in display order
PHASES = [
    ("onboarding", "Customer Onboarding"),
    ("registration_compliance", "Registration & Compliance"),
    ("electrical_department", "Electrical Department"),
    ("payment_billing", "Payment & Billing"),
    ("plant_installation", "Plant Installation"),
    ("subsidy_handover", "Subsidy & Handover"),
]

# (step_key, label, phase_id, rule) in canonical pipeline order
WORK_TYPE_STEPS = [
    ("customer_data_gathering", "Data Collection", "onboarding", None),
    ("complete_registration", "Registration", "registration_compliance", None),
    ("cot_request", "COT Request", "registration_compliance", RuleKind.CHANGE_OF_TENANCY),
    ("name_correction_request", "Name Correction", "registration_compliance", RuleKind.NAME_CORRECTION),
    ("load_request", "Load Request", "registration_compliance", RuleKind.LOAD_ENHANCEMENT),
    ("finance_registration", "Finance Reg", "registration_compliance", RuleKind.FINANCE_ROUTE),
    ("submit_finance_to_bank", "Submit to Bank", "registration_compliance", RuleKind.FINANCE_ROUTE),
    ("hard_copy_indent_creation", "Indent Creation", "electrical_department", None),
    ("submit_indent_to_electrical_department", "Submit Indent", "electrical_department", None),
    ("meter_installation", "Meter Install", "electrical_department", None),
    ("collect_remaining_amount", "Payment Collection", "payment_billing", RuleKind.DIRECT_PAYMENT),
    ("generate_bill", "Bill Generation", "payment_billing", None),
    ("approval_of_payment_collection", "Payment Approval", "payment_billing", None),
    ("plant_installation", "Plant Installation", "plant_installation", None),
    ("approval_of_plant_installation", "Installation Approval", "plant_installation", None),
    ("take_installed_item_photos", "Take Photos", "plant_installation", None),
    ("upload_installed_item_serial_number", "Upload Serial No", "plant_installation", None),
    ("inspection", "Inspection", "plant_installation", None),
    ("create_cdr", "Create CDR", "subsidy_handover", None),
    ("apply_subsidy", "Apply Subsidy", "subsidy_handover", None),
    ("subsidy_redemption", "Subsidy Redemption", "subsidy_handover", None),
    ("document_handover", "Document Handover", "subsidy_handover", None),
    ("quality_assurance", "Quality Assurance", "subsidy_handover", None),
    ("submit_warranty_document", "Submit Warranty", "subsidy_handover", None),
    ("assign_qa", "Assign QA", "subsidy_handover", None),
]


@dataclass(frozen=True)
class Step:
    key: str
    label: str
    phase_id: str
    rule: RuleKind | None = None

    @property
    def is_conditional(self) -> bool:
        return self.rule is not None


@dataclass(frozen=True)
class Phase:
    id: str
    label: str
    step_keys: tuple[str, ...]


@dataclass(frozen=True, eq=False)
class PipelineDefinition:
    """Immutable, validated pipeline. Build it with :func:`build_pipeline`."""

    steps: tuple[Step, ...]
    phases: tuple[Phase, ...]
    rules: Mapping[RuleKind, ConditionalRule]
    step_index: Mapping[str, Step]
    phase_index: Mapping[str, Phase]

    @property
    def step_keys(self) -> tuple[str, ...]:
        return tuple(step.key for step in self.steps)

    def has_step(self, step_key: str) -> bool:
        return step_key in self.step_index

    def get_step(self, step_key: str) -> Step:
        try:
            return self.step_index[step_key]
        except KeyError:
            raise UnknownStepError(step_key) from None

    def get_phase(self, phase_id: str) -> Phase:
        try:
            return self.phase_index[phase_id]
        except KeyError:
            raise UnknownPhaseError(phase_id) from None

    def phase_steps(self, phase_id: str) -> tuple[Step, ...]:
        return tuple(self.step_index[key] for key in self.get_phase(phase_id).step_keys)

    def is_conditional(self, step_key: str) -> bool:
        return self.get_step(step_key).is_conditional

    def rule_for(self, step_key: str) -> ConditionalRule | None:
        step = self.get_step(step_key)
        if step.rule is None:
            return None
        return self.rules[step.rule]


def _validate_rules(steps: Sequence[Step], rules: Mapping[RuleKind, ConditionalRule]) -> None:
    for kind, rule in rules.items():
        if rule.kind is not kind:
            raise PipelineConfigurationError(
                f"Rule registered under {kind.value} declares kind {rule.kind.value}."
            )
    for step in steps:
        if step.rule is not None and step.rule not in rules:
            raise PipelineConfigurationError(
                f"Step {step.key} uses rule {step.rule.value} which has no predicate."
            )


def _group_phases(steps: Sequence[Step], phase_specs: Sequence[tuple[str, str]]) -> tuple[Phase, ...]:
    labels: dict[str, str] = {}
    for phase_id, label in phase_specs:
        if phase_id in labels:
            raise PipelineConfigurationError(f"Duplicate phase id: {phase_id}")
        labels[phase_id] = label

    members: dict[str, list[str]] = {phase_id: [] for phase_id in labels}
    for step in steps:
        if step.phase_id not in members:
            raise PipelineConfigurationError(
                f"Step {step.key} references undefined phase {step.phase_id}."
            )
        members[step.phase_id].append(step.key)

    for phase_id, keys in members.items():
        if not keys:
            raise PipelineConfigurationError(f"Phase {phase_id} has no steps.")

    # Phases must be contiguous slices of the step order, in phase order.
    concatenated = [key for phase_id in labels for key in members[phase_id]]
    if concatenated != [step.key for step in steps]:
        raise PipelineConfigurationError(
            "Phases must partition the step order into contiguous runs in phase order."
        )

    return tuple(
        Phase(id=phase_id, label=label, step_keys=tuple(members[phase_id]))
        for phase_id, label in labels.items()
    )


def build_pipeline(
    step_specs: Iterable[tuple[str, str, str, RuleKind | None]] = WORK_TYPE_STEPS,
    phase_specs: Iterable[tuple[str, str]] = PHASES,
    rules: Mapping[RuleKind, ConditionalRule] = DEFAULT_RULES,
) -> PipelineDefinition:
    """Validate step and phase tables and return an immutable pipeline."""
    steps = tuple(Step(key=key, label=label, phase_id=phase_id, rule=rule) for key, label, phase_id, rule in step_specs)
    if not steps:
        raise PipelineConfigurationError("Pipeline must define at least one step.")

    step_index: dict[str, Step] = {}
    for step in steps:
        if step.key in step_index:
            raise PipelineConfigurationError(f"Duplicate step key: {step.key}")
        step_index[step.key] = step

    _validate_rules(steps, rules)
    phases = _group_phases(steps, list(phase_specs))

    return PipelineDefinition(
        steps=steps,
        phases=phases,
        rules=MappingProxyType(dict(rules)),
        step_index=MappingProxyType(step_index),
        phase_index=MappingProxyType({phase.id: phase for phase in phases}),
    )


@lru_cache(maxsize=1)
def get_default_pipeline() -> PipelineDefinition:
    """Build and cache the canonical 25-step pipeline."""
    pipeline = build_pipeline()
    logger.debug(
        "workflow.pipeline.built",
        extra={
            "event": "workflow.pipeline.built",
            "step_count": len(pipeline.steps),
            "phase_count": len(pipeline.phases),
        },
    )
    return pipeline
