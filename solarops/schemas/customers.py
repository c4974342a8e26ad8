"""Customer aggregate and task record schemas consumed by the progress engine."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from solarops.core.enums import TaskStatus

# Older task payloads spell the in-flight status with a hyphen.
_LEGACY_STATUS_ALIASES = {"in-progress": TaskStatus.IN_PROGRESS.value, "in_progress": TaskStatus.IN_PROGRESS.value}


class TaskRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: int | str | None = None
    work_type: str = Field(min_length=1, max_length=120)
    status: TaskStatus
    work: str | None = None
    assigned_to_name: str | None = None
    assigned_to_role: str | None = None
    created_at: datetime | None = None

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value: object) -> object:
        if isinstance(value, str):
            cleaned = value.strip().lower()
            return _LEGACY_STATUS_ALIASES.get(cleaned, cleaned)
        return value


class CustomerAggregate(BaseModel):
    """Registered customer attributes plus every task created for the customer."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: int | str
    applicant_name: str = ""
    mobile_number: str = ""
    district: str = ""
    payment_mode: str | None = None
    special_finance_required: str | None = None
    cot_required: str | None = None
    name_correction_required: str | None = None
    load_enhancement_required: str | None = None
    email_id: str | None = None
    application_status: str | None = None
    plant_size_kw: float | None = None
    plant_price: float | None = None
    created_at: datetime | None = None
    tasks: list[TaskRecord] = Field(default_factory=list)

    @field_validator("tasks", mode="before")
    @classmethod
    def tasks_default_to_empty(cls, value: object) -> object:
        return [] if value is None else value
