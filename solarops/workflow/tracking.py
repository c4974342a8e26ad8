"""Application tracker helpers: search, progress buckets and summary counts."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from solarops.core.enums import TrackingBucket
from solarops.schemas.customers import CustomerAggregate
from solarops.workflow.engine import WorkflowProgressEngine


@dataclass(frozen=True)
class TrackerSummary:
    total: int
    completed: int
    in_progress: int
    pending: int


def bucket_for(percent: int) -> TrackingBucket:
    if percent >= 100:
        return TrackingBucket.COMPLETED
    if percent > 0:
        return TrackingBucket.IN_PROGRESS
    return TrackingBucket.PENDING


def headline_status(percent: int) -> str:
    """Short status shown next to the application id."""
    return {
        TrackingBucket.COMPLETED: "DONE",
        TrackingBucket.IN_PROGRESS: "ACTIVE",
        TrackingBucket.PENDING: "PENDING",
    }[bucket_for(percent)]


def matches_search(customer: CustomerAggregate, term: str) -> bool:
    if not term:
        return True
    lowered = term.lower()
    return (
        lowered in (customer.applicant_name or "").lower()
        or term in (customer.mobile_number or "")
        or lowered in (customer.district or "").lower()
        or term in str(customer.id)
    )


def filter_customers(
    engine: WorkflowProgressEngine,
    customers: Iterable[CustomerAggregate],
    search: str = "",
    bucket: TrackingBucket = TrackingBucket.ALL,
) -> list[CustomerAggregate]:
    results = []
    for customer in customers:
        if not matches_search(customer, search):
            continue
        if bucket is not TrackingBucket.ALL and bucket_for(engine.overall_progress(customer)) is not bucket:
            continue
        results.append(customer)
    return results


def summarize(engine: WorkflowProgressEngine, customers: Iterable[CustomerAggregate]) -> TrackerSummary:
    total = completed = in_progress = pending = 0
    for customer in customers:
        total += 1
        bucket = bucket_for(engine.overall_progress(customer))
        if bucket is TrackingBucket.COMPLETED:
            completed += 1
        elif bucket is TrackingBucket.IN_PROGRESS:
            in_progress += 1
        else:
            pending += 1
    return TrackerSummary(total=total, completed=completed, in_progress=in_progress, pending=pending)
