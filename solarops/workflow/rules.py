"""Conditional applicability rules for workflow steps.

Each rule kind carries exactly one predicate over the customer's attributes.
A predicate returning ``True`` means the step is required for that customer;
``False`` means the step is shown as not applicable while no task exists.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from solarops.schemas.customers import CustomerAggregate

FINANCE_PAYMENT_MODE = "Finance"
SPECIAL_FINANCE_YES = "Yes"
REQUIRED = "Required"


class RuleKind(str, enum.Enum):
    FINANCE_ROUTE = "finance_route"
    DIRECT_PAYMENT = "direct_payment"
    CHANGE_OF_TENANCY = "change_of_tenancy"
    NAME_CORRECTION = "name_correction"
    LOAD_ENHANCEMENT = "load_enhancement"


CustomerPredicate = Callable[[CustomerAggregate], bool]


@dataclass(frozen=True)
class ConditionalRule:
    kind: RuleKind
    predicate: CustomerPredicate
    description: str

    def is_required(self, customer: CustomerAggregate) -> bool:
        return bool(self.predicate(customer))


def _uses_finance(customer: CustomerAggregate) -> bool:
    return (
        customer.payment_mode == FINANCE_PAYMENT_MODE
        or customer.special_finance_required == SPECIAL_FINANCE_YES
    )


def _pays_directly(customer: CustomerAggregate) -> bool:
    return (
        customer.payment_mode != FINANCE_PAYMENT_MODE
        and customer.special_finance_required != SPECIAL_FINANCE_YES
    )


def _needs_cot(customer: CustomerAggregate) -> bool:
    return customer.cot_required == REQUIRED


def _needs_name_correction(customer: CustomerAggregate) -> bool:
    return customer.name_correction_required == REQUIRED


def _needs_load_enhancement(customer: CustomerAggregate) -> bool:
    return customer.load_enhancement_required == REQUIRED


DEFAULT_RULES: Mapping[RuleKind, ConditionalRule] = MappingProxyType(
    {
        RuleKind.FINANCE_ROUTE: ConditionalRule(
            kind=RuleKind.FINANCE_ROUTE,
            predicate=_uses_finance,
            description="Payment mode is Finance or special finance is required",
        ),
        RuleKind.DIRECT_PAYMENT: ConditionalRule(
            kind=RuleKind.DIRECT_PAYMENT,
            predicate=_pays_directly,
            description="Customer pays without finance",
        ),
        RuleKind.CHANGE_OF_TENANCY: ConditionalRule(
            kind=RuleKind.CHANGE_OF_TENANCY,
            predicate=_needs_cot,
            description="Change of tenancy is required",
        ),
        RuleKind.NAME_CORRECTION: ConditionalRule(
            kind=RuleKind.NAME_CORRECTION,
            predicate=_needs_name_correction,
            description="Name correction is required",
        ),
        RuleKind.LOAD_ENHANCEMENT: ConditionalRule(
            kind=RuleKind.LOAD_ENHANCEMENT,
            predicate=_needs_load_enhancement,
            description="Load enhancement is required",
        ),
    }
)
