"""Resolve the role table and the domain binding into one plan per slot.

Planning has no side effects. The same inputs always produce the same
ordered plans, so re-synthesizing an unchanged pool is a no-op deploy.
"""

import logging

from typing import NamedTuple, Optional, Sequence, Tuple

from .domain import DomainSpec
from .roles import EndpointRole, validate_roles
from .rules import needs_alias_record, needs_certificate


class EndpointPlan(NamedTuple):
    role: EndpointRole
    domain: Optional[DomainSpec]
    requires_certificate: bool
    requires_alias_record: bool

    @property
    def name(self) -> str:
        return f"IP-Rotation-{self.role.index}"

    @property
    def full_domain_name(self) -> Optional[str]:
        return self.domain.full_domain_name if self.domain else None


def _plan_slot(domain: Optional[DomainSpec], role: EndpointRole) -> EndpointPlan:
    slot_domain = domain if role.binds_domain else None
    record_name = slot_domain.record_name if slot_domain else None

    return EndpointPlan(
        role=role,
        domain=slot_domain,
        requires_certificate=needs_certificate(role, slot_domain),
        requires_alias_record=needs_alias_record(role, record_name),
    )


def plan(
    domain: Optional[DomainSpec], roles: Sequence[EndpointRole]
) -> Tuple[EndpointPlan, ...]:
    """Return one plan per role, or raise before producing any of them."""
    validate_roles(roles)

    plans = tuple(_plan_slot(domain, role) for role in roles)
    for slot_plan in plans:
        logging.debug(
            "Slot %d (%s): settings=%s, alias=%s, domain=%s, certificate=%s, alias record=%s",
            slot_plan.role.index,
            slot_plan.name,
            slot_plan.role.is_settings_owner,
            slot_plan.role.is_alias_target,
            slot_plan.full_domain_name,
            slot_plan.requires_certificate,
            slot_plan.requires_alias_record,
        )

    return plans
