"""Extract the operator-facing identifiers of a provisioned pool."""

from typing import Callable, Mapping, NamedTuple, Sequence

from .errors import RoleNotFound
from .planner import EndpointPlan


class TopologyReport(NamedTuple):
    domain: str
    alias_slot_id: str
    settings_slot_id: str


def _find_slot(
    plans: Sequence[EndpointPlan],
    handles: Mapping[int, str],
    role_name: str,
    has_role: Callable[[EndpointPlan], bool],
) -> EndpointPlan:
    matches = [slot_plan for slot_plan in plans if has_role(slot_plan)]
    if len(matches) != 1:
        raise RoleNotFound(
            f"Expected exactly one {role_name} slot, found {len(matches)}"
        )

    slot_plan = matches[0]
    if slot_plan.role.index not in handles:
        raise RoleNotFound(
            f"No provisioned endpoint for {role_name} slot {slot_plan.role.index}"
        )

    return slot_plan


def report(
    plans: Sequence[EndpointPlan], handles: Mapping[int, str]
) -> TopologyReport:
    """Return the domain plus the ids of the alias and settings endpoints.

    ``handles`` maps a slot index to the identifier assigned by the provider.
    """
    alias_plan = _find_slot(
        plans, handles, "alias target", lambda p: p.role.is_alias_target
    )
    settings_plan = _find_slot(
        plans, handles, "settings owner", lambda p: p.role.is_settings_owner
    )

    return TopologyReport(
        domain=settings_plan.full_domain_name or "",
        alias_slot_id=handles[alias_plan.role.index],
        settings_slot_id=handles[settings_plan.role.index],
    )
