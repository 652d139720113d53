"""Domain name composition for the rotation pool.

A domain binding is either a ``DomainSpec`` (bound) or ``None`` (unbound).
Unbound means no certificate, no hostname and no DNS record for any slot.
"""

from typing import NamedTuple, Optional

APEX_RECORD = "@"


def compose_domain_name(zone_name: str, record_name: str) -> Optional[str]:
    """Return the fully-qualified domain name, or None when no zone is given."""
    if not zone_name:
        return None

    if not record_name or record_name == APEX_RECORD:
        return zone_name

    return f"{record_name}.{zone_name}"


class DomainSpec(NamedTuple):
    zone_name: str
    record_name: str

    @property
    def full_domain_name(self) -> Optional[str]:
        return compose_domain_name(self.zone_name, self.record_name)

    @property
    def is_apex(self) -> bool:
        return not self.record_name or self.record_name == APEX_RECORD


def bind_domain(zone_name: str, record_name: str) -> Optional[DomainSpec]:
    if not zone_name:
        return None

    return DomainSpec(zone_name=zone_name, record_name=record_name or "")
