"""Per-slot decisions: certificate issuance and DNS alias binding."""

from typing import Optional

from .domain import DomainSpec
from .roles import EndpointRole


def needs_certificate(role: EndpointRole, domain: Optional[DomainSpec]) -> bool:
    # Only the settings owner carries domain_names, so only it can use a cert.
    return role.is_settings_owner and domain is not None


def needs_alias_record(role: EndpointRole, record_name: Optional[str]) -> bool:
    return role.is_alias_target and bool(record_name)
