"""Role table for the distribution pool.

Slot 0 owns the hostname and certificate ("settings"), slot 1 is published
in DNS ("alias") and slot 2 is a pre-provisioned spare. Rotating the IP
addresses of the domain means moving the alias role to another slot.
"""

from typing import NamedTuple, Sequence, Tuple

from .errors import RoleInvariantViolation

DEFAULT_POOL_SIZE = 3
DEFAULT_SETTINGS_SLOT = 0
DEFAULT_ALIAS_SLOT = 1


class EndpointRole(NamedTuple):
    index: int
    is_settings_owner: bool
    is_alias_target: bool
    binds_domain: bool = True

    @property
    def is_spare(self) -> bool:
        return not self.is_settings_owner and not self.is_alias_target


def validate_roles(roles: Sequence[EndpointRole]) -> None:
    """Raise RoleInvariantViolation unless the table holds one of each role."""
    if not roles:
        raise RoleInvariantViolation("Role table is empty")

    indexes = [role.index for role in roles]
    if indexes != list(range(len(roles))):
        raise RoleInvariantViolation(
            f"Slot indexes must be 0..{len(roles) - 1} in order, got {indexes}"
        )

    settings_owners = sum(1 for role in roles if role.is_settings_owner)
    if settings_owners != 1:
        raise RoleInvariantViolation(
            f"Expected exactly one settings owner, found {settings_owners}"
        )

    alias_targets = sum(1 for role in roles if role.is_alias_target)
    if alias_targets != 1:
        raise RoleInvariantViolation(
            f"Expected exactly one alias target, found {alias_targets}"
        )


def roles_for(
    pool_size: int = DEFAULT_POOL_SIZE,
    settings_slot: int = DEFAULT_SETTINGS_SLOT,
    alias_slot: int = DEFAULT_ALIAS_SLOT,
) -> Tuple[EndpointRole, ...]:
    """Build and validate the ordered role table for a pool of distributions."""
    roles = tuple(
        EndpointRole(
            index=index,
            is_settings_owner=index == settings_slot,
            is_alias_target=index == alias_slot,
        )
        for index in range(max(pool_size, 0))
    )
    validate_roles(roles)
    return roles
