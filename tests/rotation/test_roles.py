#!/usr/bin/env python3

import pytest

from rotation.errors import RoleInvariantViolation
from rotation.roles import EndpointRole, roles_for, validate_roles


def test_default_roles():
    roles = roles_for(3)

    assert roles == (
        EndpointRole(index=0, is_settings_owner=True, is_alias_target=False),
        EndpointRole(index=1, is_settings_owner=False, is_alias_target=True),
        EndpointRole(index=2, is_settings_owner=False, is_alias_target=False),
    )
    assert roles[2].is_spare
    assert not roles[0].is_spare
    assert not roles[1].is_spare


@pytest.mark.parametrize("alias_slot", [0, 1, 2])
def test_exactly_one_of_each_role(alias_slot):
    roles = roles_for(3, alias_slot=alias_slot)

    assert sum(role.is_settings_owner for role in roles) == 1
    assert sum(role.is_alias_target for role in roles) == 1


def test_rotation_moves_alias_only():
    roles = roles_for(3, alias_slot=2)

    assert roles[0].is_settings_owner
    assert not roles[1].is_alias_target
    assert roles[1].is_spare
    assert roles[2].is_alias_target


@pytest.mark.parametrize(
    "pool_size,settings_slot,alias_slot",
    [
        (0, 0, 1),
        (-1, 0, 1),
        (3, 0, 3),
        (3, 5, 1),
        (3, 0, -1),
    ],
)
def test_roles_for_invalid(pool_size, settings_slot, alias_slot):
    with pytest.raises(RoleInvariantViolation):
        roles_for(pool_size, settings_slot=settings_slot, alias_slot=alias_slot)


@pytest.mark.parametrize(
    "roles",
    [
        (),
        (
            EndpointRole(0, True, False),
            EndpointRole(1, True, True),
        ),
        (
            EndpointRole(0, True, True),
            EndpointRole(1, False, True),
        ),
        (
            EndpointRole(0, False, False),
            EndpointRole(1, False, True),
        ),
        (
            EndpointRole(0, True, False),
            EndpointRole(1, False, False),
        ),
        (
            EndpointRole(1, True, False),
            EndpointRole(0, False, True),
        ),
    ],
)
def test_validate_roles_invalid(roles):
    with pytest.raises(RoleInvariantViolation):
        validate_roles(roles)


def test_validate_roles_same_slot():
    validate_roles((EndpointRole(0, True, True), EndpointRole(1, False, False)))
