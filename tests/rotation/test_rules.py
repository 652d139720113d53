#!/usr/bin/env python3

import pytest

from rotation.domain import DomainSpec
from rotation.roles import EndpointRole
from rotation.rules import needs_alias_record, needs_certificate

_DOMAIN = DomainSpec(zone_name="example.com", record_name="app")


@pytest.mark.parametrize(
    "is_settings_owner,domain,expected",
    [
        (True, _DOMAIN, True),
        (True, None, False),
        (False, _DOMAIN, False),
        (False, None, False),
    ],
)
def test_needs_certificate(is_settings_owner, domain, expected):
    role = EndpointRole(0, is_settings_owner, False)

    assert needs_certificate(role, domain) is expected


@pytest.mark.parametrize(
    "is_alias_target,record_name,expected",
    [
        (True, "app", True),
        (True, "@", True),
        (True, "", False),
        (True, None, False),
        (False, "app", False),
        (False, "", False),
    ],
)
def test_needs_alias_record(is_alias_target, record_name, expected):
    role = EndpointRole(1, False, is_alias_target)

    assert needs_alias_record(role, record_name) is expected


def test_alias_target_never_needs_certificate():
    role = EndpointRole(1, False, True)

    assert needs_certificate(role, _DOMAIN) is False
