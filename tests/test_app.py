#!/usr/bin/env python3

import logging
import shutil

import pytest

if shutil.which("node") is None:
    pytest.skip("the CDK runtime requires Node.js", allow_module_level=True)

import aws_cdk as cdk

from unittest.mock import patch

from aws_cdk.assertions import Template

import app as rotation_app

from rotation.config import RotationInputs
from rotation.errors import MissingRequiredInput, RoleInvariantViolation
from stacks.rotation_stack import IpRotationStack

_INPUTS = RotationInputs(
    hosted_zone_id="Z0123456789",
    zone_name="example.com",
    primary_record_name="app",
)


@patch("rotation.planner.plan")
def test_build_destroy_skips_planner(mock_plan):
    inputs = RotationInputs(
        hosted_zone_id="", zone_name="", primary_record_name="", destroy=True
    )

    stack = rotation_app.build(cdk.App(), inputs)

    mock_plan.assert_not_called()
    assert stack.stack_name == rotation_app.STACK_ID
    assert not isinstance(stack, IpRotationStack)
    Template.from_stack(stack).resource_count_is("AWS::CloudFront::Distribution", 0)


def test_build_deploy():
    stack = rotation_app.build(cdk.App(), _INPUTS)

    assert isinstance(stack, IpRotationStack)
    assert stack.stack_name == rotation_app.STACK_ID
    template = Template.from_stack(stack)
    template.resource_count_is("AWS::CloudFront::Distribution", 3)
    template.has_output("Domain", {"Value": "app.example.com"})


def test_build_invalid_alias_slot():
    with pytest.raises(RoleInvariantViolation):
        rotation_app.build(cdk.App(), _INPUTS._replace(alias_slot=3))


@patch("app.load_inputs")
def test_main_missing_context_prints_usage(mock_load_inputs, caplog):
    mock_load_inputs.side_effect = MissingRequiredInput(["zoneName"])

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as ex:
        rotation_app.main()

    assert ex.value.code == 1
    assert "zoneName" in caplog.text
    assert "--context hostedZoneId=<value>" in caplog.text


@patch("app.load_inputs")
def test_main_invalid_alias_slot_has_no_usage(mock_load_inputs, caplog):
    mock_load_inputs.side_effect = RoleInvariantViolation("bad alias slot")

    with caplog.at_level(logging.ERROR), pytest.raises(SystemExit) as ex:
        rotation_app.main()

    assert ex.value.code == 1
    assert "bad alias slot" in caplog.text
    assert "--context" not in caplog.text
