#!/usr/bin/env python3
"""CDK entry point for the CloudFront IP rotation pool.

Usage:
  cdk deploy --context hostedZoneId=Z123 --context zoneName=example.com \
             --context primaryRecordName=app

Rotate the published IP addresses by moving the alias role to another slot:
  cdk deploy ... --context aliasSlot=2

Teardown needs no domain inputs:
  cdk destroy --context destroy=true
"""

import logging
import os
import sys

import aws_cdk as cdk

from rotation import planner
from rotation.config import REQUIRED_CONTEXT, RotationInputs, load_inputs
from rotation.errors import MissingRequiredInput, RotationError
from rotation.roles import roles_for
from stacks.rotation_stack import IpRotationStack

STACK_ID = "CloudFrontIpRotationStack"


def build(app: cdk.App, inputs: RotationInputs, env=None) -> cdk.Stack:
    """Add the rotation stack, or its empty teardown shell, to ``app``."""
    if inputs.destroy:
        # CloudFormation deletes by stack name, the template is irrelevant
        logging.info("Synthesizing empty %s for teardown", STACK_ID)
        return cdk.Stack(app, STACK_ID, env=env)

    plans = planner.plan(
        inputs.domain_binding(), roles_for(alias_slot=inputs.alias_slot)
    )
    return IpRotationStack(
        app,
        STACK_ID,
        hosted_zone_id=inputs.hosted_zone_id,
        plans=plans,
        env=env,
    )


def main():
    app = cdk.App()

    # CloudFront certificates must live in us-east-1
    env = cdk.Environment(
        account=os.environ.get("CDK_DEFAULT_ACCOUNT"),
        region="us-east-1",
    )

    # ── Context values (cdk.json / --context) ──────────────────────
    try:
        inputs = load_inputs(app.node.try_get_context)
    except MissingRequiredInput as ex:
        logging.basicConfig(level=logging.INFO)
        logging.error("%s", ex)
        logging.error("Please provide the following parameters:")
        for key in REQUIRED_CONTEXT:
            logging.error("  --context %s=<value>", key)
        sys.exit(1)
    except RotationError as ex:
        logging.basicConfig(level=logging.INFO)
        logging.error("Invalid context: %s", ex)
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, inputs.log_level.upper()),
        format="%(asctime)s - %(levelname)s - %(module)s.%(funcName)s - %(message)s",
    )

    # ── Stack ──────────────────────────────────────────────────────
    try:
        build(app, inputs, env=env)
    except RotationError as ex:
        logging.error("Invalid rotation topology: %s", ex)
        sys.exit(1)

    app.synth()


if __name__ == "__main__":
    main()
