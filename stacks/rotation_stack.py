"""IpRotationStack — a pool of CloudFront distributions behind one domain.

Creates:
  - The shared origin backend (Lambda + API Gateway)
  - One distribution per plan, all pointing at the same origin
  - An ACM certificate for the settings slot (DNS-validated via Route 53)
  - Route 53 A/AAAA alias records pointing the domain at the alias slot

The certificate and alias records live at stack level under fixed ids, so
moving the alias role to another slot only changes the record targets.
"""

import logging

from typing import Optional, Sequence

from aws_cdk import CfnOutput, Stack
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from constructs import Construct

from rotation.config import CTX_HOSTED_ZONE_ID
from rotation.errors import MissingRequiredInput
from rotation.planner import EndpointPlan
from rotation.reporter import report
from stacks.edge_endpoint import EdgeEndpoint
from stacks.origin_backend import OriginBackend


class IpRotationStack(Stack):
    """Distribution pool, certificate and DNS alias records."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        hosted_zone_id: str,
        plans: Sequence[EndpointPlan],
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Certificate and alias records can only be created inside a zone
        bound = [
            plan.name
            for plan in plans
            if plan.requires_certificate or plan.requires_alias_record
        ]
        if bound and not hosted_zone_id:
            logging.error(
                "No hosted zone for domain-bound slots: %s", ", ".join(bound)
            )
            raise MissingRequiredInput([CTX_HOSTED_ZONE_ID])

        backend = OriginBackend(self, "OriginBackend")

        # ── Route 53 Hosted Zone (existing) ─────────────────────────
        self.hosted_zone = self._lookup_zone(hosted_zone_id, plans)

        # ── Distributions ───────────────────────────────────────────
        self.endpoints = []
        self.certificate = None
        for plan in plans:
            certificate = None
            if plan.requires_certificate:
                certificate = self._create_certificate(plan)

            # Ids follow the slot index, never the role, so a rotation
            # does not replace any distribution.
            self.endpoints.append(
                EdgeEndpoint(
                    self,
                    f"EdgeEndpoint{plan.role.index}",
                    plan=plan,
                    api=backend.api,
                    certificate=certificate,
                )
            )

        # ── Route 53 alias records ──────────────────────────────────
        for endpoint in self.endpoints:
            if endpoint.plan.requires_alias_record:
                self._create_alias_records(endpoint)

        # ── Outputs ─────────────────────────────────────────────────
        topology = report(
            plans,
            {
                endpoint.plan.role.index: endpoint.distribution.distribution_id
                for endpoint in self.endpoints
            },
        )
        if topology.domain:
            CfnOutput(
                self, "Domain", value=topology.domain, description="Domain name"
            )
        CfnOutput(
            self,
            "DistroForAlias",
            value=topology.alias_slot_id,
            description="Distribution used for Alias (IP addresses)",
        )
        CfnOutput(
            self,
            "DistroForSettings",
            value=topology.settings_slot_id,
            description="Distribution used for Settings (CNAME + Certificate)",
        )

    def _lookup_zone(
        self, hosted_zone_id: str, plans: Sequence[EndpointPlan]
    ) -> Optional[route53.IHostedZone]:
        zone_names = {plan.domain.zone_name for plan in plans if plan.domain}
        if not hosted_zone_id or not zone_names:
            logging.info("No hosted zone bound, skipping certificate and DNS records")
            return None

        return route53.HostedZone.from_hosted_zone_attributes(
            self,
            "HostedZone",
            hosted_zone_id=hosted_zone_id,
            zone_name=zone_names.pop(),
        )

    def _create_certificate(self, plan: EndpointPlan) -> acm.ICertificate:
        # CloudFront only accepts certificates from us-east-1.
        logging.info("Requesting certificate for %s", plan.full_domain_name)
        self.certificate = acm.Certificate(
            self,
            "Certificate",
            domain_name=plan.full_domain_name,
            validation=acm.CertificateValidation.from_dns(self.hosted_zone),
        )
        return self.certificate

    def _create_alias_records(self, endpoint: EdgeEndpoint) -> None:
        domain = endpoint.plan.domain
        logging.info(
            "Publishing %s on %s", domain.full_domain_name, endpoint.plan.name
        )

        # "@" is the zone apex
        record_name = None if domain.is_apex else domain.record_name
        target = route53.RecordTarget.from_alias(
            targets.CloudFrontTarget(endpoint.distribution),
        )
        route53.ARecord(
            self,
            "AliasA",
            zone=self.hosted_zone,
            record_name=record_name,
            target=target,
        )
        route53.AaaaRecord(
            self,
            "AliasAAAA",
            zone=self.hosted_zone,
            record_name=record_name,
            target=target,
        )
