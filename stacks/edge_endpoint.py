"""EdgeEndpoint — one CloudFront distribution of the rotation pool."""

from typing import Optional

from aws_cdk import aws_apigateway as apigateway
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from constructs import Construct

from rotation.planner import EndpointPlan


class EdgeEndpoint(Construct):
    """Distribution in front of the shared API origin.

    Only the settings slot carries the certificate and the hostname in
    ``domain_names``; the other slots answer on their default domain.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        plan: EndpointPlan,
        api: apigateway.RestApi,
        certificate: Optional[acm.ICertificate] = None,
    ) -> None:
        super().__init__(scope, construct_id)

        self.plan = plan

        domain_names = None
        if plan.requires_certificate:
            if certificate is None:
                raise ValueError(f"{plan.name} requires a certificate")
            domain_names = [plan.full_domain_name]
        else:
            certificate = None

        self.distribution = cloudfront.Distribution(
            self,
            "Distribution",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.RestApiOrigin(api),
                allowed_methods=cloudfront.AllowedMethods.ALLOW_GET_HEAD_OPTIONS,
                cached_methods=cloudfront.CachedMethods.CACHE_GET_HEAD_OPTIONS,
                compress=True,
                cache_policy=cloudfront.CachePolicy.CACHING_DISABLED,
                origin_request_policy=cloudfront.OriginRequestPolicy.ALL_VIEWER_EXCEPT_HOST_HEADER,
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            ),
            http_version=cloudfront.HttpVersion.HTTP2_AND_3,
            comment=f"CloudFront distribution for {plan.name}",
            enabled=True,
            certificate=certificate,
            domain_names=domain_names,
        )
