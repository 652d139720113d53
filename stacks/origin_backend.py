"""OriginBackend — Lambda function behind a regional REST API.

Every distribution in the rotation pool uses this API as its origin, so
the slots are interchangeable.
"""

from pathlib import Path

from aws_cdk import CfnOutput, Duration
from aws_cdk import aws_apigateway as apigateway
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

_LAMBDA_DIR = Path(__file__).resolve().parent.parent / "lambda"


class OriginBackend(Construct):
    """Hello-world Lambda exposed through API Gateway."""

    def __init__(self, scope: Construct, construct_id: str) -> None:
        super().__init__(scope, construct_id)

        # ── Lambda ──────────────────────────────────────────────────
        function = lambda_.Function(
            self,
            "HelloWorldFunction",
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler="hello_world.handler",
            code=lambda_.Code.from_asset(str(_LAMBDA_DIR)),
            memory_size=128,
            timeout=Duration.seconds(10),
            description="A simple hello world Lambda function",
        )

        # ── API Gateway (regional, CloudFront sits in front) ────────
        self.api = apigateway.RestApi(
            self,
            "HelloWorldApi",
            rest_api_name="Hello World API",
            description="API for Hello World application",
            endpoint_types=[apigateway.EndpointType.REGIONAL],
            deploy_options=apigateway.StageOptions(
                stage_name="prod",
                metrics_enabled=True,
                logging_level=apigateway.MethodLoggingLevel.INFO,
            ),
            default_cors_preflight_options=apigateway.CorsOptions(
                allow_origins=apigateway.Cors.ALL_ORIGINS,
                allow_methods=apigateway.Cors.ALL_METHODS,
            ),
        )
        self.api.root.add_method("ANY", apigateway.LambdaIntegration(function))

        CfnOutput(
            self,
            "ApiUrl",
            value=self.api.url,
            description="URL of the API Gateway",
        )
