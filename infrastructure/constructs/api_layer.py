"""
API layer construct: shared Lambda + HTTP API routes.

A single Lambda keeps the customer store warm across routes.
Uses Docker bundling for dependencies (runs in CI/CD pipeline).
"""

from typing import Dict, List

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
)
from constructs import Construct

# Routes served by handlers.main.lambda_handler.
ROUTE_DEFS = (
    (apigw.HttpMethod.GET, "/health"),
    (apigw.HttpMethod.GET, "/customers"),
    (apigw.HttpMethod.GET, "/customers/{id}/health"),
)


class ApiLayerConstruct(Construct):
    """Expose the customer list and health-detail endpoints via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        lambda_environment: Dict[str, str],
        allow_origins: List[str],
        lambda_memory_mb: int = 256,
        lambda_timeout_seconds: int = 10,
    ) -> None:
        super().__init__(scope, construct_id)

        # Installs pydantic and python-json-logger next to the handler code
        bundled_code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements-lambda.txt -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )

        self.main_lambda = _lambda.Function(
            self,
            "ApiHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.main.lambda_handler",
            code=bundled_code,
            memory_size=lambda_memory_mb,
            timeout=Duration.seconds(lambda_timeout_seconds),
            architecture=_lambda.Architecture.X86_64,
            environment=lambda_environment,
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        # Read-only API, so only GET and preflight are allowed cross-origin.
        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"customer-health-api-{environment}",
            cors_preflight=apigw.CorsPreflightOptions(
                allow_origins=allow_origins,
                allow_methods=[apigw.CorsHttpMethod.GET, apigw.CorsHttpMethod.OPTIONS],
            ),
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.main_lambda
        )

        for method, path in ROUTE_DEFS:
            self.api.add_routes(
                path=path,
                methods=[method],
                integration=integration,
            )
