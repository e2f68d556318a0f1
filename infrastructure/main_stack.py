"""
Main CDK Stack for the Customer Health API.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
)
from constructs import Construct

from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class CustomerHealthStack(Stack):
    """Main stack wiring the API construct."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Global tags for cost/accounting.
        Tags.of(self).add("Project", "customer-health")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("CostCenter", "customer-success")
        Tags.of(self).add("ManagedBy", "cdk")

        # API layer (single Lambda, no VPC: the store is in memory).
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            lambda_environment=settings.lambda_environment(),
            allow_origins=settings.allowed_origins(),
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
        )

        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "ApiFunctionName", value=api_construct.main_lambda.function_name)
