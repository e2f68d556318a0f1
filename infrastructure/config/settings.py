"""
Environment-specific configuration settings.

Cost-optimized defaults for development/testing.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings with cost-optimized defaults."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"  # Default AWS region

    # Lambda Configuration
    lambda_memory_mb: int = 256  # Store is in memory and small
    lambda_timeout_seconds: int = 10
    log_level: str = "INFO"

    # Customer list paging, passed through to the Lambda environment
    default_page_size: int = 20
    max_page_size: int = 100

    # Comma-separated origins allowed to call the API from the dashboard
    cors_allow_origins: str = "*"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        region = os.environ.get("AWS_REGION", cls.aws_region)
        origins = os.environ.get("CORS_ALLOW_ORIGINS", cls.cors_allow_origins)

        # Production overrides
        if env == "prod":
            return cls(
                environment="prod",
                aws_region=region,
                lambda_memory_mb=512,
                lambda_timeout_seconds=15,
                log_level="WARNING",
                cors_allow_origins=origins,
            )

        return cls(environment=env, aws_region=region, cors_allow_origins=origins)

    def lambda_environment(self) -> dict:
        """Environment variables read by utils.settings inside the Lambda."""
        return {
            "ENVIRONMENT": self.environment,
            "LOG_LEVEL": self.log_level,
            "DEFAULT_PAGE_SIZE": str(self.default_page_size),
            "MAX_PAGE_SIZE": str(self.max_page_size),
        }

    def allowed_origins(self) -> list:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]
