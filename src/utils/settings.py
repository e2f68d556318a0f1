"""
Runtime settings for the API Lambda.

Values come from environment variables set by the CDK stack. Defaults match
the dashboard's page size so local runs behave like a deployed function.
"""

import os
from dataclasses import dataclass

from utils.logging_config import get_logger

logger = get_logger(__name__)


def _int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer setting", extra={"setting": name, "value": raw})
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive setting", extra={"setting": name, "value": raw})
        return default
    return value


@dataclass(frozen=True)
class RuntimeSettings:
    """Settings read by handlers and models at request time."""

    environment: str = "dev"
    default_page_size: int = 20
    max_page_size: int = 100
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "RuntimeSettings":
        """Load settings from environment variables."""
        max_page_size = _int_from_env("MAX_PAGE_SIZE", cls.max_page_size)
        default_page_size = min(
            _int_from_env("DEFAULT_PAGE_SIZE", cls.default_page_size), max_page_size
        )
        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            default_page_size=default_page_size,
            max_page_size=max_page_size,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )
