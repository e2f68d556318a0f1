"""Lightweight health check handler."""

from datetime import datetime, timezone

from utils.error_handling import json_response
from utils.settings import RuntimeSettings


def lambda_handler(event, context):
    """Return a 200 response with the environment and loaded customer count."""
    from handlers.customer_list import _get_customer_service

    settings = RuntimeSettings.from_environment()
    return json_response(
        200,
        {
            "status": "ok",
            "environment": settings.environment,
            "customers": len(_get_customer_service().store),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )
