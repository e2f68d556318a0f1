"""Handler for GET /customers."""

from __future__ import annotations

import uuid
from typing import Optional

from models.query import CustomerQuery
from utils.error_handling import AppError, json_response, to_response
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Lazy-loaded service shared by every route, so the store is built once per warm container
_customer_service: Optional["CustomerService"] = None


def _get_customer_service():
    """Lazy-load CustomerService."""
    global _customer_service
    if _customer_service is None:
        from services.customer_service import CustomerService
        _customer_service = CustomerService()
    return _customer_service


def lambda_handler(event, context):
    """
    Return one page of customers.

    Query parameters follow the dashboard's deep-link contract:
    search, segment, page, pageSize, sortBy, sortOrder.
    """
    correlation_id = str(uuid.uuid4())
    query_params = event.get("queryStringParameters") or {}

    try:
        query = CustomerQuery.from_query_params(query_params)
        page = _get_customer_service().query_customers(query)
    except AppError as exc:
        logger.warning(
            "Customer query rejected",
            extra={"correlation_id": correlation_id, "error": exc.message},
        )
        return to_response(exc)
    except Exception:
        logger.exception("Customer query failed", extra={"correlation_id": correlation_id})
        return json_response(
            500, {"message": "Internal error", "correlation_id": correlation_id}
        )

    return json_response(200, page.model_dump_json(by_alias=True))
