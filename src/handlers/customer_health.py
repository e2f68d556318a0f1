"""Handler for GET /customers/{id}/health."""

import uuid
from typing import Optional

from handlers import customer_list
from utils.error_handling import AppError, json_response, to_response
from utils.logging_config import get_logger
from utils.validators import ensure_present

logger = get_logger(__name__)


def _customer_id_from_path(path: str) -> Optional[str]:
    # /customers/{id}/health when API Gateway did not fill pathParameters
    parts = [part for part in path.split("/") if part]
    if len(parts) == 3 and parts[0] == "customers" and parts[2] == "health":
        return parts[1]
    return None


def lambda_handler(event, context):
    """Return health events, usage trends and notes for one customer."""
    correlation_id = str(uuid.uuid4())
    path_params = event.get("pathParameters") or {}
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    customer_id = path_params.get("id") or _customer_id_from_path(path)

    try:
        ensure_present(customer_id, "id")
        service = customer_list._get_customer_service()
        detail = service.get_customer_health_detail(customer_id.strip())
    except AppError as exc:
        return to_response(exc)
    except Exception:
        logger.exception(
            "Customer health lookup failed",
            extra={"correlation_id": correlation_id, "customer_id": customer_id},
        )
        return json_response(
            500, {"message": "Internal error", "correlation_id": correlation_id}
        )

    return json_response(200, detail.model_dump_json(by_alias=True))
