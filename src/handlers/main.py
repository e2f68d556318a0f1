"""
Single entrypoint Lambda that routes HTTP API requests to thin handler modules.

Why one Lambda?
- The customer store is built once and shared by every route in a warm container.
- Simpler to deploy while still keeping code organized by delegating to modules.
"""

from typing import Callable, Tuple

from utils.error_handling import json_response

from . import customer_health, customer_list, health_check


def lambda_handler(event, context):
    """
    Entry point invoked by API Gateway HTTP API.

    The event contains the HTTP method and path; we route it to the correct
    handler while keeping shared setup (logging, error handling) centralized.
    """
    method = event.get("requestContext", {}).get("http", {}).get("method", "")
    path = event.get("requestContext", {}).get("http", {}).get("path", "")
    route_key = f"{method.upper()} {path.rstrip('/') or '/'}"

    # Exact routes are matched first, then prefixes for path params.
    exact_routes: Tuple[Tuple[str, Callable], ...] = (
        ("GET /health", health_check.lambda_handler),
        ("GET /customers", customer_list.lambda_handler),
    )
    prefix_routes: Tuple[Tuple[str, str, Callable], ...] = (
        ("GET /customers/", "/health", customer_health.lambda_handler),
    )

    for key, handler in exact_routes:
        if route_key == key:
            return handler(event, context)

    for prefix, suffix, handler in prefix_routes:
        if route_key.startswith(prefix) and route_key.endswith(suffix):
            return handler(event, context)

    return json_response(404, {"message": "Route not found", "route": route_key})
