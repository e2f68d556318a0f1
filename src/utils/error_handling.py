"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class NotFoundError(AppError):
    """Raised when a requested customer is missing."""

    def __init__(self, message: str = "Customer not found"):
        super().__init__(message, status_code=404)


class InvalidArgumentError(AppError):
    """Raised when query or path parameters are malformed."""

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, status_code=400)


def json_response(status: int, body: Any) -> Dict[str, Any]:
    """Format a JSON API Gateway HTTP API response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": body if isinstance(body, str) else json.dumps(body),
    }


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return json_response(
        error.status_code, {"message": error.message, "status": "error"}
    )
