"""Query-string validation helpers."""

from typing import Any, Optional

from utils.error_handling import InvalidArgumentError


def is_blank(value: Any) -> bool:
    """True for values a query string uses to mean 'not provided'."""
    if isinstance(value, str):
        return not value.strip()
    return value in (None, [])


def ensure_present(value: Any, field: str) -> None:
    """Raise InvalidArgumentError if value is blank."""
    if is_blank(value):
        raise InvalidArgumentError(f"{field} is required")


def parse_int(value: Any, field: str, default: Optional[int] = None) -> Optional[int]:
    """Parse an integer query parameter, falling back to default when blank."""
    if is_blank(value):
        return default
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        raise InvalidArgumentError(f"{field} must be an integer") from None
