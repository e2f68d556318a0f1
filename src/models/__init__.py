"""Pydantic models for API payloads."""

from models.customer import (  # noqa: F401
    Customer,
    CustomerHealthDetail,
    EventType,
    HealthEvent,
    HealthSegment,
    Note,
    UsageTrend,
    segment_for_score,
)
from models.query import (  # noqa: F401
    CustomerPage,
    CustomerQuery,
    Pagination,
    SegmentCounts,
    SortField,
    SortOrder,
)
