"""Customer and health-detail models."""

from datetime import date
from enum import Enum
from typing import Optional, Tuple

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

HEALTHY_THRESHOLD = 80
WATCH_THRESHOLD = 50


class CamelModel(BaseModel):
    """Immutable base that speaks camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class HealthSegment(str, Enum):
    """Health buckets, ordered from least to most severe."""

    HEALTHY = "Healthy"
    WATCH = "Watch"
    AT_RISK = "At Risk"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    HealthSegment.HEALTHY: 0,
    HealthSegment.WATCH: 1,
    HealthSegment.AT_RISK: 2,
}


def segment_for_score(score: int) -> HealthSegment:
    """Map a 0-100 health score to its segment. Thresholds are inclusive upward."""
    if score >= HEALTHY_THRESHOLD:
        return HealthSegment.HEALTHY
    if score >= WATCH_THRESHOLD:
        return HealthSegment.WATCH
    return HealthSegment.AT_RISK


class Customer(CamelModel):
    """A customer account as listed on the health dashboard."""

    id: str = Field(min_length=1)
    name: str
    domain: str
    mrr: float = Field(ge=0)
    last_active: AwareDatetime
    health_score: int = Field(ge=0, le=100)
    owner: str
    avatar: Optional[str] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def health_segment(self) -> HealthSegment:
        return segment_for_score(self.health_score)


class EventType(str, Enum):
    """Kinds of account activity surfaced in the detail panel."""

    LOGIN = "login"
    FEATURE_USED = "feature_used"
    SUPPORT_TICKET = "support_ticket"
    UPGRADE = "upgrade"
    DOWNGRADE = "downgrade"


class HealthEvent(CamelModel):
    id: str
    type: EventType
    description: str
    timestamp: AwareDatetime


class UsageTrend(CamelModel):
    """One day of product usage."""

    date: date
    active_users: int = Field(ge=0)
    api_calls: int = Field(ge=0)
    features: Tuple[str, ...] = ()


class Note(CamelModel):
    id: str
    author: str
    content: str
    created_at: AwareDatetime


class CustomerHealthDetail(CamelModel):
    """Health history for one customer, newest entries first."""

    id: str
    health_score: int = Field(ge=0, le=100)
    health_segment: HealthSegment
    recent_events: Tuple[HealthEvent, ...] = ()
    usage_trends: Tuple[UsageTrend, ...] = ()
    notes: Tuple[Note, ...] = ()
