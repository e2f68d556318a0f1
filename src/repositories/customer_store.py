"""
In-memory customer store.

Holds the full customer collection for the life of the process. The store is
built once (normally from the seed fixture) and injected into the service,
so tests can swap in their own records. Nothing here mutates after __init__.

Health detail is synthesized on demand from a generator seeded by the
customer id, so the same id always yields the same events, usage and notes,
and each account's history reflects its own segment, owner and activity.
"""

import random
import zlib
from datetime import timedelta
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from models.customer import (
    Customer,
    CustomerHealthDetail,
    EventType,
    HealthEvent,
    HealthSegment,
    Note,
    UsageTrend,
)
from repositories.seed_customers import SEED_CUSTOMERS
from utils.error_handling import NotFoundError

TREND_DAYS = 7

PRODUCT_FEATURES = (
    "analytics",
    "reports",
    "integrations",
    "automations",
    "alerts",
    "exports",
)

# Event mix per segment; healthier accounts expand, weaker ones raise tickets.
_EVENT_MIX: Mapping[HealthSegment, Tuple[EventType, ...]] = {
    HealthSegment.HEALTHY: (
        EventType.LOGIN,
        EventType.FEATURE_USED,
        EventType.FEATURE_USED,
        EventType.UPGRADE,
    ),
    HealthSegment.WATCH: (
        EventType.LOGIN,
        EventType.FEATURE_USED,
        EventType.SUPPORT_TICKET,
    ),
    HealthSegment.AT_RISK: (
        EventType.SUPPORT_TICKET,
        EventType.SUPPORT_TICKET,
        EventType.DOWNGRADE,
        EventType.LOGIN,
    ),
}

_EVENT_DESCRIPTIONS: Mapping[EventType, Tuple[str, ...]] = {
    EventType.LOGIN: (
        "User logged in from new device",
        "Admin signed in to review workspace settings",
        "Team member logged in after invite",
    ),
    EventType.FEATURE_USED: (
        "Used {feature} dashboard",
        "Configured new {feature} workflow",
        "Shared {feature} view with the team",
    ),
    EventType.SUPPORT_TICKET: (
        "Opened ticket: API integration help",
        "Opened ticket: {feature} data not refreshing",
        "Opened ticket: billing question",
    ),
    EventType.UPGRADE: (
        "Upgraded plan to add more seats",
        "Added {feature} add-on",
    ),
    EventType.DOWNGRADE: (
        "Reduced seat count at renewal",
        "Removed {feature} add-on",
    ),
}

_NOTE_TEMPLATES: Mapping[HealthSegment, Tuple[str, ...]] = {
    HealthSegment.HEALTHY: (
        "Customer is very engaged with the product. Looking to expand usage.",
        "Discussed renewal timeline. All looks positive.",
        "Champion asked about early access to new {feature} features.",
    ),
    HealthSegment.WATCH: (
        "Usage has flattened over the last few weeks. Scheduling a check-in.",
        "Team is only using {feature}; proposed an enablement session.",
        "Renewal is on track but the sponsor has changed roles.",
    ),
    HealthSegment.AT_RISK: (
        "Escalated open support issues to the account team.",
        "Sponsor mentioned evaluating alternatives before renewal.",
        "Login activity dropped sharply; booked an exec review.",
    ),
}


class CustomerStore:
    """Read-only collection of customers keyed by id."""

    def __init__(self, customers: Iterable[Customer]):
        records = tuple(customers)
        by_id = {}
        for customer in records:
            if customer.id in by_id:
                raise ValueError(f"Duplicate customer id: {customer.id}")
            by_id[customer.id] = customer
        self._customers: Tuple[Customer, ...] = records
        self._by_id: Mapping[str, Customer] = MappingProxyType(by_id)

    @classmethod
    def from_records(cls, records: Sequence[Mapping]) -> "CustomerStore":
        """Build a store from raw dicts (snake_case or camelCase keys)."""
        return cls(Customer.model_validate(record) for record in records)

    @classmethod
    def from_seed(cls) -> "CustomerStore":
        return cls.from_records(SEED_CUSTOMERS)

    def __len__(self) -> int:
        return len(self._customers)

    def list_all(self) -> Tuple[Customer, ...]:
        """Every customer in insertion order."""
        return self._customers

    def find(self, customer_id: str) -> Optional[Customer]:
        return self._by_id.get(customer_id)

    def get(self, customer_id: str) -> Customer:
        customer = self.find(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer {customer_id} not found")
        return customer

    def get_health_detail(self, customer_id: str) -> CustomerHealthDetail:
        """Return the health history for one customer."""
        customer = self.get(customer_id)
        rng = random.Random(zlib.crc32(customer.id.encode("utf-8")))
        return CustomerHealthDetail(
            id=customer.id,
            health_score=customer.health_score,
            health_segment=customer.health_segment,
            recent_events=_build_events(customer, rng),
            usage_trends=_build_usage_trends(customer, rng),
            notes=_build_notes(customer, rng),
        )


def _build_events(customer: Customer, rng: random.Random) -> Tuple[HealthEvent, ...]:
    mix = _EVENT_MIX[customer.health_segment]
    timestamp = customer.last_active
    events = []
    for index in range(rng.randint(3, 5)):
        event_type = rng.choice(mix)
        description = rng.choice(_EVENT_DESCRIPTIONS[event_type]).format(
            feature=rng.choice(PRODUCT_FEATURES)
        )
        events.append(
            HealthEvent(
                id=f"{customer.id}-evt-{index + 1}",
                type=event_type,
                description=description,
                timestamp=timestamp,
            )
        )
        timestamp -= timedelta(hours=rng.randint(6, 40), minutes=rng.randint(0, 59))
    return tuple(events)


def _build_usage_trends(customer: Customer, rng: random.Random) -> Tuple[UsageTrend, ...]:
    # Seat base grows with revenue; engagement scales it by health.
    seats = max(3, int(customer.mrr // 250))
    engagement = customer.health_score / 100
    feature_count = {
        HealthSegment.HEALTHY: 3,
        HealthSegment.WATCH: 2,
        HealthSegment.AT_RISK: 1,
    }[customer.health_segment]

    day = customer.last_active.date()
    trends = []
    for _ in range(TREND_DAYS):
        active_users = max(0, round(seats * engagement * rng.uniform(0.7, 1.1)))
        trends.append(
            UsageTrend(
                date=day,
                active_users=active_users,
                api_calls=active_users * rng.randint(15, 35),
                features=tuple(
                    sorted(rng.sample(PRODUCT_FEATURES, rng.randint(1, feature_count)))
                ),
            )
        )
        day -= timedelta(days=1)
    return tuple(trends)


def _build_notes(customer: Customer, rng: random.Random) -> Tuple[Note, ...]:
    templates = rng.sample(_NOTE_TEMPLATES[customer.health_segment], 2)
    created_at = customer.last_active - timedelta(days=rng.randint(2, 5))
    notes = []
    for index, template in enumerate(templates):
        notes.append(
            Note(
                id=f"{customer.id}-note-{index + 1}",
                author=customer.owner,
                content=template.format(feature=rng.choice(PRODUCT_FEATURES)),
                created_at=created_at,
            )
        )
        created_at -= timedelta(days=rng.randint(3, 10), hours=rng.randint(0, 8))
    return tuple(notes)
