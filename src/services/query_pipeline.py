"""
Customer list query pipeline: filter -> sort -> paginate.

Every function here is pure. Inputs are never mutated and identical inputs
give identical outputs, so the pipeline can run concurrently against the
shared store without coordination.
"""

import math
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from models.customer import Customer, HealthSegment
from models.query import (
    CustomerPage,
    CustomerQuery,
    Pagination,
    SegmentCounts,
    SortField,
    SortOrder,
)


def _name_key(customer: Customer) -> str:
    return customer.name.casefold()


def _mrr_key(customer: Customer) -> float:
    return float(customer.mrr)


def _last_active_key(customer: Customer) -> datetime:
    return customer.last_active


def _health_score_key(customer: Customer) -> int:
    return customer.health_score


SORT_KEYS: Dict[SortField, Callable[[Customer], Any]] = {
    SortField.NAME: _name_key,
    SortField.MRR: _mrr_key,
    SortField.LAST_ACTIVE: _last_active_key,
    SortField.HEALTH_SCORE: _health_score_key,
}


def filter_by_search(customers: Sequence[Customer], search: str) -> Tuple[Customer, ...]:
    """Keep customers whose name or domain contains search, ignoring case.

    The search string is matched as given; only "" means no filter.
    """
    needle = (search or "").casefold()
    if not needle:
        return tuple(customers)
    return tuple(
        customer
        for customer in customers
        if needle in customer.name.casefold() or needle in customer.domain.casefold()
    )


def filter_by_segment(
    customers: Sequence[Customer], segment: Optional[HealthSegment]
) -> Tuple[Customer, ...]:
    if segment is None:
        return tuple(customers)
    return tuple(customer for customer in customers if customer.health_segment == segment)


def sort_customers(
    customers: Sequence[Customer], sort_by: SortField, sort_order: SortOrder
) -> Tuple[Customer, ...]:
    """
    Stable sort by one of the known fields.

    sorted() with reverse=True keeps equal keys in their input order, so
    ties come out the same way in both directions.
    """
    key = SORT_KEYS[SortField(sort_by)]
    return tuple(
        sorted(customers, key=key, reverse=SortOrder(sort_order) is SortOrder.DESC)
    )


def paginate(
    customers: Sequence[Customer], page: int, page_size: int
) -> Tuple[Tuple[Customer, ...], Pagination]:
    """Slice one page out of customers; pages past the end are empty."""
    total = len(customers)
    total_pages = math.ceil(total / page_size) if total else 0
    start = (page - 1) * page_size
    window = tuple(customers[start:start + page_size])
    return window, Pagination(
        page=page, page_size=page_size, total=total, total_pages=total_pages
    )


def count_segments(customers: Sequence[Customer]) -> SegmentCounts:
    counts = {segment: 0 for segment in HealthSegment}
    for customer in customers:
        counts[customer.health_segment] += 1
    return SegmentCounts(
        total=len(customers),
        healthy=counts[HealthSegment.HEALTHY],
        watch=counts[HealthSegment.WATCH],
        at_risk=counts[HealthSegment.AT_RISK],
    )


def run_query(customers: Sequence[Customer], query: CustomerQuery) -> CustomerPage:
    """Apply search, segment, sort and pagination in that order."""
    matched = filter_by_search(customers, query.search)
    matched = filter_by_segment(matched, query.segment)
    ordered = sort_customers(matched, query.sort_by, query.sort_order)
    window, pagination = paginate(ordered, query.page, query.page_size)
    return CustomerPage(
        data=window,
        pagination=pagination,
        summary=count_segments(matched),
    )
