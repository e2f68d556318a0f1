"""
Customer Health Service.

Answers the two questions the dashboard asks: which customers match a list
query, and what does one customer's health history look like. The store is
injected so tests and future backends can supply their own records; without
one the bundled seed accounts are used.
"""

from __future__ import annotations

from typing import Optional

from models.customer import CustomerHealthDetail
from models.query import CustomerPage, CustomerQuery
from repositories.customer_store import CustomerStore
from services.query_pipeline import run_query
from utils.error_handling import NotFoundError
from utils.logging_config import get_logger

logger = get_logger(__name__)


class CustomerService:
    """Service for customer list queries and health-detail lookups."""

    def __init__(self, store: Optional[CustomerStore] = None):
        self.store = store if store is not None else CustomerStore.from_seed()
        logger.info("Customer store loaded", extra={"customers": len(self.store)})

    def query_customers(self, query: CustomerQuery) -> CustomerPage:
        """Filter, sort and paginate the customer list."""
        page = run_query(self.store.list_all(), query)
        logger.info(
            "Customer query served",
            extra={
                "query": query.to_query_params(),
                "total": page.pagination.total,
                "returned": len(page.data),
            },
        )
        return page

    def get_customer_health_detail(self, customer_id: str) -> CustomerHealthDetail:
        """Return health events, usage trends and notes for one customer."""
        try:
            detail = self.store.get_health_detail(customer_id)
        except NotFoundError:
            logger.warning("Customer not found", extra={"customer_id": customer_id})
            raise

        logger.info(
            "Customer health detail served",
            extra={
                "customer_id": customer_id,
                "segment": detail.health_segment.value,
                "events": len(detail.recent_events),
            },
        )
        return detail
